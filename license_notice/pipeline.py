"""One synchronous notices run: template + input JSON in, document out."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .normalize import load_records
from .render import LicenseFilter, render_notice
from .storage import read_text_file, write_output
from .template import split_template

logger = logging.getLogger("license_notice.pipeline")


@dataclass(slots=True, frozen=True)
class NoticeOptions:
    template_file: Path
    input_file: Path
    output_file: Path | None = None
    header_lines: int = 0
    footer_lines: int = 0
    match_name: str | None = None
    match_license: str | None = None
    match_name_invert: bool = False
    match_license_invert: bool = False
    escape_authors: bool = False


def build_notice(options: NoticeOptions) -> str:
    """Produce the notices document text without writing it anywhere."""
    # Bad patterns are configuration errors; report them before touching files.
    license_filter = LicenseFilter.from_options(
        options.match_name,
        options.match_license,
        name_invert=options.match_name_invert,
        license_invert=options.match_license_invert,
    )
    sections = split_template(
        read_text_file(options.template_file),
        options.header_lines,
        options.footer_lines,
    )
    records = load_records(read_text_file(options.input_file), str(options.input_file))
    return render_notice(
        records,
        sections,
        license_filter,
        escape_authors=options.escape_authors,
    )


def run_notice(options: NoticeOptions) -> str:
    text = build_notice(options)
    write_output(text, options.output_file)
    if options.output_file is None:
        logger.info("Wrote notices to standard output")
    return text
