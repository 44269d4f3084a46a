"""Filter, sort and render license records into the notices document."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Self

from .errors import InvalidPatternError
from .records import LicenseRecord
from .template import EOL, TemplateSections

logger = logging.getLogger("license_notice.render")

MATCH_ANY = ".*"

# Substituted in this order, each token everywhere it occurs.
TEMPLATE_TOKENS: tuple[tuple[str, str], ...] = (
    ("{name}", "name"),
    ("{version}", "version"),
    ("{authors}", "authors"),
    ("{repository}", "repository"),
    ("{license}", "license"),
    ("{license_file}", "license_file"),
    ("{description}", "description"),
)


def compile_pattern(option: str, pattern: str | None) -> re.Pattern[str]:
    source = MATCH_ANY if pattern is None else pattern
    try:
        return re.compile(source)
    except re.error as exc:
        raise InvalidPatternError(option, source, str(exc)) from exc


@dataclass(slots=True, frozen=True)
class LicenseFilter:
    name_pattern: re.Pattern[str]
    license_pattern: re.Pattern[str]
    name_invert: bool = False
    license_invert: bool = False

    @classmethod
    def from_options(
        cls: type[Self],
        match_name: str | None = None,
        match_license: str | None = None,
        *,
        name_invert: bool = False,
        license_invert: bool = False,
    ) -> Self:
        return cls(
            name_pattern=compile_pattern("--match-name", match_name),
            license_pattern=compile_pattern("--match-license", match_license),
            name_invert=name_invert,
            license_invert=license_invert,
        )

    def accepts(self: Self, record: LicenseRecord) -> bool:
        name_ok = bool(self.name_pattern.search(record.name)) != self.name_invert
        if not name_ok:
            return False
        license_text = record.license or ""
        return bool(self.license_pattern.search(license_text)) != self.license_invert


def filter_records(
    records: Iterable[LicenseRecord], license_filter: LicenseFilter
) -> list[LicenseRecord]:
    return [record for record in records if license_filter.accepts(record)]


def sort_records(records: Iterable[LicenseRecord]) -> list[LicenseRecord]:
    return sorted(records, key=lambda record: record.key)


def escape_angle_brackets(text: str) -> str:
    return text.replace("<", "&lt;").replace(">", "&gt;")


def render_record(record: LicenseRecord, body: str, escape_authors: bool = False) -> str:
    """Fill one copy of the body template with ``record``'s fields.

    Absent optional fields render as empty strings.
    """
    values = record.to_dict()
    if escape_authors:
        values["authors"] = escape_angle_brackets(record.authors)
    rendered = body
    for token, field_name in TEMPLATE_TOKENS:
        rendered = rendered.replace(token, values[field_name] or "")
    return rendered


def assemble(sections: TemplateSections, bodies: Iterable[str]) -> str:
    header = f"{sections.header}{EOL}" if sections.header else ""
    return f"{header}{EOL.join(bodies)}{EOL}{sections.footer}"


def render_notice(
    records: Iterable[LicenseRecord],
    sections: TemplateSections,
    license_filter: LicenseFilter,
    *,
    escape_authors: bool = False,
) -> str:
    candidates = list(records)
    retained = sort_records(filter_records(candidates, license_filter))
    logger.info("Retained %d of %d license records", len(retained), len(candidates))
    bodies = [render_record(record, sections.body, escape_authors) for record in retained]
    return assemble(sections, bodies)
