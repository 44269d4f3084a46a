"""Command-line interface for license-notice.

Example::

    license-notice -t NOTICE.tmpl -h 3 -f 1 -i licenses.json -o THIRD_PARTY_NOTICES.md
"""

from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from .config import load_settings
from .errors import MissingArgumentError, NoticeError
from .logging_setup import configure_logging
from .pipeline import NoticeOptions, run_notice

logger = logging.getLogger("license_notice.cli")

PROG = "license-notice"


def _package_version() -> str:
    try:
        return version(PROG)
    except PackageNotFoundError:
        return "unknown"


def _line_count(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {raw!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    # -h is --header-lines, so help is only available as --help.
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Render third-party license JSON into a notices document.",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="Show this help message and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument("-t", "--template-file", type=Path, help="A template file")
    parser.add_argument("-i", "--input-file", type=Path, help="An input source JSON file")
    parser.add_argument(
        "-o",
        "--output-file",
        type=Path,
        help="An output file path; output to STDOUT if not specified",
    )
    parser.add_argument(
        "-h",
        "--header-lines",
        type=_line_count,
        default=0,
        help="A number of the header lines in the template file (default: %(default)s)",
    )
    parser.add_argument(
        "-f",
        "--footer-lines",
        type=_line_count,
        default=0,
        help="A number of the footer lines in the template file (default: %(default)s)",
    )
    parser.add_argument("--match-name", help="A regex pattern filtering for a name")
    parser.add_argument("--match-license", help="A regex pattern filtering for a license")
    parser.add_argument(
        "--match-name-invert",
        action="store_true",
        help="Invert the --match-name result",
    )
    parser.add_argument(
        "--match-license-invert",
        action="store_true",
        help="Invert the --match-license result",
    )
    parser.add_argument(
        "--escape-authors",
        action="store_true",
        help="Escape authors: `It's Me <me@example.com>` -> `It's Me &lt;me@example.com&gt;`",
    )
    return parser


def options_from_args(args: argparse.Namespace) -> NoticeOptions:
    if args.template_file is None:
        raise MissingArgumentError("-t(--template-file) argument is required.")
    if args.input_file is None:
        raise MissingArgumentError("-i(--input-file) argument is required.")
    return NoticeOptions(
        template_file=args.template_file,
        input_file=args.input_file,
        output_file=args.output_file,
        header_lines=args.header_lines,
        footer_lines=args.footer_lines,
        match_name=args.match_name,
        match_license=args.match_license,
        match_name_invert=args.match_name_invert,
        match_license_invert=args.match_license_invert,
        escape_authors=args.escape_authors,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(load_settings())

    try:
        run_notice(options_from_args(args))
    except NoticeError as exc:
        logger.debug("Notice run failed", exc_info=True, extra={"error_code": exc.code})
        sys.stderr.write(f"error: {exc}\n")
        return exc.exit_status
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
