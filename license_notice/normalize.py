"""Detect the input license JSON shape and normalize it into records.

Two shapes are understood:

* ``cargo-license -j``: a JSON array of objects with explicit ``name``,
  ``version`` and ``authors`` fields. These map onto records one to one.
* ``license-checker --json``: a JSON object keyed by ``name@version`` (the
  name may carry an ``@scope/`` prefix) whose values hold ``licenses``,
  ``publisher``, ``email`` and friends.

The array shape is tried first; the mapping shape only when that fails.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from .errors import FormatParseError
from .records import LicenseRecord
from .schemas import CARGO_ADAPTER, CHECKER_ADAPTER, CargoLicenseIn, CheckerLicenseIn

logger = logging.getLogger("license_notice.normalize")

SCOPE_MARK = "@"
VERSION_SEPARATOR = "@"
LICENSE_JOINER = ","


def split_package_key(key: str) -> tuple[str, str]:
    """Split ``name@version`` into its parts, keeping a leading ``@scope``."""
    scoped = key.startswith(SCOPE_MARK)
    rest = key[len(SCOPE_MARK) :] if scoped else key
    name_part, sep, version_part = rest.partition(VERSION_SEPARATOR)
    if not sep:
        raise ValueError(f"package key has no version: {key!r}")
    name = f"{SCOPE_MARK}{name_part}" if scoped else name_part
    return name, version_part


def format_authors(publisher: str | None, email: str | None) -> str:
    if publisher is not None and email is not None:
        return f"{publisher} <{email}>"
    if publisher is not None:
        return publisher
    if email is not None:
        return f"<{email}>"
    return ""


def join_licenses(licenses: str | list[str] | None) -> str | None:
    if licenses is None:
        return None
    if isinstance(licenses, str):
        return licenses
    return LICENSE_JOINER.join(licenses)


def describe_validation_error(exc: ValidationError) -> str:
    """Summarize the first decode error as ``location: message``."""
    errors = exc.errors(include_url=False)
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first["loc"]) or "document"
    summary = f"{location}: {first['msg']}"
    remaining = len(errors) - 1
    if remaining == 1:
        summary += " and 1 more error"
    elif remaining > 1:
        summary += f" and {remaining} more errors"
    return summary


def record_from_cargo(entry: CargoLicenseIn) -> LicenseRecord:
    return LicenseRecord(
        name=entry.name,
        version=entry.version,
        authors=entry.authors,
        repository=entry.repository,
        license=entry.license,
        license_file=entry.license_file,
        description=entry.description,
    )


def convert_checker_entry(key: str, entry: CheckerLicenseIn) -> LicenseRecord:
    name, version = split_package_key(key)
    return LicenseRecord(
        name=name,
        version=version,
        authors=format_authors(entry.publisher, entry.email),
        repository=entry.repository,
        license=join_licenses(entry.licenses),
        license_file=entry.license_file,
        description=None,
    )


def convert_checker_licenses(entries: dict[str, CheckerLicenseIn]) -> list[LicenseRecord]:
    """Convert a ``license-checker`` mapping into records.

    The result follows the mapping's iteration order, which carries no meaning;
    callers sort before rendering.
    """
    return [convert_checker_entry(key, value) for key, value in entries.items()]


def load_records(source: str, path: str) -> list[LicenseRecord]:
    """Parse ``source`` (the contents of ``path``) into normalized records.

    Raises:
        FormatParseError: if the text matches neither known shape, or a
            ``license-checker`` key lacks a version.
    """
    try:
        cargo = CARGO_ADAPTER.validate_json(source)
    except ValidationError as list_exc:
        logger.debug("Input %s is not cargo-license output: %s", path, list_exc)
        try:
            checker = CHECKER_ADAPTER.validate_json(source)
        except ValidationError as mapping_exc:
            raise FormatParseError(
                path,
                f"not a cargo-license array ({describe_validation_error(list_exc)}); "
                f"not a license-checker object ({describe_validation_error(mapping_exc)})",
                list_error=list_exc,
                mapping_error=mapping_exc,
            ) from mapping_exc
        try:
            records = convert_checker_licenses(checker)
        except ValueError as exc:
            raise FormatParseError(path, str(exc), list_error=list_exc) from exc
        logger.info("Loaded %d license-checker entries from %s", len(records), path)
        return records

    records = [record_from_cargo(entry) for entry in cargo]
    logger.info("Loaded %d cargo-license entries from %s", len(records), path)
    return records
