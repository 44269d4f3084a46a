from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from license_notice.errors import FormatParseError
from license_notice.normalize import (
    format_authors,
    join_licenses,
    load_records,
    split_package_key,
)
from license_notice.records import LicenseRecord

CARGO_SAMPLE = [
    {
        "name": "anyhow",
        "version": "1.0.75",
        "authors": "David Tolnay <dtolnay@gmail.com>",
        "repository": "https://github.com/dtolnay/anyhow",
        "license": "MIT OR Apache-2.0",
        "license_file": None,
        "description": "Flexible concrete Error type",
    },
    {"name": "tiny", "version": "0.1.0", "authors": ""},
]

CHECKER_SAMPLE = {
    "@scope/pkg@1.2.3": {
        "licenses": ["MIT", "Apache-2.0"],
        "repository": "https://github.com/scope/pkg",
        "publisher": "Scope Team",
        "email": "team@scope.dev",
        "licenseFile": "/node_modules/@scope/pkg/LICENSE",
    },
    "plainpkg@2.0.0": {"licenses": "ISC", "publisher": "Solo"},
    "mailonly@0.0.1": {"email": "me@example.com", "license_file": "LICENSE"},
    "bare@3.0.0": {},
}


def _by_name(records: list[LicenseRecord]) -> dict[str, LicenseRecord]:
    return {record.name: record for record in records}


def test_split_package_key_handles_scope() -> None:
    assert split_package_key("@scope/pkg@1.2.3") == ("@scope/pkg", "1.2.3")
    assert split_package_key("plainpkg@2.0.0") == ("plainpkg", "2.0.0")


def test_split_package_key_splits_on_first_separator() -> None:
    assert split_package_key("pkg@1.0.0@beta") == ("pkg", "1.0.0@beta")


@pytest.mark.parametrize("key", ["nover", "@scope/nover"])
def test_split_package_key_requires_version(key: str) -> None:
    with pytest.raises(ValueError):
        split_package_key(key)


@pytest.mark.parametrize(
    ("publisher", "email", "expected"),
    [
        ("Me", "me@example.com", "Me <me@example.com>"),
        ("Me", None, "Me"),
        (None, "me@example.com", "<me@example.com>"),
        (None, None, ""),
    ],
)
def test_format_authors(publisher: str | None, email: str | None, expected: str) -> None:
    assert format_authors(publisher, email) == expected


def test_join_licenses() -> None:
    assert join_licenses(["MIT", "Apache-2.0"]) == "MIT,Apache-2.0"
    assert join_licenses("BSD-3-Clause") == "BSD-3-Clause"
    assert join_licenses(None) is None


def test_cargo_shape_passes_through_unchanged() -> None:
    records = load_records(json.dumps(CARGO_SAMPLE), "cargo.json")
    assert [r.to_dict() for r in records] == [
        CARGO_SAMPLE[0],
        {
            "name": "tiny",
            "version": "0.1.0",
            "authors": "",
            "repository": None,
            "license": None,
            "license_file": None,
            "description": None,
        },
    ]


def test_checker_shape_is_converted() -> None:
    records = _by_name(load_records(json.dumps(CHECKER_SAMPLE), "checker.json"))
    assert set(records) == {"@scope/pkg", "plainpkg", "mailonly", "bare"}

    scoped = records["@scope/pkg"]
    assert scoped.version == "1.2.3"
    assert scoped.authors == "Scope Team <team@scope.dev>"
    assert scoped.license == "MIT,Apache-2.0"
    assert scoped.repository == "https://github.com/scope/pkg"
    assert scoped.license_file is None

    assert records["plainpkg"].authors == "Solo"
    assert records["plainpkg"].license == "ISC"
    assert records["mailonly"].authors == "<me@example.com>"
    assert records["mailonly"].license_file == "LICENSE"
    assert records["bare"].authors == ""
    assert records["bare"].license is None
    assert all(record.description is None for record in records.values())


def test_empty_object_is_checker_shape() -> None:
    assert load_records("{}", "empty.json") == []


def test_empty_array_is_cargo_shape() -> None:
    assert load_records("[]", "empty.json") == []


@pytest.mark.parametrize(
    "source",
    [
        "not json at all",
        "42",
        '[{"name": "pkg", "version": "1.0.0"}]',
        '[{"name": "pkg", "version": 1, "authors": ""}]',
        '{"pkg@1.0.0": {"licenses": 7}}',
    ],
)
def test_unknown_shape_is_rejected(source: str) -> None:
    with pytest.raises(FormatParseError) as excinfo:
        load_records(source, "bad.json")
    err = excinfo.value
    assert "bad.json" in str(err)
    assert err.list_error is not None
    assert err.mapping_error is not None
    assert err.code == "unknown_format"
    assert err.list_error.errors()[0]["msg"] in str(err)
    assert err.mapping_error.errors()[0]["msg"] in str(err)
    assert "validation errors)" not in str(err)


def test_invalid_json_is_named_in_the_message() -> None:
    with pytest.raises(FormatParseError) as excinfo:
        load_records("{not json", "broken.json")
    message = str(excinfo.value)
    assert "broken.json" in message
    assert "Invalid JSON" in message


def test_message_points_at_the_offending_field() -> None:
    with pytest.raises(FormatParseError) as excinfo:
        load_records('{"pkg@1.0.0": {"licenses": 7}}', "typed.json")
    assert "pkg@1.0.0.licenses" in str(excinfo.value)


def test_checker_key_without_version_is_rejected() -> None:
    with pytest.raises(FormatParseError) as excinfo:
        load_records('{"noversion": {"licenses": "MIT"}}', "keys.json")
    assert "noversion" in str(excinfo.value)
