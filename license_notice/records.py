from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Self


@total_ordering
@dataclass(slots=True, frozen=True, eq=False)
class LicenseRecord:
    """One third-party dependency in the normalized shape.

    Identity is the ``(name, version)`` pair: the same dependency may show up
    with different optional metadata and still compares equal.
    """

    name: str
    version: str
    authors: str = ""
    repository: str | None = None
    license: str | None = None
    license_file: str | None = None
    description: str | None = None

    @property
    def key(self: Self) -> tuple[str, str]:
        return (self.name, self.version)

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, LicenseRecord):
            return NotImplemented
        return self.key == other.key

    def __lt__(self: Self, other: object) -> bool:
        if not isinstance(other, LicenseRecord):
            return NotImplemented
        return self.key < other.key

    def __hash__(self: Self) -> int:
        return hash(self.key)

    def to_dict(self: Self) -> dict[str, str | None]:
        return {
            "name": self.name,
            "version": self.version,
            "authors": self.authors,
            "repository": self.repository,
            "license": self.license,
            "license_file": self.license_file,
            "description": self.description,
        }
