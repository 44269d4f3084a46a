"""Errors raised while building a notices document."""

from __future__ import annotations

from typing import Self


class NoticeError(Exception):
    code = "notice_error"
    exit_status = 1

    def __init__(self: Self, message: str) -> None:
        super().__init__(message)


class MissingArgumentError(NoticeError):
    """Raised when a required command-line value is absent."""

    code = "missing_argument"
    exit_status = 2


class FileReadError(NoticeError):
    """Raised when the template or input file cannot be read."""

    code = "read_failed"

    def __init__(self: Self, path: str, reason: str) -> None:
        super().__init__(f"Could not read {path}: {reason}")
        self.path = path


class FileWriteError(NoticeError):
    """Raised when the output file cannot be written."""

    code = "write_failed"

    def __init__(self: Self, path: str, reason: str) -> None:
        super().__init__(f"Could not write {path}: {reason}")
        self.path = path


class FormatParseError(NoticeError):
    """Raised when the input matches neither known license JSON shape."""

    code = "unknown_format"

    def __init__(
        self: Self,
        path: str,
        message: str,
        *,
        list_error: Exception | None = None,
        mapping_error: Exception | None = None,
    ) -> None:
        super().__init__(f"Could not parse the input file {path}: {message}")
        self.path = path
        self.list_error = list_error
        self.mapping_error = mapping_error


class InvalidPatternError(NoticeError):
    code = "invalid_pattern"
    exit_status = 2

    def __init__(self: Self, option: str, pattern: str, reason: str) -> None:
        super().__init__(f"{option}, a wrong regex pattern: {pattern} ({reason})")
        self.option = option
        self.pattern = pattern


class LineRangeError(NoticeError):
    """Raised when header and footer line counts do not fit in the template."""

    code = "line_range"
    exit_status = 2
