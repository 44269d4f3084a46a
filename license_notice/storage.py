import logging
import sys
from pathlib import Path
from typing import TextIO

from .errors import FileReadError, FileWriteError

logger = logging.getLogger("license_notice.storage")


def read_text_file(path: str | Path) -> str:
    """Read a whole UTF-8 file into memory."""
    try:
        # No newline translation; a bare \r stays inside its line.
        return Path(path).read_bytes().decode("utf-8")
    except OSError as exc:
        raise FileReadError(str(path), exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise FileReadError(str(path), f"not valid UTF-8 ({exc.reason})") from exc


def write_output(text: str, path: str | Path | None = None, stream: TextIO | None = None) -> None:
    """Write the document to ``path`` (overwriting), or print it to stdout."""
    if path is None:
        print(text, file=stream or sys.stdout)
        return
    try:
        Path(path).write_text(text, encoding="utf-8", newline="")
    except OSError as exc:
        logger.error("Failed to write notices file %s: %s", path, exc)
        raise FileWriteError(str(path), exc.strerror or str(exc)) from exc
    logger.info("Wrote notices to %s", path)
