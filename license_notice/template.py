from __future__ import annotations

from dataclasses import dataclass

from .errors import LineRangeError

EOL = "\n"


@dataclass(slots=True, frozen=True)
class TemplateSections:
    header: str
    body: str
    footer: str


def template_lines(text: str) -> list[str]:
    """Split text into lines; a trailing newline does not open an empty line."""
    lines = text.split(EOL)
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def split_template(text: str, header_lines: int = 0, footer_lines: int = 0) -> TemplateSections:
    """Cut a template into header, body and footer by line counts.

    Raises:
        LineRangeError: if a count is negative or the two counts together
            exceed the number of lines in the template.
    """
    if header_lines < 0 or footer_lines < 0:
        raise LineRangeError(
            f"header/footer line counts must be non-negative, got {header_lines}/{footer_lines}"
        )
    lines = template_lines(text)
    if header_lines + footer_lines > len(lines):
        raise LineRangeError(
            f"{header_lines} header + {footer_lines} footer lines exceed "
            f"the {len(lines)} lines of the template"
        )
    body_end = len(lines) - footer_lines
    return TemplateSections(
        header=EOL.join(lines[:header_lines]),
        body=EOL.join(lines[header_lines:body_end]),
        footer=EOL.join(lines[body_end:]),
    )
