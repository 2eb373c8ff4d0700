"""Heading-delimited field extraction for issue form bodies.

Issue forms render each answer as a `### <Field Name>` heading followed by the
answer text. The extractor splits a body into sections at heading lines once,
then answers lookups by name.

Known limitation: any line starting with `### ` ends the current section, so a
description containing such a line is truncated at it.
"""

from dataclasses import dataclass

HEADING_PREFIX = "### "


@dataclass(frozen=True)
class Section:
    """One heading and the lines below it, up to the next heading."""

    name: str
    lines: tuple[str, ...]


def split_sections(text: str) -> list[Section]:
    """Split text into sections at lines starting with `### `.

    Only "\n", "\r\n" and "\r" end a line; other Unicode line separators stay
    inside the text. Text before the first heading belongs to no section and is
    dropped.
    """
    sections: list[Section] = []
    current_name: str | None = None
    current_lines: list[str] = []
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    for line in normalized.split("\n"):
        if line.startswith(HEADING_PREFIX):
            if current_name is not None:
                sections.append(Section(name=current_name, lines=tuple(current_lines)))
            current_name = line[len(HEADING_PREFIX) :].strip()
            current_lines = []
        elif current_name is not None:
            current_lines.append(line)
    if current_name is not None:
        sections.append(Section(name=current_name, lines=tuple(current_lines)))
    return sections


class FieldExtractor:
    """Looks up form answers by heading name.

    Heading names compare case-insensitively and literally, so names such as
    "License (Optional)" need no escaping. When a heading repeats, the first
    occurrence wins.
    """

    def __init__(self, text: str) -> None:
        self._sections = split_sections(text)

    def _find(self, field_name: str) -> Section | None:
        wanted = field_name.strip().casefold()
        for section in self._sections:
            if section.name.casefold() == wanted:
                return section
        return None

    def extract_single_line(self, field_name: str) -> str:
        """Return the first non-blank line under the heading, trimmed.

        Returns "" if the heading is absent or its section is blank.
        """
        section = self._find(field_name)
        if section is None:
            return ""
        for line in section.lines:
            if line.strip():
                return line.strip()
        return ""

    def extract_multi_line(self, field_name: str) -> str:
        """Return everything under the heading up to the next heading.

        Leading and trailing whitespace is trimmed; internal blank lines and
        indentation are preserved. Returns "" if the heading is absent.
        """
        section = self._find(field_name)
        if section is None:
            return ""
        return "\n".join(section.lines).strip()
