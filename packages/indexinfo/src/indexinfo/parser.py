"""Stanza parser for the Info directory-entry metadata block."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .registry import Section, SectionRegistry

SENTINEL = "\x1f"
SECTION_PREFIX = "INFO-DIR-SECTION "
START_ENTRY = "START-INFO-DIR-ENTRY"
END_ENTRY = "END-INFO-DIR-ENTRY"
ENTRY_MARK = "*"
# C-locale isspace()
NAME_WHITESPACE = " \t\n\v\f\r"


@dataclass(frozen=True)
class ParseResult:
    lines: int
    entries: int
    sections: tuple[str, ...]
    terminated: bool


class StanzaParser:
    def __init__(self, registry: SectionRegistry) -> None:
        self.registry = registry
        self.current: Section | None = None
        self.inside_entry = False
        self.entries_added = 0
        self.sections_seen: list[str] = []

    def feed(self, line: str) -> bool:
        """Consume one line. Returns False once the sentinel is reached."""
        if line.startswith(SENTINEL):
            return False
        if line.startswith(SECTION_PREFIX):
            name = line[len(SECTION_PREFIX):].lstrip(NAME_WHITESPACE)
            self.current = self.registry.open_section(name)
            if name not in self.sections_seen:
                self.sections_seen.append(name)
        if line == START_ENTRY:
            self.inside_entry = True
        if line == END_ENTRY:
            self.inside_entry = False
        if self.inside_entry and line.startswith(ENTRY_MARK) and self.current is not None:
            self.current.add_entry(line)
            self.entries_added += 1
        return True


def parse_lines(lines: Iterable[str], registry: SectionRegistry) -> ParseResult:
    parser = StanzaParser(registry)
    count = 0
    terminated = False
    for line in lines:
        count += 1
        if not parser.feed(line):
            terminated = True
            break
    return ParseResult(
        lines=count,
        entries=parser.entries_added,
        sections=tuple(parser.sections_seen),
        terminated=terminated,
    )
