from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class Section:
    name: str
    entries: list[str] = field(default_factory=list)

    def add_entry(self, line: str) -> None:
        self.entries.append(line)


class SectionRegistry:
    """Sections in first-declaration order, unique by exact name."""

    def __init__(self) -> None:
        self._sections: dict[str, Section] = {}

    def __len__(self) -> int:
        return len(self._sections)

    def __iter__(self) -> Iterator[Section]:
        return iter(list(self._sections.values()))

    def __contains__(self, name: object) -> bool:
        return name in self._sections

    def get(self, name: str) -> Section | None:
        return self._sections.get(name)

    def open_section(self, name: str) -> Section:
        section = self._sections.get(name)
        if section is None:
            section = Section(name)
            self._sections[name] = section
        return section

    @property
    def entry_count(self) -> int:
        return sum(len(s.entries) for s in self._sections.values())

    def drain(self) -> Iterator[Section]:
        """Yield sections in order, removing each from the registry.

        The registry is empty once the iterator is exhausted.
        """
        while self._sections:
            name = next(iter(self._sections))
            yield self._sections.pop(name)
