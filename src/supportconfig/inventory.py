"""List the sections of a report without extracting anything."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from supportconfig.errors import SupportconfigError
from supportconfig.parser import ANY_KIND, SectionParser
from supportconfig.splitter.paths import clean_path, header_to_path


@dataclass(slots=True)
class SectionEntry:
    """One section as seen in the report."""

    kind: str
    header: str
    path: str | None
    lines: int = 0

    def to_dict(self) -> dict[str, object]:
        return {
            "kind": self.kind,
            "header": self.header,
            "path": self.path,
            "lines": self.lines,
        }


class _LineCounter:
    def __init__(self, entry: SectionEntry) -> None:
        self._entry = entry

    def write(self, text: str) -> int:
        self._entry.lines += text.count("\n")
        return len(text)

    def close(self) -> None:
        pass


def _recorded_path(header: str) -> str | None:
    try:
        return clean_path(header_to_path(header)) or None
    except SupportconfigError:
        return None


def scan_sections(source: Iterable[str]) -> list[SectionEntry]:
    """Return every section of ``source`` with its recorded path and size."""

    entries: list[SectionEntry] = []

    def _collect(kind: str, header: str) -> _LineCounter:
        entry = SectionEntry(kind=kind, header=header, path=_recorded_path(header))
        entries.append(entry)
        return _LineCounter(entry)

    parser = SectionParser()
    parser.register_handler(ANY_KIND, _collect)
    parser.parse(source)
    return entries


__all__ = ["SectionEntry", "scan_sections"]
