"""Write "Configuration File" and "Log File" sections back to disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Iterable

from supportconfig.errors import SkipSection
from supportconfig.parser import ParseStats, SectionParser
from supportconfig.splitter.mappers import PathMapper, reset_mapper
from supportconfig.splitter.paths import (
    confine_path,
    header_to_path,
    require_clean_path,
)

logger = logging.getLogger(__name__)

DEFAULT_KINDS = ("Configuration File", "Log File")
ENCODING = "utf-8"
ERRORS = "surrogateescape"


@dataclass(slots=True)
class SplitResult:
    """Outcome of splitting one report."""

    written: list[Path]
    skipped: list[str]
    stats: ParseStats


@dataclass(slots=True)
class FileSplitter:
    """Section handler creating one file per extracted section.

    ``path_mapper`` receives the cleaned original path (for example
    ``/etc/os-release``) and returns the path to write below ``base``. It may
    raise ``SkipSection`` to leave a file out; any other exception aborts the
    split.
    """

    base: Path
    path_mapper: PathMapper | None = None
    kinds: tuple[str, ...] = DEFAULT_KINDS
    written: list[Path] = field(default_factory=list, init=False)
    skipped: list[str] = field(default_factory=list, init=False)

    def handle(self, kind: str, header: str) -> IO[str]:
        try:
            source_path = require_clean_path(header_to_path(header))
            if self.path_mapper is not None:
                dest = require_clean_path(self.path_mapper(source_path))
            else:
                dest = source_path
        except SkipSection:
            self.skipped.append(header)
            raise

        path = confine_path(Path(self.base), dest)
        path.parent.mkdir(parents=True, exist_ok=True)
        sink = path.open("w", encoding=ENCODING, errors=ERRORS, newline="\n")
        self.written.append(path)
        logger.info("%s %s -> %s", kind, source_path, path)
        return sink

    def register(self, parser: SectionParser) -> SectionParser:
        for kind in self.kinds:
            parser.register_handler(kind, self)
        return parser

    def split(self, source: Iterable[str]) -> SplitResult:
        """Parse ``source`` and write every handled section below ``base``."""

        self.written.clear()
        self.skipped.clear()
        reset_mapper(self.path_mapper)
        parser = self.register(SectionParser())
        stats = parser.parse(source)
        return SplitResult(
            written=list(self.written),
            skipped=list(self.skipped),
            stats=stats,
        )


def open_report(path: Path) -> IO[str]:
    """Open a report for line-oriented reading, keeping undecodable bytes."""

    return path.open("r", encoding=ENCODING, errors=ERRORS, newline="\n")


def split_report(
    report: Path,
    base: Path,
    *,
    path_mapper: PathMapper | None = None,
    kinds: Iterable[str] = DEFAULT_KINDS,
) -> SplitResult:
    """Split the report file at ``report`` into ``base``."""

    splitter = FileSplitter(base=base, path_mapper=path_mapper, kinds=tuple(kinds))
    with open_report(report) as source:
        return splitter.split(source)


__all__ = [
    "DEFAULT_KINDS",
    "FileSplitter",
    "SplitResult",
    "open_report",
    "split_report",
]
