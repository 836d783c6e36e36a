"""Streaming parser dispatching report sections to registered handlers."""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass, field
from typing import Iterable

from supportconfig.errors import SkipSection
from supportconfig.parser.registry import (
    HandlerFunc,
    HandlerRegistry,
    SectionHandler,
    Sink,
)

logger = logging.getLogger(__name__)

MARKER_PREFIX = "#==[ "
MARKER_PATTERN = re.compile(r"#==\[ (.*?) \]=+")


def match_marker(line: str) -> str | None:
    """Return the section kind if ``line`` is a section marker."""

    if not line.startswith(MARKER_PREFIX):
        return None
    match = MARKER_PATTERN.match(line)
    if match is None:
        return None
    return match.group(1)


def _strip_terminator(line: str) -> str:
    return line.removesuffix("\n").removesuffix("\r")


class ParserState(enum.Enum):
    AWAITING_SECTION = "awaiting-section"
    IN_SECTION = "in-section"


@dataclass(slots=True)
class ParseStats:
    """Counters collected during one ``parse`` call."""

    sections: int = 0
    dispatched: int = 0
    skipped: int = 0
    lines: int = 0


@dataclass(slots=True)
class _ActiveSection:
    kind: str
    header: str | None = None
    sinks: list[Sink] = field(default_factory=list)

    @property
    def header_seen(self) -> bool:
        return self.header is not None


class SectionParser:
    """Finite-state machine over report lines.

    The parser is either waiting for the first marker or inside a section.
    A marker closes the sinks of the current section and opens a new one; the
    first line after it is handed to the handlers as the header, every other
    line goes to the sinks they returned.
    """

    def __init__(self, registry: HandlerRegistry | None = None) -> None:
        self.registry = registry if registry is not None else HandlerRegistry()
        self._section: _ActiveSection | None = None
        self._parsing = False

    def register_handler(
        self, kind: str, handler: SectionHandler | HandlerFunc
    ) -> SectionHandler:
        return self.registry.register(kind, handler)

    @property
    def state(self) -> ParserState:
        return ParserState.IN_SECTION if self._section is not None else ParserState.AWAITING_SECTION

    def parse(self, source: Iterable[str]) -> ParseStats:
        """Consume ``source`` line by line and feed the registered handlers."""

        if self._parsing:
            raise RuntimeError("SectionParser.parse is not re-entrant")
        self._parsing = True
        self._section = None
        stats = ParseStats()
        try:
            for raw_line in source:
                self._feed(_strip_terminator(raw_line), stats)
        except BaseException:
            self._finish_section(aborting=True)
            raise
        else:
            self._finish_section()
        finally:
            self._parsing = False
        return stats

    def _feed(self, line: str, stats: ParseStats) -> None:
        kind = match_marker(line)
        if kind is not None:
            self._finish_section()
            self._section = _ActiveSection(kind=kind)
            stats.sections += 1
            logger.debug("Section %d: %s", stats.sections, kind)
            return

        section = self._section
        if section is None:
            return

        if not section.header_seen:
            section.header = line
            self._open_sinks(section, stats)
            return

        stats.lines += 1
        for sink in section.sinks:
            sink.write(line)
            sink.write("\n")

    def _open_sinks(self, section: _ActiveSection, stats: ParseStats) -> None:
        for handler in self.registry.handlers_for(section.kind):
            try:
                sink = handler.handle(section.kind, section.header)
            except SkipSection as exc:
                logger.debug("Skipping %r (%s): %s", section.header, section.kind, exc)
                stats.skipped += 1
                continue
            if sink is None:
                stats.skipped += 1
                continue
            section.sinks.append(sink)
            stats.dispatched += 1

    def _finish_section(self, *, aborting: bool = False) -> None:
        section, self._section = self._section, None
        if section is None:
            return
        sinks, section.sinks = section.sinks, []
        error: BaseException | None = None
        for sink in sinks:
            try:
                sink.close()
            except Exception as exc:
                if aborting:
                    # The error that aborted the parse wins.
                    logger.warning("Closing %r after abort failed: %s", section.header, exc)
                elif error is None:
                    error = exc
        if error is not None:
            raise error


__all__ = [
    "MARKER_PATTERN",
    "MARKER_PREFIX",
    "ParseStats",
    "ParserState",
    "SectionParser",
    "match_marker",
]
