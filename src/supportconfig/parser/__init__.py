"""Section parsing: marker detection and handler dispatch."""

from supportconfig.parser.registry import (
    ANY_KIND,
    CallableHandler,
    HandlerFunc,
    HandlerRegistry,
    SectionHandler,
    Sink,
    as_handler,
)
from supportconfig.parser.sections import (
    MARKER_PATTERN,
    MARKER_PREFIX,
    ParserState,
    ParseStats,
    SectionParser,
    match_marker,
)

__all__ = [
    "ANY_KIND",
    "CallableHandler",
    "HandlerFunc",
    "HandlerRegistry",
    "MARKER_PATTERN",
    "MARKER_PREFIX",
    "ParseStats",
    "ParserState",
    "SectionHandler",
    "SectionParser",
    "Sink",
    "as_handler",
    "match_marker",
]
