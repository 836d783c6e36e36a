"""Ordered mapping of section kinds to the handlers interested in them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator, Protocol, runtime_checkable

ANY_KIND = "*"


@runtime_checkable
class Sink(Protocol):
    """Destination for the body lines of one section."""

    def write(self, text: str) -> object: ...

    def close(self) -> object: ...


@runtime_checkable
class SectionHandler(Protocol):
    """Called once per section with its kind and header line.

    Return a sink to receive the body, ``None`` to decline, or raise
    ``SkipSection`` to decline with a reason. Any other exception aborts the
    parse.
    """

    def handle(self, kind: str, header: str) -> Sink | None: ...


HandlerFunc = Callable[[str, str], "Sink | None"]


@dataclass(slots=True, frozen=True)
class CallableHandler:
    """Adapter turning a plain function into a ``SectionHandler``."""

    func: HandlerFunc

    def handle(self, kind: str, header: str) -> Sink | None:
        return self.func(kind, header)


def as_handler(handler: SectionHandler | HandlerFunc) -> SectionHandler:
    if isinstance(handler, SectionHandler):
        return handler
    if callable(handler):
        return CallableHandler(handler)
    raise TypeError(f"Not a section handler: {handler!r}")


@dataclass(slots=True)
class HandlerRegistry:
    """Handlers keyed by section kind, kept in registration order.

    Handlers registered under ``ANY_KIND`` run for every section, after the
    ones registered for the specific kind.
    """

    _handlers: dict[str, list[SectionHandler]] = field(default_factory=dict)

    def register(self, kind: str, handler: SectionHandler | HandlerFunc) -> SectionHandler:
        """Append ``handler`` to the list bound to ``kind``."""

        if not kind:
            raise ValueError("Section kind must not be empty")
        wrapped = as_handler(handler)
        self._handlers.setdefault(kind, []).append(wrapped)
        return wrapped

    def handlers_for(self, kind: str) -> tuple[SectionHandler, ...]:
        specific = self._handlers.get(kind, []) if kind != ANY_KIND else []
        return tuple(specific) + tuple(self._handlers.get(ANY_KIND, ()))

    def kinds(self) -> tuple[str, ...]:
        return tuple(self._handlers)

    def __len__(self) -> int:
        return sum(len(handlers) for handlers in self._handlers.values())

    def __iter__(self) -> Iterator[tuple[str, SectionHandler]]:
        for kind, handlers in self._handlers.items():
            for handler in handlers:
                yield kind, handler


__all__ = [
    "ANY_KIND",
    "CallableHandler",
    "HandlerFunc",
    "HandlerRegistry",
    "SectionHandler",
    "Sink",
    "as_handler",
]
