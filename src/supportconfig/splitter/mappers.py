"""Path mappers rewriting a cleaned source path before it is written."""

from __future__ import annotations

import fnmatch
from dataclasses import dataclass, field
from typing import Callable, Iterable, Mapping

from supportconfig.errors import SkipSection

PathMapper = Callable[[str], str]


def flatten_path(path: str, *, separator: str = "_") -> str:
    """Collapse a nested path into a single file name."""

    return separator.join(part for part in path.split("/") if part)


@dataclass(slots=True)
class ExcludeMapper:
    """Skip paths matching any of the glob patterns."""

    patterns: tuple[str, ...]

    def __call__(self, path: str) -> str:
        for pattern in self.patterns:
            if fnmatch.fnmatchcase(path, pattern):
                raise SkipSection(f"{path} excluded by {pattern!r}")
        return path


@dataclass(slots=True)
class RenameMapper:
    """Exact-path rename table; unknown paths pass through."""

    mapping: Mapping[str, str]

    def __call__(self, path: str) -> str:
        return self.mapping.get(path, path)


@dataclass(slots=True)
class UniquePathMapper:
    """Suffix ``.1``, ``.2``, ... onto paths already handed out."""

    _seen: set[str] = field(default_factory=set)

    def __call__(self, path: str) -> str:
        candidate = path
        counter = 0
        while candidate in self._seen:
            counter += 1
            candidate = f"{path}.{counter}"
        self._seen.add(candidate)
        return candidate

    def reset(self) -> None:
        self._seen.clear()


@dataclass(slots=True)
class MapperChain:
    """Mappers applied left to right."""

    mappers: tuple[PathMapper, ...]

    def __call__(self, path: str) -> str:
        for mapper in self.mappers:
            path = mapper(path)
        return path

    def reset(self) -> None:
        for mapper in self.mappers:
            reset_mapper(mapper)


def reset_mapper(mapper: PathMapper | None) -> None:
    """Clear per-run state of ``mapper`` if it keeps any."""

    reset = getattr(mapper, "reset", None)
    if callable(reset):
        reset()


def chain_mappers(*mappers: PathMapper | None) -> PathMapper | None:
    """Compose mappers left to right, ignoring ``None`` entries."""

    active: tuple[PathMapper, ...] = tuple(mapper for mapper in mappers if mapper is not None)
    if not active:
        return None
    if len(active) == 1:
        return active[0]
    return MapperChain(active)


def exclude_patterns(patterns: Iterable[str] | None) -> ExcludeMapper | None:
    cleaned = tuple(pattern for pattern in patterns or () if pattern)
    return ExcludeMapper(cleaned) if cleaned else None


__all__ = [
    "ExcludeMapper",
    "MapperChain",
    "PathMapper",
    "RenameMapper",
    "UniquePathMapper",
    "chain_mappers",
    "exclude_patterns",
    "flatten_path",
    "reset_mapper",
]
