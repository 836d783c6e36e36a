"""Loading splitter settings from YAML."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Iterable, Mapping

import yaml

from supportconfig.splitter.files import DEFAULT_KINDS
from supportconfig.splitter.mappers import (
    PathMapper,
    RenameMapper,
    UniquePathMapper,
    chain_mappers,
    exclude_patterns,
    flatten_path,
)

DEFAULT_CONFIG_PATH = Path("config/splitter.yml")


@dataclass(slots=True)
class SplitterConfig:
    """Settings controlling which sections are written and where."""

    version: int = 1
    kinds: tuple[str, ...] = DEFAULT_KINDS
    flatten: bool = False
    unique: bool = False
    exclude: tuple[str, ...] = ()
    rename: Mapping[str, str] = field(default_factory=dict)

    def build_mapper(self) -> PathMapper | None:
        """Chain exclude, rename, flatten and unique in that order."""

        return chain_mappers(
            exclude_patterns(self.exclude),
            RenameMapper(dict(self.rename)) if self.rename else None,
            flatten_path if self.flatten else None,
            UniquePathMapper() if self.unique else None,
        )

    def with_overrides(
        self,
        *,
        flatten: bool | None = None,
        unique: bool | None = None,
        exclude: Iterable[str] | None = None,
    ) -> "SplitterConfig":
        """Return a copy with command-line values applied on top."""

        return replace(
            self,
            flatten=self.flatten if flatten is None else flatten,
            unique=self.unique if unique is None else unique,
            exclude=self.exclude + tuple(exclude or ()),
        )


def _string_tuple(raw: object, key: str, source: Path) -> tuple[str, ...]:
    if raw is None:
        return ()
    if isinstance(raw, str):
        return (raw,)
    if not isinstance(raw, (list, tuple)):
        raise ValueError(f"'{key}' must be a list in {source}")
    return tuple(str(item) for item in raw if item)


def load_splitter_config(
    path: Path | None = None, *, strict: bool = True
) -> SplitterConfig:
    """Read the YAML config file describing how to split reports."""

    source = path or DEFAULT_CONFIG_PATH
    if not source.exists():
        message = f"Splitter config not found: {source}"
        if strict:
            raise FileNotFoundError(message)
        return SplitterConfig()

    data = yaml.safe_load(source.read_text(encoding="utf-8"))
    if data is None:
        return SplitterConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Invalid splitter config format: {source}")

    rename = data.get("rename") or {}
    if not isinstance(rename, Mapping):
        raise ValueError(f"'rename' must be a mapping in {source}")

    kinds = _string_tuple(data.get("kinds"), "kinds", source) or DEFAULT_KINDS
    return SplitterConfig(
        version=int(data.get("version", 1)),
        kinds=kinds,
        flatten=bool(data.get("flatten", False)),
        unique=bool(data.get("unique", False)),
        exclude=_string_tuple(data.get("exclude"), "exclude", source),
        rename={str(key): str(value) for key, value in rename.items()},
    )


__all__ = ["DEFAULT_CONFIG_PATH", "SplitterConfig", "load_splitter_config"]
