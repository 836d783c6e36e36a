"""Reconstruct collected files from report sections."""

from supportconfig.splitter.files import (
    DEFAULT_KINDS,
    FileSplitter,
    SplitResult,
    open_report,
    split_report,
)
from supportconfig.splitter.mappers import (
    ExcludeMapper,
    MapperChain,
    PathMapper,
    RenameMapper,
    UniquePathMapper,
    chain_mappers,
    exclude_patterns,
    flatten_path,
    reset_mapper,
)
from supportconfig.splitter.paths import (
    clean_path,
    confine_path,
    header_to_path,
    require_clean_path,
    strip_note,
)

__all__ = [
    "DEFAULT_KINDS",
    "ExcludeMapper",
    "FileSplitter",
    "MapperChain",
    "PathMapper",
    "RenameMapper",
    "SplitResult",
    "UniquePathMapper",
    "chain_mappers",
    "clean_path",
    "confine_path",
    "exclude_patterns",
    "flatten_path",
    "header_to_path",
    "open_report",
    "reset_mapper",
    "require_clean_path",
    "split_report",
    "strip_note",
]
