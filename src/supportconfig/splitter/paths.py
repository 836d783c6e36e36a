"""Header line parsing and path confinement.

``header_to_path`` and ``clean_path`` are pure string functions; only
``confine_path`` looks at the filesystem.
"""

from __future__ import annotations

from pathlib import Path

from supportconfig.errors import InvalidEntryError, SkipSection, UnsafePathError

HEADER_PREFIX = "# "
FILE_NOT_FOUND = "File not found"
LINES_SUFFIX = " Lines"
NOTE_SEPARATOR = " - "


def strip_note(entry: str) -> str:
    """Drop a trailing ``" - Last N Lines"`` note from a header entry."""

    if entry.endswith(LINES_SUFFIX):
        idx = entry.rfind(NOTE_SEPARATOR)
        if idx > 0:
            return entry[:idx]
    return entry


def header_to_path(header: str) -> str:
    """Recover the original path recorded in a section header line.

    Raises ``InvalidEntryError`` when the line lacks the ``"# "`` prefix and
    ``SkipSection`` when the report says the file was not found.
    """

    if not header.startswith(HEADER_PREFIX):
        raise InvalidEntryError(f"Invalid entry in the source file: {header!r}")
    entry = header[len(HEADER_PREFIX):]
    if FILE_NOT_FOUND in entry:
        raise SkipSection(entry)
    return strip_note(entry)


def clean_path(path: str) -> str:
    """Lexically normalise ``path`` so ``..`` can never climb above its root.

    Empty and ``.`` segments are dropped, ``..`` removes the previous segment
    or nothing at the top. Absolute input stays absolute, relative input stays
    relative. Returns ``""`` when nothing is left.
    """

    segments: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if segments:
                segments.pop()
            continue
        segments.append(part)
    if not segments:
        return ""
    joined = "/".join(segments)
    return "/" + joined if path.startswith("/") else joined


def require_clean_path(path: str) -> str:
    if "\x00" in path:
        raise InvalidEntryError(f"Path {path!r} contains a NUL byte")
    cleaned = clean_path(path)
    if not cleaned:
        raise InvalidEntryError(f"Path {path!r} is empty after cleaning")
    return cleaned


def confine_path(base: Path, path: str) -> Path:
    """Join a cleaned path onto ``base`` and refuse anything resolving outside it.

    The resolved check also catches symlinks already present below ``base``.
    """

    relative = require_clean_path(path).lstrip("/")
    destination = base / relative
    root = base.resolve()
    resolved = destination.resolve()
    if resolved == root or not resolved.is_relative_to(root):
        raise UnsafePathError(f"{path!r} escapes the destination directory {base}")
    return destination


__all__ = [
    "FILE_NOT_FOUND",
    "HEADER_PREFIX",
    "clean_path",
    "confine_path",
    "header_to_path",
    "require_clean_path",
    "strip_note",
]
