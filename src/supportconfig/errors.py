"""Exceptions raised while parsing and splitting reports."""

from __future__ import annotations


class SupportconfigError(Exception):
    """Base class for report parsing errors."""


class InvalidEntryError(SupportconfigError, ValueError):
    """The report is structurally broken (bad header, empty path)."""


class UnsafePathError(InvalidEntryError):
    """A destination path resolves outside the base directory."""


class SkipSection(SupportconfigError):
    """Raised by a handler or path mapper to decline a section."""


__all__ = ["InvalidEntryError", "SkipSection", "SupportconfigError", "UnsafePathError"]
