"""Split supportconfig reports back into the files they were collected from."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("supportconfig-split")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"


__all__ = ["__version__"]
