"""Chainable for-each helpers for Python iterables.

Exports the iteration helpers, their error types, and the package version
resolved from installed distribution information.

Example:
    >>> from eachwise import for_each
    >>> seen = []
    >>> values = [1, 2, 3]
    >>> for_each(values, seen.append) is values
    True
    >>> seen
    [1, 2, 3]
"""

from __future__ import annotations

from .errors import EachwiseError, InvalidArgumentError
from .lib import apply, for_each, for_each_indexed, for_each_with_source

__all__ = [
    "EachwiseError",
    "InvalidArgumentError",
    "__version__",
    "apply",
    "for_each",
    "for_each_indexed",
    "for_each_with_source",
]

try:
    from importlib.metadata import PackageNotFoundError, version
except Exception:  # pragma: no cover - import edge cases
    __version__ = "0.0.0"
else:
    try:
        __version__ = version("eachwise")
    except PackageNotFoundError:
        __version__ = "0.0.0"
