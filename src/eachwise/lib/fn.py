"""Chainable for-each helpers.

Each helper visits every item of an iterable once, in iteration order, calls
the callback on it, ignores whatever the callback returns and hands back the
very same iterable so calls can be nested or chained.

Behaviour when the iterable is mutated by another thread during the pass is
whatever the iterable's own protocol does (``dict`` raises ``RuntimeError``,
``list`` silently follows the change).

Example:
    >>> prices = [9.5, 23.6, 5.0]
    >>> seen = []
    >>> for_each_indexed(prices, lambda p, i: seen.append((i, p))) is prices
    True
    >>> seen
    [(0, 9.5), (1, 23.6), (2, 5.0)]
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from .. import log
from ..errors import InvalidArgumentError

T = TypeVar("T")
IterableT = TypeVar("IterableT", bound=Iterable[Any])


def _require(source: object, fn: object) -> None:
    if source is None:
        raise InvalidArgumentError("source")
    if fn is None:
        raise InvalidArgumentError("fn")


def _visit(
    name: str,
    source: IterableT,
    fn: Callable[[Any, int, IterableT], object],
) -> IterableT:
    count = 0
    for item in source:
        fn(item, count, source)
        count += 1
    log.trace(f"{name} visited {count} element(s)")
    return source


def for_each(source: IterableT, fn: Callable[[Any], object]) -> IterableT:
    """Call ``fn`` on every item of ``source`` and return ``source``.

    Args:
        source: Iterable to walk. Generators and other one-shot iterators are
            consumed; the exhausted iterator is what comes back.
        fn: Callback invoked once per item. Its return value is discarded.

    Returns:
        ``source`` itself, never a copy.

    Raises:
        InvalidArgumentError: ``source`` or ``fn`` is ``None``. Raised before
            any item is visited.

    Example:
        >>> ids = [2, 4, 15, 22]
        >>> for_each(ids, lambda value: print(f"id: {value}")) is ids
        id: 2
        id: 4
        id: 15
        id: 22
        True
    """
    _require(source, fn)
    return _visit("for_each", source, lambda item, _index, _source: fn(item))


def for_each_indexed(
    source: IterableT, fn: Callable[[Any, int], object]
) -> IterableT:
    """Call ``fn(item, index)`` on every item of ``source``.

    ``index`` starts at 0 for every call and grows by one per item.
    """
    _require(source, fn)
    return _visit(
        "for_each_indexed", source, lambda item, index, _source: fn(item, index)
    )


def for_each_with_source(
    source: IterableT, fn: Callable[[Any, int, IterableT], object]
) -> IterableT:
    """Call ``fn(item, index, source)`` on every item of ``source``.

    The third argument is ``source`` itself on every call, which lets the
    callback look at neighbouring items of indexable collections.

    Example:
        >>> temps = [9.5, 23.6, 5.0, 14.1]
        >>> sums = []
        >>> def neighbour_sum(value, index, values):
        ...     window = values[max(index - 1, 0) : index + 2]
        ...     sums.append(round(sum(window), 1))
        >>> for_each_with_source(temps, neighbour_sum) is temps
        True
        >>> sums
        [33.1, 38.1, 42.7, 19.1]
    """
    _require(source, fn)
    return _visit("for_each_with_source", source, fn)


def apply(fn: Callable[[T], object], values: Iterable[T]) -> Iterable[T]:
    """Apply a function to every value in an iterable.

    Callback-first spelling of :func:`for_each`, convenient with
    ``functools.partial``.

    Args:
        fn: Callback invoked once per item in ``values``.
        values: Items to apply the callback to.

    Returns:
        ``values`` itself. The callback side effects are evaluated eagerly.
    """
    return for_each(values, fn)
