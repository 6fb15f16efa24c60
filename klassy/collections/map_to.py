from __future__ import annotations

from collections.abc import Callable

from klassy.collections.slice import Slice


def map_to[T, U](source: Slice[T], fn: Callable[[T], U]) -> Slice[U]:
    """Build a new Slice by applying ``fn`` to every element of ``source``."""
    return source.map_to(fn)
