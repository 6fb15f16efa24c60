"""
Mutable, chainable wrapper around Python's native ``list``.

Slice owns its backing list exclusively: it copies whatever it is built from
and hands out copies from :meth:`Slice.items` and :meth:`Slice.clone`, so no
caller can reach the internal storage. Mutators work in place and return the
same instance, which lets calls chain:

```python
from klassy import Slice

Slice.new([3, 1, 2]).push(4).sort().reverse().items()  # [4, 3, 2, 1]
```

Positions must be non-negative and in range. Out-of-range positions raise
IndexError instead of wrapping around like native negative indexing.
Searches report absence with ``-1`` or False.

Slice is not synchronised. Concurrent mutation of one instance must be
guarded by the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any

from rsb.models.base_model import BaseModel
from rsb.models.config_dict import ConfigDict
from rsb.models.field import Field

if TYPE_CHECKING:
    from klassy.strings.string import String

logger = logging.getLogger(__name__)


class Slice[T](BaseModel):
    """
    An ordered, mutable sequence of elements of one type.

    Methods that compare elements (``equal``, ``index``, ``contains``,
    ``compact``) need ``T`` to support ``==``; ``sort``, ``min`` and ``max``
    also need ``<``. Methods that only move elements around place no demands
    on ``T``.

    The iteration methods (``all``, ``backward``, ``values``) each take a
    snapshot of the elements when called. A traversal is therefore not
    affected by later mutation of the slice, and calling the method again
    starts a fresh one.

    Attributes:
        elements: The backing list. Prefer the methods over touching it
            directly.

    Example:
        ```python
        numbers = Slice.new([1, 2, 3])
        doubled = numbers.map_to(lambda x: x * 2)  # Slice [2, 4, 6]
        numbers.delete(0, 1).items()  # [2, 3]
        ```
    """

    elements: list[T] = Field(
        default_factory=list,
        description="Backing list owned by this slice",
    )

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @classmethod
    def new(cls, items: Iterable[T] = ()) -> Slice[T]:
        """Build a slice holding an uncoerced copy of ``items``."""
        return cls.model_construct(elements=list(items))

    def length(self) -> int:
        return len(self.elements)

    def items(self) -> list[T]:
        """Return a copy of the elements."""
        return list(self.elements)

    def clone(self) -> Slice[T]:
        """Return an independent slice with the same elements."""
        return type(self).new(self.elements)

    def at(self, index: int) -> T:
        """
        Return the element at ``index``.

        Raises:
            IndexError: If ``index`` is not in ``[0, length())``.
        """
        self._check_index(index)
        return self.elements[index]

    # Mutators

    def push(self, elem: T) -> Slice[T]:
        """Add a single element at the end."""
        self.elements.append(elem)
        return self

    def append(self, *elems: T) -> Slice[T]:
        """Add every given element at the end."""
        self.elements.extend(elems)
        return self

    def concat(self, elems: Iterable[T]) -> Slice[T]:
        """Add every element of ``elems`` at the end."""
        self.elements.extend(elems)
        return self

    def set(self, index: int, value: T) -> Slice[T]:
        """
        Replace the element at ``index``.

        Raises:
            IndexError: If ``index`` is not in ``[0, length())``.
        """
        self._check_index(index)
        self.elements[index] = value
        return self

    def insert(self, index: int, *values: T) -> Slice[T]:
        """
        Insert ``values`` at ``index``, shifting later elements up.

        Raises:
            IndexError: If ``index`` is not in ``[0, length()]``.
        """
        if not 0 <= index <= len(self.elements):
            raise IndexError(
                f"insert index {index} out of range [0:{len(self.elements)}]"
            )
        self.elements[index:index] = values
        return self

    def delete(self, i: int, j: int) -> Slice[T]:
        """
        Remove the elements ``[i:j]``.

        Raises:
            IndexError: Unless ``0 <= i <= j <= length()``.
        """
        self._check_range(i, j)
        del self.elements[i:j]
        return self

    def delete_func(self, predicate: Callable[[T], bool]) -> Slice[T]:
        """Remove every element for which ``predicate`` returns True."""
        before = len(self.elements)
        self.elements[:] = [elem for elem in self.elements if not predicate(elem)]
        logger.debug("delete_func removed %d element(s)", before - len(self.elements))
        return self

    def replace(self, i: int, j: int, *values: T) -> Slice[T]:
        """
        Replace the elements ``[i:j]`` by ``values``.

        Raises:
            IndexError: Unless ``0 <= i <= j <= length()``.
        """
        self._check_range(i, j)
        self.elements[i:j] = values
        return self

    def reverse(self) -> Slice[T]:
        self.elements.reverse()
        return self

    def compact(self) -> Slice[T]:
        """Collapse runs of equal consecutive elements into one."""
        kept = self.elements[:1]
        for elem in self.elements[1:]:
            if elem != kept[-1]:
                kept.append(elem)
        logger.debug("compact dropped %d element(s)", len(self.elements) - len(kept))
        self.elements[:] = kept
        return self

    def sort(
        self, key: Callable[[T], Any] | None = None, reverse: bool = False
    ) -> Slice[T]:
        """Sort the elements in place. The sort is stable."""
        self.elements.sort(key=key, reverse=reverse)
        return self

    # Queries

    def equal(self, other: Slice[T] | Iterable[T]) -> bool:
        """
        Report whether ``other`` holds the same elements in the same order.

        Slices of different length are never equal. Two empty slices are.
        """
        others = other.elements if isinstance(other, Slice) else list(other)
        if len(others) != len(self.elements):
            return False
        return all(a == b for a, b in zip(self.elements, others))

    def index(self, value: T) -> int:
        """Return the position of the first element equal to ``value``, or -1."""
        return self.index_func(lambda elem: elem == value)

    def index_func(self, predicate: Callable[[T], bool]) -> int:
        """Return the position of the first element satisfying ``predicate``, or -1."""
        return next(
            (i for i, elem in enumerate(self.elements) if predicate(elem)), -1
        )

    def contains(self, value: T) -> bool:
        return self.index(value) >= 0

    def contains_func(self, predicate: Callable[[T], bool]) -> bool:
        return any(predicate(elem) for elem in self.elements)

    def min(self) -> T:
        """
        Return the smallest element.

        Raises:
            ValueError: If the slice is empty.
        """
        if not self.elements:
            raise ValueError("min of an empty Slice")
        return min(self.elements)

    def max(self) -> T:
        """
        Return the largest element.

        Raises:
            ValueError: If the slice is empty.
        """
        if not self.elements:
            raise ValueError("max of an empty Slice")
        return max(self.elements)

    # Derivations

    def map_to[U](self, fn: Callable[[T], U]) -> Slice[U]:
        """
        Apply ``fn`` to every element, in order, and collect the results.

        The source slice is left untouched. The result may hold a
        different element type.
        """
        return Slice.new(fn(elem) for elem in self.elements)

    def filter(self, predicate: Callable[[T], bool]) -> Slice[T]:
        """Return a new slice of the elements satisfying ``predicate``."""
        return type(self).new(filter(predicate, self.elements))

    def join(self, sep: str) -> String:
        """Stringify every element and join them with ``sep``."""
        from klassy.strings.string import String

        return String.new(sep).join(self.elements)

    # Iteration

    def all(self) -> Iterator[tuple[int, T]]:
        """Iterate over ``(index, element)`` pairs, front to back."""
        return enumerate(list(self.elements))

    def backward(self) -> Iterator[tuple[int, T]]:
        """Iterate over ``(index, element)`` pairs, back to front."""
        snapshot = list(self.elements)
        return ((i, snapshot[i]) for i in range(len(snapshot) - 1, -1, -1))

    def values(self) -> Iterator[T]:
        """Iterate over the elements, front to back."""
        return iter(list(self.elements))

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return self.values()

    def __reversed__(self) -> Iterator[T]:
        return (elem for _, elem in self.backward())

    def __len__(self) -> int:
        return len(self.elements)

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.elements):
            raise IndexError(f"index {index} out of range [0:{len(self.elements)}]")

    def _check_range(self, i: int, j: int) -> None:
        if not 0 <= i <= j <= len(self.elements):
            raise IndexError(
                f"slice bounds [{i}:{j}] out of range [0:{len(self.elements)}]"
            )
