"""
Adapters translating cursor positions into combinations, one per supported
input shape. Each adapter snapshots its input into tuples at construction and
never mutates it afterwards, so one adapter may be shared read-only by any
number of engines.
"""
from abc import ABC, abstractmethod
from typing import Any, Collection, Generic, Iterable, Sequence

from permutate.ptypes import CombinationT, Cursors, SupportsBuffer, T


def _as_tuple(elements: Iterable[T], what: str = "Argument") -> tuple[T, ...]:
    try:
        return tuple(elements)
    except (TypeError, ValueError):
        raise TypeError(f"{what} must be castable to tuple")


def _check_nonempty(lists: Sequence[Sequence]):
    for index, elements in enumerate(lists):
        if len(elements) == 0:
            raise ValueError(f"list {index} is empty")


class ListWrapper(ABC, Generic[CombinationT]):
    """Common interface of the input shapes a Permutator can iterate over."""

    __slots__ = ()

    @abstractmethod
    def list_count(self) -> int:
        """Number of logical lists."""

    @abstractmethod
    def lengths(self) -> list[int]:
        """Length of each logical list, parallel to the cursors."""

    @abstractmethod
    def materialize(self, cursors: Cursors) -> CombinationT:
        """Return a new combination of the elements addressed by `cursors`."""

    @abstractmethod
    def _fill(self, cursors: Cursors, buffer: SupportsBuffer):
        pass

    def overwrite(self, cursors: Cursors, buffer: SupportsBuffer):
        """Write the elements addressed by `cursors` into `buffer`."""
        if isinstance(buffer, (tuple, str, bytes)):
            raise TypeError(
                f"buffer must be mutable, not {type(buffer).__name__}"
            )
        if len(buffer) != self.list_count():
            raise ValueError(
                f"buffer has {len(buffer)} slots, "
                f"expected {self.list_count()}"
            )
        self._fill(cursors, buffer)

    def new_buffer(self) -> list:
        """An empty buffer of the right size for `overwrite`."""
        return [None] * self.list_count()


class Repeated(ListWrapper[list]):
    """
    A single list treated as `len(elements)` identical lists, producing every
    `len(elements)`-tuple drawn with repetition from it.
    """

    __slots__ = ("elements",)

    def __init__(self, elements: Collection[T]):
        self.elements = _as_tuple(elements)
        if not self.elements:
            raise ValueError("list 0 is empty")

    def __repr__(self):
        return f"Repeated({list(self.elements)!r})"

    def list_count(self) -> int:
        return len(self.elements)

    def lengths(self) -> list[int]:
        return [len(self.elements)] * len(self.elements)

    def materialize(self, cursors: Cursors) -> list:
        elements = self.elements
        return [elements[cursor] for cursor in cursors]

    def _fill(self, cursors: Cursors, buffer: SupportsBuffer):
        elements = self.elements
        for index, cursor in enumerate(cursors):
            buffer[index] = elements[cursor]


class ListOfLists(ListWrapper[list]):
    """Any number of independently sized lists of a common element type."""

    __slots__ = ("lists",)

    def __init__(self, lists: Iterable[Collection[T]]):
        self.lists = tuple(
            _as_tuple(elements, "List") for elements in _as_tuple(lists)
        )
        if not self.lists:
            raise ValueError("at least one list is required")
        _check_nonempty(self.lists)

    def __repr__(self):
        return f"ListOfLists({[list(elements) for elements in self.lists]!r})"

    def list_count(self) -> int:
        return len(self.lists)

    def lengths(self) -> list[int]:
        return [len(elements) for elements in self.lists]

    def materialize(self, cursors: Cursors) -> list:
        return [
            elements[cursor] for elements, cursor in zip(self.lists, cursors)
        ]

    def _fill(self, cursors: Cursors, buffer: SupportsBuffer):
        for index, (elements, cursor) in enumerate(zip(self.lists, cursors)):
            buffer[index] = elements[cursor]


class TupleOfLists(ListWrapper[tuple]):
    """
    A fixed number of lists whose element types may all differ. Combinations
    are tuples with one element taken from each list, in order.

    Per-position element types are not tracked statically; arity is fixed at
    construction and checked at runtime against reuse buffers.
    """

    __slots__ = ("lists",)

    def __init__(self, *lists: Collection[Any]):
        self.lists = tuple(_as_tuple(elements, "List") for elements in lists)
        if not self.lists:
            raise ValueError("at least one list is required")
        _check_nonempty(self.lists)

    def __repr__(self):
        inner = ", ".join(repr(list(elements)) for elements in self.lists)
        return f"TupleOfLists({inner})"

    @property
    def arity(self) -> int:
        return len(self.lists)

    def list_count(self) -> int:
        return len(self.lists)

    def lengths(self) -> list[int]:
        return [len(elements) for elements in self.lists]

    def materialize(self, cursors: Cursors) -> tuple:
        return tuple(
            elements[cursor] for elements, cursor in zip(self.lists, cursors)
        )

    def _fill(self, cursors: Cursors, buffer: SupportsBuffer):
        for index, (elements, cursor) in enumerate(zip(self.lists, cursors)):
            buffer[index] = elements[cursor]
