from typing import Iterator, Sequence

from permutate.counters import IndexCounters
from permutate.ptypes import BufferT, CombinationT, Snapshot
from permutate.shapes import ListWrapper


class Permutator(Iterator[CombinationT]):
    """
    Lazily enumerates the cartesian product of the lists held by a
    ListWrapper. The last list varies fastest.

    Iterating allocates a new combination per step. `next_into` instead
    overwrites a caller-owned buffer, typically the first combination
    returned by `next()`:

        perms = Permutator(ListOfLists([["a", "b"], ["c", "d"]]))
        buffer = next(perms)
        print(buffer)
        while perms.next_into(buffer) is not None:
            print(buffer)

    A buffer passed to `next_into` is stale as soon as the next call is made.
    """

    def __init__(self, lists: ListWrapper[CombinationT]):
        if not isinstance(lists, ListWrapper):
            raise TypeError(
                f"expected a ListWrapper, got {type(lists).__name__}"
            )
        self.lists = lists
        self.counters = IndexCounters(lists.lengths())
        self._last = lists.list_count() - 1

    def __repr__(self):
        return (
            f"Permutator({self.lists!r}, position={self.counters.position}, "
            f"total={self.counters.total})"
        )

    def __iter__(self) -> "Permutator[CombinationT]":
        return self

    def __next__(self) -> CombinationT:
        counters = self.counters
        if counters.position >= counters.total:
            raise StopIteration
        counters.position += 1
        output = self.lists.materialize(counters.cursors)
        counters.advance(self._last)
        return output

    def __length_hint__(self) -> int:
        return max(self.counters.total - self.counters.position, 0)

    def __copy__(self) -> "Permutator[CombinationT]":
        return self.clone()

    def clone(self) -> "Permutator[CombinationT]":
        """An independent engine sharing this one's (read-only) lists."""
        new = type(self).__new__(type(self))
        new.lists = self.lists
        new.counters = self.counters.copy()
        new._last = self._last
        return new

    def next_into(self, buffer: BufferT) -> BufferT | None:
        """
        Write the next combination into `buffer` and return it, or return
        None when there are no combinations left.
        """
        counters = self.counters
        if counters.position >= counters.total:
            return None
        self.lists.overwrite(counters.cursors, buffer)
        counters.position += 1
        counters.advance(self._last)
        return buffer

    def new_buffer(self) -> list:
        return self.lists.new_buffer()

    def nth(self, n: int) -> CombinationT | None:
        """
        Skip `n` combinations and return the one after them, or None if the
        enumeration runs out first.
        """
        if n < 0:
            raise ValueError("n must be >= 0")
        counters = self.counters
        remaining = counters.total - counters.position
        if n >= remaining:
            counters.advance_by(remaining)
            counters.position = counters.total
            return None
        counters.advance_by(n)
        counters.position += n
        return next(self)

    def max_combinations(self) -> int:
        return self.counters.total

    def position(self) -> Snapshot:
        return self.counters.position, self.counters.cursors.copy()

    def set_position(self, position: int, cursors: Sequence[int]):
        self.counters.seek(position, cursors)

    def jump_to(self, position: int):
        """Move directly to the combination at absolute `position`."""
        counters = self.counters
        if not 0 <= position <= counters.total:
            raise ValueError(
                f"position {position} outside [0, {counters.total}]"
            )
        counters.seek(position, counters.settle(position))

    def reset(self):
        self.counters.reset()
