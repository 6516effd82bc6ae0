from math import prod
from typing import Sequence

from permutate.ptypes import Cursors


class IndexCounters:
    """
    Mixed-radix odometer over a fixed set of list lengths. The last list is
    the least significant digit, so it varies fastest.
    """

    __slots__ = ("cursors", "lengths", "position", "total")

    def __init__(self, lengths: Sequence[int]):
        self.lengths: tuple[int, ...] = tuple(lengths)
        if not self.lengths:
            raise ValueError("at least one list is required")
        if any(length < 1 for length in self.lengths):
            raise ValueError("every list must contain at least one element")
        self.cursors: Cursors = [0] * len(self.lengths)
        self.position = 0
        self.total = prod(self.lengths)

    def __repr__(self):
        return (
            f"IndexCounters(cursors={self.cursors}, lengths={self.lengths}, "
            f"position={self.position}, total={self.total})"
        )

    def copy(self) -> "IndexCounters":
        new = IndexCounters.__new__(IndexCounters)
        new.lengths = self.lengths
        new.cursors = self.cursors.copy()
        new.position = self.position
        new.total = self.total
        return new

    def has_more(self) -> bool:
        return self.position < self.total

    def advance(self, index: int):
        """
        Increment the cursor at `index`, carrying leftward on overflow. The
        cursor at index 0 never wraps: once it is saturated, exhaustion is
        signalled by `position` reaching `total`, not by the cursors.
        """
        assert 0 <= index < len(self.lengths), "index outside cursors"
        cursors, lengths = self.cursors, self.lengths
        while True:
            if cursors[index] + 1 < lengths[index]:
                cursors[index] += 1
                return
            if index == 0:
                return
            cursors[index] = 0
            index -= 1

    def advance_by(self, steps: int):
        """
        Equivalent to calling `advance` on the last list `steps` times, in
        constant time regardless of `steps`.
        """
        if steps <= 0:
            return
        self.cursors = self.settle(self.offset() + steps)

    def settle(self, offset: int) -> Cursors:
        """
        Cursors reached after `offset` advances from all zeros. Past the end,
        index 0 stays saturated while the lower digits keep cycling.
        """
        assert offset >= 0, "negative offset"
        if offset < self.total:
            return self.locate(offset)
        stride = self.total // self.lengths[0]
        return self.locate(
            (self.lengths[0] - 1) * stride + (offset - self.total) % stride
        )

    def offset(self) -> int:
        """Mixed-radix value of the current cursors."""
        value = 0
        for cursor, length in zip(self.cursors, self.lengths):
            value = value * length + cursor
        return value

    def locate(self, position: int) -> Cursors:
        """Cursors addressing the combination at absolute `position`."""
        assert 0 <= position < self.total, "position outside enumeration"
        cursors = [0] * len(self.lengths)
        for index in range(len(self.lengths) - 1, -1, -1):
            position, cursors[index] = divmod(position, self.lengths[index])
        return cursors

    def reset(self):
        for index in range(len(self.cursors)):
            self.cursors[index] = 0
        self.position = 0

    def seek(self, position: int, cursors: Sequence[int]):
        if len(cursors) != len(self.lengths):
            raise ValueError(
                f"expected {len(self.lengths)} cursors, got {len(cursors)}"
            )
        if not 0 <= position <= self.total:
            raise ValueError(
                f"position {position} outside [0, {self.total}]"
            )
        for index, (cursor, length) in enumerate(zip(cursors, self.lengths)):
            if not 0 <= cursor < length:
                raise ValueError(
                    f"cursor {cursor} at index {index} outside [0, {length})"
                )
        self.cursors = list(cursors)
        self.position = position
