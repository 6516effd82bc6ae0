from typing import Any, Protocol, TypeAlias, TypeVar

T = TypeVar('T')


class SupportsBuffer(Protocol):
    def __len__(self) -> int:
        pass

    def __setitem__(self, index: int, value: Any) -> None:
        pass


CombinationT = TypeVar('CombinationT', list, tuple)
BufferT = TypeVar('BufferT', bound=SupportsBuffer)

Cursors: TypeAlias = list[int]
Snapshot: TypeAlias = tuple[int, Cursors]
