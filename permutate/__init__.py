from typing import Any, Collection, Iterable

from permutate.counters import IndexCounters
from permutate.permutator import Permutator
from permutate.ptypes import T
from permutate.shapes import ListOfLists, ListWrapper, Repeated, TupleOfLists


def permute(lists: Iterable[Collection[T]]) -> Permutator[list]:
    return Permutator(ListOfLists(lists))


def permute_repeated(elements: Collection[T]) -> Permutator[list]:
    return Permutator(Repeated(elements))


def permute_tuple(*lists: Collection[Any]) -> Permutator[tuple]:
    return Permutator(TupleOfLists(*lists))
