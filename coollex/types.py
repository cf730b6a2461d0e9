from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional,
    Dict, List, Tuple, Set, FrozenSet, Sequence
)

T = TypeVar('T')
U = TypeVar('U')

Indices = Iterator[int]
Combination = Tuple[int, ...]
Selector = Callable[[T], U]


class Marker:
    """one binary cell of the working chain, linked to its successor by slot index"""

    __slots__ = ('selected', 'successor')

    def __init__(self, selected: bool, successor: int):
        self.selected = selected
        self.successor = successor

    def __repr__(self) -> str:
        return f"Marker(selected={self.selected}, successor={self.successor})"
