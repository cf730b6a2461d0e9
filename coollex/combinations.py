from __future__ import annotations

import logging
from enum import Enum
from .types import *
from .algorithm import Algorithm, SelectedIndices
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)


class _State(Enum):
    NOT_STARTED = 0
    STARTED = 1
    EXHAUSTED = 2


class CombinationsIterator(Iterator[SelectedIndices]):
    """
    adapts a stateful algorithm to the iterator protocol.
    the algorithm is built positioned at the first combination, so the first pull
    yields without advancing and every later pull advances first.
    """

    def __init__(self, algorithm: Optional[Algorithm]):
        self._algorithm = algorithm
        self._state = _State.NOT_STARTED if algorithm is not None else _State.EXHAUSTED

    def __iter__(self) -> 'CombinationsIterator':
        return self

    def __next__(self) -> SelectedIndices:
        if self._state is _State.NOT_STARTED:
            self._state = _State.STARTED
            return self._algorithm.indices()

        if self._state is _State.STARTED and self._algorithm.has_more():
            self._algorithm.advance()
            return self._algorithm.indices()

        if self._state is _State.STARTED:
            logger.debug(f"cool-lex combinations exhausted: n={self._algorithm.n}, k={self._algorithm.k}")
        self._state = _State.EXHAUSTED
        raise StopIteration


class Combinations(Generic[T]):
    """
    lazy, re-iterable sequence of the k-combinations of n positions in cool-lex order.
    each iteration builds a fresh algorithm; each combination is an index view that
    must be consumed before the next one is pulled.
    """

    def __init__(self, n: int, k: int, selector: Optional[Selector[Indices, T]] = None):
        self._n = n
        self._k = k
        self._selector = selector
        self.to = TerminalAccessor(self)

    @property
    def n(self) -> int: return self._n

    @property
    def k(self) -> int: return self._k

    def _indices(self) -> CombinationsIterator:
        """the raw index views, ignoring any element projection"""
        # k == 0 yields nothing; the empty set is not enumerated
        algorithm = Algorithm(self._n - self._k, self._k) if self._k != 0 else None
        return CombinationsIterator(algorithm)

    def __iter__(self) -> Iterator[T]:
        if self._selector is None:
            return self._indices()
        return (self._selector(view) for view in self._indices())

    def select(self, elements: Sequence[U]) -> 'Combinations[Tuple[U, ...]]':
        """project every combination onto the given elements, each as a tuple"""
        items = list(elements)
        if len(items) != self._n:
            raise ValueError(f"expected {self._n} elements, got {len(items)}")
        return Combinations(self._n, self._k, lambda view: tuple(items[i] for i in view))

    def __repr__(self) -> str:
        return f"Combinations(n={self._n}, k={self._k})"
