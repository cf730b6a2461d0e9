"""
the cool-lex linked list algorithm (ruskey & williams, section 3.2 "iterative algorithms").

markers live in an arena indexed by slot; each one points at its successor by slot index.
the successor of the last marker in the chain is the slot `n`, a per-instance terminator
that is never dereferenced. every transition re-links exactly one marker.
"""
import logging
from .types import *

logger = logging.getLogger(__name__)


class Algorithm:
    """
    stateful cool-lex generator over `zeros` unselected and `ones` selected markers.
    constructed already positioned at the first combination (all ones packed at the front).
    """

    def __init__(self, zeros: int, ones: int):
        if ones < 1:
            raise ValueError(f"number of selected markers must be at least 1, got {ones}")
        if zeros < 0:
            raise ValueError(f"number of unselected markers must be non-negative, got {zeros}")

        n = zeros + ones
        self._zeros = zeros
        self._ones = ones
        self._end = n  # terminator slot
        # slot i links to i + 1; the last one links to the terminator
        self._markers: List[Marker] = [Marker(i < ones, i + 1) for i in range(n)]
        self._head = 0
        self._pivot = ones - 1
        # bumped on every advance so stale index views can be detected
        self._version = 0
        logger.debug(f"cool-lex algorithm built: zeros={zeros}, ones={ones}")

    @property
    def n(self) -> int: return self._zeros + self._ones

    @property
    def k(self) -> int: return self._ones

    @property
    def zeros(self) -> int: return self._zeros

    @property
    def ones(self) -> int: return self._ones

    def has_more(self) -> bool:
        """whether a further advance() is valid"""
        return self._markers[self._pivot].successor != self._end

    def advance(self) -> None:
        """move to the next combination in cool-lex order by relocating one marker to the head"""
        if not self.has_more():
            raise RuntimeError("no more combinations; check has_more() before advance()")

        markers = self._markers
        pivot = markers[self._pivot]
        y = pivot.successor
        pivot.successor = markers[y].successor
        markers[y].successor = self._head
        self._head = y

        head = markers[y]
        if not head.selected and markers[head.successor].selected:
            self._pivot = head.successor
        self._version += 1

    def indices(self) -> 'SelectedIndices':
        """a single-pass view of the selected positions of the current combination"""
        return SelectedIndices(self)

    def _walk(self) -> Iterator[Marker]:
        curr = self._head
        while curr != self._end:
            marker = self._markers[curr]
            yield marker
            curr = marker.successor

    def __str__(self) -> str:
        return ''.join('1' if marker.selected else '0' for marker in self._walk())

    def __repr__(self) -> str:
        return f"Algorithm(zeros={self._zeros}, ones={self._ones}, state='{self}')"


class SelectedIndices(Iterator[int]):
    """
    iterator over the positions (0-based, in traversal order from head) whose marker is selected.
    valid only until its algorithm advances; must be consumed before the next combination is requested.
    """

    def __init__(self, algorithm: Algorithm):
        self._algorithm = algorithm
        self._version = algorithm._version
        self._curr = algorithm._head
        self._i = 0

    def __iter__(self) -> 'SelectedIndices':
        return self

    def __next__(self) -> int:
        alg = self._algorithm
        if self._version != alg._version:
            raise RuntimeError("algorithm advanced while its index view was being read")

        while self._curr != alg._end:
            marker = alg._markers[self._curr]
            i = self._i
            self._i += 1
            self._curr = marker.successor
            if marker.selected:
                return i
        raise StopIteration
