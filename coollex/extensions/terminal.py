from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..algorithm import SelectedIndices

if typing.TYPE_CHECKING:
    from ..combinations import Combinations


def _materialize(item: Any) -> Any:
    # index views are single-pass and die on the next advance, so freeze them right away
    return tuple(item) if isinstance(item, SelectedIndices) else item


class TerminalAccessor(Generic[T]):
    def __init__(self, combinations_instance: 'Combinations[T]'):
        self._combinations = combinations_instance

    def _index_rows(self) -> Iterator[Combination]:
        for view in self._combinations._indices():
            yield tuple(view)

    def list(self) -> List[Any]:
        """convert to list, one tuple per combination"""
        return [_materialize(item) for item in self._combinations]

    def set(self) -> Set[FrozenSet[Any]]:
        """convert to set of frozensets, ignoring order inside and across combinations"""
        return {frozenset(_materialize(item)) for item in self._combinations}

    def count(self) -> int:
        """count combinations by walking the whole sequence"""
        return sum(1 for _ in self._combinations._indices())

    def first(self) -> Any:
        """get first combination"""
        for item in self._combinations:
            return _materialize(item)
        raise ValueError("sequence contains no elements")

    def array(self) -> np.ndarray:
        """convert to an integer numpy array of shape (count, k)"""
        rows = list(self._index_rows())
        return np.array(rows, dtype=np.intp).reshape(len(rows), self._combinations.k)

    def bits(self) -> np.ndarray:
        """boolean membership matrix of shape (count, n); row i marks the positions of combination i"""
        indices = self.array()
        mask = np.zeros((indices.shape[0], self._combinations.n), dtype=bool)
        if indices.size:
            mask[np.arange(indices.shape[0])[:, None], indices] = True
        return mask

    def strings(self) -> List[str]:
        """bit-string rendering of every combination, '1' for selected positions"""
        return [''.join('1' if bit else '0' for bit in row) for row in self.bits()]

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe, one row per combination and one column per slot"""
        return pd.DataFrame(self.array(), columns=[f"i{slot}" for slot in range(self._combinations.k)])
