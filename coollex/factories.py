import logging
from .types import *
from .algorithm import SelectedIndices
from .combinations import Combinations

logger = logging.getLogger(__name__)


def combinations(n: int, k: int) -> 'Combinations[SelectedIndices]':
    """
    k-combinations of n positions in cool-lex order, as lazy index views.
    k == 0 gives an empty sequence, not the single empty combination.
    """
    if k < 0 or n < k:
        raise ValueError(
            f"number of elements to combine is less than the number of elements in a combination: n={n}, k={k}")
    logger.debug(f"cool-lex combinations requested: n={n}, k={k}")
    return Combinations(n, k)

def from_elements(elements: Iterable[T], k: int) -> 'Combinations[Tuple[T, ...]]':
    """k-combinations of the given elements in cool-lex order, each as a tuple"""
    items = list(elements)
    return combinations(len(items), k).select(items)

# --- aliases ---
coollex = combinations
