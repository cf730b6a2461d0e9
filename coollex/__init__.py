"""
'                  __        __
'   _________  ___/ /  ___  / /  ___  _  __
'  / __/ __ \/ __ \/ /  / _ \/ /  / -_)| |/_/
'  \__/\____/\____/_/   \___/_/   \__/_>  <
'                                    /_/|_|
"""

# expose the main classes
from .algorithm import Algorithm, SelectedIndices
from .combinations import Combinations, CombinationsIterator

# expose the factory functions
from .factories import (
    combinations,
    from_elements,
    coollex
)

# expose supporting data classes
from .types import Marker

# define what `import *` does
__all__ = [
    "Algorithm",
    "SelectedIndices",
    "Combinations",
    "CombinationsIterator",
    "combinations",
    "from_elements",
    "coollex",
    "Marker"
]
