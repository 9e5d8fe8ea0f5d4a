"""combinations - Count, generate, enumerate and index m-element subsets.

Quick Start:
    from combinations import Counter, Generator, Enumerator, Lexor

    Counter().count(4, 2)                 # 6
    gen = Generator([0, 1, 2, 3])
    gen.generate(2)
    gen.combinations                      # [[0, 1], [0, 2], ..., [2, 3]]
    Lexor([0, 1, 2, 3], m=2).get(3)       # [1, 2]

All four components agree on the lexicographic order of index tuples.
"""

from __future__ import annotations

from combinations.counter import DEFAULT_BITS, Counter
from combinations.enumerator import Enumerator
from combinations.errors import (
    CombinationsError,
    ConfigValidationError,
    CountOverflowError,
    ErrorContext,
)
from combinations.generator import STRATEGIES, GenerationStats, Generator
from combinations.lexor import Lexor
from combinations.traversal import VisitState

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Components
    "Counter",
    "Generator",
    "GenerationStats",
    "Enumerator",
    "Lexor",
    "VisitState",
    "STRATEGIES",
    "DEFAULT_BITS",
    # Errors
    "CombinationsError",
    "CountOverflowError",
    "ConfigValidationError",
    "ErrorContext",
]
