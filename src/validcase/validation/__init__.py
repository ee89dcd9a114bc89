"""Error-accumulating validation.

- Validation/Success/Failure: The two-variant core
- combine/Builder2..Builder8: Combination chain collapsing up to 8 validations
- sequence/traverse: Accumulation over any number of validations
"""

from .builder import (
    MAX_ARITY,
    MIN_ARITY,
    Builder2,
    Builder3,
    Builder4,
    Builder5,
    Builder6,
    Builder7,
    Builder8,
    combine,
)
from .collection import sequence, traverse
from .core import Failure, Success, Validation, failure, from_either, success

__all__ = [
    # Core
    "Validation", "Success", "Failure", "success", "failure", "from_either",
    # Combination chain
    "combine", "Builder2", "Builder3", "Builder4", "Builder5", "Builder6", "Builder7", "Builder8",
    "MIN_ARITY", "MAX_ARITY",
    # Collections
    "sequence", "traverse",
]
