"""Error handling for validcase.

- ErrorCode/Fault: Structured descriptions of misuse errors
- ValidcaseError and subclasses: Exceptions raised on misuse (never for domain errors)
- Result/Ok/Err: Two-branch either type validations convert to and from
"""

from .errors import (
    ArityError,
    EmptyValueError,
    ErrorCode,
    Fault,
    IllegalStateError,
    NullArgumentError,
    UnexpectedResultError,
    ValidcaseError,
    require,
)
from .result import Err, Ok, Result

__all__ = [
    # Structured errors
    "ErrorCode", "Fault", "require",
    # Exceptions
    "ValidcaseError", "NullArgumentError", "EmptyValueError", "IllegalStateError",
    "UnexpectedResultError", "ArityError",
    # Either
    "Result", "Ok", "Err",
]
