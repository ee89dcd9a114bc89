"""validcase - error-accumulating validation for Python.

A Validation is either a Success holding a value or a Failure holding an error.
Independent validations combine without short-circuiting, so every failure is
collected rather than only the first.

Quick Start:
    >>> from validcase import combine, failure, success
    >>>
    >>> def check_age(age: int):
    ...     return success(age) if age > 0 else failure("age must be positive")
    >>>
    >>> combine(success("John"), check_age(5), success("123 Fake St")).apply(
    ...     lambda name, age, addr: f"{name}:{age}:{addr}"
    ... )
    Success('John:5:123 Fake St')
    >>> combine(success("John"), check_age(-1), success("123 Fake St")).apply(
    ...     lambda name, age, addr: f"{name}:{age}:{addr}"
    ... )
    Failure(('age must be positive',))

Errors accumulate in combination order:
    >>> failure("e1").combine(failure("e2")).combine(failure("e3")).apply(lambda a, b, c: a)
    Failure(('e1', 'e2', 'e3'))

Reporting:
    >>> from validcase import report, render_errors, violation
    >>> result = report(failure(violation("age", "must be positive")).apply(int))
    >>> print(render_errors(result.get_error()))
    - age: must be positive
"""

from .config import ValidcaseSettings, clear_settings_cache, get_settings
from .errors import (
    ArityError,
    EmptyValueError,
    Err,
    ErrorCode,
    Fault,
    IllegalStateError,
    NullArgumentError,
    Ok,
    Result,
    UnexpectedResultError,
    ValidcaseError,
)
from .observability import configure_logging, get_logger
from .reporting import Violation, render_errors, report, violation
from .validation import (
    MAX_ARITY,
    Builder2,
    Builder3,
    Builder4,
    Builder5,
    Builder6,
    Builder7,
    Builder8,
    Failure,
    Success,
    Validation,
    combine,
    failure,
    from_either,
    sequence,
    success,
    traverse,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "Validation", "Success", "Failure", "success", "failure", "from_either",
    # Combination chain
    "combine", "Builder2", "Builder3", "Builder4", "Builder5", "Builder6", "Builder7", "Builder8",
    "MAX_ARITY",
    # Collections
    "sequence", "traverse",
    # Either
    "Result", "Ok", "Err",
    # Errors
    "ErrorCode", "Fault", "ValidcaseError", "NullArgumentError", "EmptyValueError",
    "IllegalStateError", "UnexpectedResultError", "ArityError",
    # Reporting
    "Violation", "violation", "render_errors", "report",
    # Settings & logging
    "ValidcaseSettings", "get_settings", "clear_settings_cache", "configure_logging", "get_logger",
]
