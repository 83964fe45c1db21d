"""Exception hierarchy for mathkit.

Every error raised by the library derives from MathkitError. Errors that
describe bad input also derive from the matching built-in exception so
callers can catch them without importing this module.
"""


class MathkitError(Exception):
    """Base class for all mathkit errors."""

    pass


class EmptyInputError(MathkitError, ValueError):
    """Raised when a statistics engine is built from zero observations."""

    pass


class InsufficientDataError(MathkitError, ValueError):
    """Raised when a statistic needs more observations than the sample holds."""

    pass


class DivideByZeroError(MathkitError, ZeroDivisionError):
    """Raised when a complex number is divided by zero."""

    pass


class NotRealError(MathkitError, ValueError):
    """Raised when a complex number with an imaginary part is used as a real."""

    pass


class DimensionMismatchError(MathkitError, ValueError):
    """Raised when 2D and 3D coordinates are mixed in one computation."""

    pass


class LeadingCoefficientZeroError(MathkitError, ValueError):
    """Raised when a linear equation has a zero coefficient on x."""

    pass
