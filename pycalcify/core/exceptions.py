"""
Exception hierarchy for PyCalcify.

All exceptions inherit from PyCalcifyError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyCalcifyError(Exception):
    """Base exception for all PyCalcify errors."""
    pass


class ValidationError(PyCalcifyError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class InvalidNumberError(ValidationError):
    """
    A supplied operand cannot be interpreted as a real number.

    Attributes:
        value: The rejected operand
    """

    def __init__(self, message: str, value: object = None):
        super().__init__(message)
        self.value = value


class InvalidArgumentError(ValidationError):
    """
    An operation-specific precondition was violated.

    Examples: factorial of a negative number, root finding on a
    non-quadratic polynomial, a negative number of decimal places.
    """
    pass


class InvalidRoundingModeError(InvalidArgumentError):
    """
    Rounding mode outside the recognised set.

    Attributes:
        mode: The rejected rounding mode
    """

    def __init__(self, message: str, mode: object = None):
        super().__init__(message)
        self.mode = mode


class EmptyInputError(ValidationError):
    """
    A statistic was requested over zero observations.

    Attributes:
        name: Parameter name of the empty input
    """

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class NotSquareError(DimensionError):
    """
    Square-matrix precondition violated.

    Attributes:
        shape: Shape of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, ...] | None = None):
        super().__init__(message)
        self.shape = shape


class NumericalError(PyCalcifyError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DivisionByZeroError(NumericalError):
    """Arithmetic division by a zero-valued operand."""
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or hits a zero pivot.

    Raised when a matrix operation requires a nonzero pivot or a nonzero
    determinant and the matrix does not provide one.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Diagonal position of the zero pivot, if applicable
        determinant: Determinant value, if computed
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        determinant: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.determinant = determinant
