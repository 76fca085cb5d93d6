"""Errors raised by dense network components."""


class DimensionMismatch(ValueError):
    """Raised when two operands have incompatible lengths."""

    def __init__(self, operation, expected, actual):
        """
        Args:
            operation: Name of the operation that failed (e.g. 'dot')
            expected: Length required by the left operand / declared size
            actual: Length that was supplied
        """
        self.operation = operation
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{operation}: dimension mismatch (expected {expected}, got {actual})"
        )


def check_length(operation, expected, actual):
    """Raise DimensionMismatch unless expected == actual."""
    if expected != actual:
        raise DimensionMismatch(operation, expected, actual)
