"""Exceptions raised by rational values."""


class InvalidArgument(ValueError):
    """Bad constructor argument, e.g., zero denominator."""


class InvalidOperation(ArithmeticError):
    """Operation is not defined for given operands."""
