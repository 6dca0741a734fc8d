"""Exceptions raised by the toll calculator."""


class TollCalculatorError(Exception):
    """Base class for all calculator errors."""


class InvalidInputError(TollCalculatorError, ValueError):
    """Passage data the calculator refuses to price (empty, mixed days, ...)."""
