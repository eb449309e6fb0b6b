# file: src/module4_training_container/errors.py
"""
Container error types for Module 4.
"""


class ContainerError(Exception):
    """Base exception for Module 4 notes container operations."""
    pass


class PayloadEncodingError(ContainerError):
    """Raised when a payload cannot be written as invisible notes."""
    pass


class PayloadFormatError(ContainerError):
    """Raised when text does not hold a well-formed training payload."""
    pass
