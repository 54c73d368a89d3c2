"""
brightnessqs library exceptions.

This module defines all custom exceptions used throughout the library.
"""

from typing import Any


class BrightnessError(Exception):
    """Base exception for brightness conversion errors"""
    pass


class InvalidArgumentError(BrightnessError, ValueError):
    """Raised when a value falls outside its brightness domain"""

    def __init__(self, operation: str, name: str, value: Any, minimum: int, maximum: int):
        self.operation = operation
        self.name = name
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(f"{operation} {name} must be an int between {minimum} and {maximum}. Actual:<{value}>")


class ConfigurationError(BrightnessError):
    """Raised when configuration is invalid"""
    pass
