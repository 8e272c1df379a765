"""Validation failures raised by the hyperparameter schema and configuration model."""

from typing import Optional


class HyperparameterError(ValueError):
    """Base class for rejected hyperparameter updates.

    ``parameter`` names the offending parameter (when there is one) and
    ``allowed`` is a human readable description of the accepted range or
    options, suitable for showing next to the form field.
    """

    def __init__(self, message: str, parameter: Optional[str] = None, allowed: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.parameter = parameter
        self.allowed = allowed

    def to_dict(self) -> dict:
        return {"error": self.message, "parameter": self.parameter, "allowed": self.allowed}


class UnknownModelError(HyperparameterError, LookupError):
    """Raised when a category or model name is not in the registry."""


class UnknownParameterError(HyperparameterError, KeyError):
    """Raised when a parameter is not declared by the model schema."""

    def __str__(self) -> str:
        return self.message


class InvalidTypeError(HyperparameterError):
    """Raised when a value cannot be read as the declared primitive type."""


class RangeError(HyperparameterError):
    """Raised when a numeric value is outside its inclusive bounds."""


class InvalidOptionError(HyperparameterError):
    """Raised when a value is not one of the enumerated options."""


class IndexOutOfRangeError(HyperparameterError, IndexError):
    """Raised when a layer index does not exist."""


class NotNeuralModelError(HyperparameterError):
    """Raised when a layer operation targets a non-neural model."""
