from . import exception_constants
from .base import (
    ArgumentNameNotFoundError,
    ArgumentPairsError,
    AssertionFailure,
    CallIndexNotFoundError,
    MisuseError,
    NoAnswerRegisteredError,
    NotFoundError,
    OperationNotFoundError,
    SpyKitBaseException,
    TooManyValuesError,
    TypeMismatchError,
)

__all__ = [
    "exception_constants",
    "SpyKitBaseException",
    "NotFoundError",
    "OperationNotFoundError",
    "CallIndexNotFoundError",
    "ArgumentNameNotFoundError",
    "NoAnswerRegisteredError",
    "TypeMismatchError",
    "AssertionFailure",
    "TooManyValuesError",
    "MisuseError",
    "ArgumentPairsError",
]
