from .core.config import LogLevel, SpyKitSettings, settings
from .core.exceptions import exception_constants
from .core.exceptions.base import (
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
from .core.logging_config import configure_logging
from .dispenser import OperationKey, ReturnValueDispenser
from .ledger import (
    CallLedger,
    CallRecord,
    ComparisonStrategy,
    assert_values_equal,
    assert_values_equal_as_equal,
    register_value_type,
)
from .test_doubles.base import SpyBase


__all__ = [

    # core/
    "LogLevel",
    "SpyKitSettings",
    "settings",
    "configure_logging",

    # core/exceptions/
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

    # ledger/
    "CallLedger",
    "CallRecord",
    "ComparisonStrategy",
    "assert_values_equal",
    "assert_values_equal_as_equal",
    "register_value_type",

    # dispenser/
    "OperationKey",
    "ReturnValueDispenser",

    # test_doubles/
    "SpyBase",
]
