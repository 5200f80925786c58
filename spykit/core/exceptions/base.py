"""
Exception classes raised by the call ledger and the return value dispenser.
"""
from typing import Any, Optional


class SpyKitBaseException(Exception):
    """Base exception for all spykit exceptions"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__


class NotFoundError(SpyKitBaseException, LookupError):
    """An operation, call, argument or answer the test asked for was never set up"""

    def __init__(
        self,
        message: str,
        operation: str,
        call_index: Optional[int] = None,
        argument_name: Optional[str] = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.call_index = call_index
        self.argument_name = argument_name


class OperationNotFoundError(NotFoundError):
    """Operation name was never recorded"""
    pass


class CallIndexNotFoundError(NotFoundError):
    """Call index is beyond the recorded range"""
    pass


class ArgumentNameNotFoundError(NotFoundError):
    """Argument name is absent from the recorded call"""
    pass


class NoAnswerRegisteredError(NotFoundError):
    """Dispenser has no source left for the requested key"""

    def __init__(self, message: str, operation: str, argument_values: tuple = ()):
        super().__init__(message, operation)
        self.argument_values = argument_values


class TypeMismatchError(SpyKitBaseException, TypeError):
    """Compared values are of different runtime types"""

    def __init__(self, message: str, expected_type: type, actual_type: type):
        super().__init__(message)
        self.expected_type = expected_type
        self.actual_type = actual_type


class AssertionFailure(SpyKitBaseException, AssertionError):
    """A comparison or a count assertion did not hold"""

    def __init__(self, message: str, expected: Any = None, actual: Any = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class TooManyValuesError(AssertionFailure):
    """More expected values were given than the call recorded"""
    pass


class MisuseError(SpyKitBaseException):
    """The library was used against its contract"""
    pass


class ArgumentPairsError(MisuseError, ValueError):
    """Name/value pairs did not alternate correctly"""
    pass
