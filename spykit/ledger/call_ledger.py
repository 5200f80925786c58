import logging
from typing import Any, Dict, List, Optional, Tuple

from spykit.core.config import SpyKitSettings, settings as default_settings
from spykit.core.exceptions import exception_constants as msg
from spykit.core.exceptions.base import (
    ArgumentNameNotFoundError,
    AssertionFailure,
    CallIndexNotFoundError,
    MisuseError,
    OperationNotFoundError,
    TooManyValuesError,
    TypeMismatchError,
)
from spykit.core.naming import Operation, operation_name
from spykit.dispenser.return_value_dispenser import ReturnValueDispenser
from spykit.ledger.call_record import CallRecord, values_from_pairs
from spykit.ledger.comparison import assert_values_equal, assert_values_equal_as_equal

logger = logging.getLogger(__name__)


class CallLedger:
    """
    Records the calls a spy receives and the values it returns, per operation name,
    and answers queries and assertions about them.

    Arguments are recorded as ``name, value`` pairs. Their order is the positional
    order used by :meth:`assert_arguments` and :meth:`find_first_call_matching`.
    """

    def __init__(self, settings: Optional[SpyKitSettings] = None) -> None:
        self.settings = settings or default_settings
        self._calls: Dict[str, List[CallRecord]] = {}
        self._returns: Dict[str, List[Any]] = {}
        self._dispenser: Optional[ReturnValueDispenser] = None

    # ---- dispenser wiring ----------------------------------------------------

    def use_dispenser(self, dispenser: ReturnValueDispenser) -> None:
        self._dispenser = dispenser

    @property
    def dispenser(self) -> ReturnValueDispenser:
        if self._dispenser is None:
            raise MisuseError(msg.NO_DISPENSER)
        return self._dispenser

    # ---- recording -----------------------------------------------------------

    def record_call(self, operation: Operation, *pairs: Any) -> CallRecord:
        name = operation_name(operation)
        return self._record(CallRecord.from_pairs(name, pairs), values_from_pairs(name, pairs))

    def record_arguments(self, operation: Operation, arguments: Dict[str, Any]) -> CallRecord:
        """Same as :meth:`record_call` with the pairs given as an ordered mapping."""
        record = CallRecord.from_mapping(operation_name(operation), arguments)
        return self._record(record, record.values)

    def record_return(self, operation: Operation, value: Any) -> None:
        name = operation_name(operation)
        self._returns.setdefault(name, []).append(value)
        if self.settings.LOG_CALLS:
            logger.debug(f"{name} returned {self.settings.short_repr(value)}")

    def record_call_and_resolve(self, operation: Operation, *pairs: Any) -> Any:
        """Record the call, resolve its answer from the dispenser and record that answer."""
        dispenser = self.dispenser
        name = operation_name(operation)
        key_values = values_from_pairs(name, pairs)
        self.record_call(name, *pairs)
        value = dispenser.resolve(name, *key_values)
        self.record_return(name, value)
        return value

    def _record(self, record: CallRecord, key_values: Tuple[Any, ...]) -> CallRecord:
        # The dispenser key holds every passed value, even when a name repeats
        self._append_call(record)
        if self._dispenser is not None:
            self._dispenser.raise_if_exception_is_next(record.operation, *key_values)
        return record

    def _append_call(self, record: CallRecord) -> None:
        self._calls.setdefault(record.operation, []).append(record)
        if self.settings.LOG_CALLS:
            logger.debug(
                f"{record.operation} call {len(self._calls[record.operation]) - 1} with "
                + ", ".join(f"{k}={self.settings.short_repr(v)}" for k, v in record.arguments)
            )

    # ---- queries -------------------------------------------------------------

    def call_count(self, operation: Operation) -> int:
        return len(self._calls.get(operation_name(operation), ()))

    def was_called(self, operation: Operation) -> bool:
        return operation_name(operation) in self._calls

    def call_arguments(self, operation: Operation, call_index: int) -> Dict[str, Any]:
        return self._record_for(operation_name(operation), call_index).as_dict()

    def argument_value(self, operation: Operation, call_index: int, argument_name: str) -> Any:
        name = operation_name(operation)
        record = self._record_for(name, call_index, argument_name)
        if not record.has_argument(argument_name):
            raise ArgumentNameNotFoundError(
                self._not_found(msg.WHAT_PARAMETER_NAME, name, call_index, argument_name),
                name,
                call_index,
                argument_name,
            )
        return record.as_dict()[argument_name]

    def return_value(self, operation: Operation, call_index: int) -> Any:
        name = operation_name(operation)
        if name not in self._returns:
            raise OperationNotFoundError(
                self._not_found(msg.WHAT_METHOD_NAME, name, call_index), name, call_index
            )
        returns = self._returns[name]
        if not 0 <= call_index < len(returns):
            raise CallIndexNotFoundError(
                self._not_found(msg.WHAT_CALL_NUMBER, name, call_index), name, call_index
            )
        return returns[call_index]

    def all_return_values(self, operation: Operation) -> List[Any]:
        name = operation_name(operation)
        if name not in self._returns:
            raise OperationNotFoundError(
                msg.NOT_FOUND_FOR_METHOD.format(WHAT=msg.WHAT_METHOD_NAME, METHOD=name), name
            )
        return list(self._returns[name])

    # ---- assertions ----------------------------------------------------------

    def assert_return(self, operation: Operation, call_index: int, expected: Any) -> None:
        assert_values_equal(expected, self.return_value(operation, call_index))

    def assert_arguments(self, operation: Operation, call_index: int, *expected_values: Any) -> None:
        name = operation_name(operation)
        recorded = self._record_for(name, call_index).values
        if len(expected_values) > len(recorded):
            raise TooManyValuesError(
                msg.TOO_MANY_VALUES.format(METHOD=name, CALL_NUMBER=call_index),
                expected=expected_values,
                actual=recorded,
            )
        for expected, actual in zip(expected_values, recorded):
            assert_values_equal(expected, actual)

    def assert_argument(
        self, operation: Operation, call_index: int, argument_name: str, expected: Any
    ) -> None:
        assert_values_equal(expected, self.argument_value(operation, call_index, argument_name))

    def assert_argument_as_equal(
        self, operation: Operation, call_index: int, argument_name: str, expected: Any
    ) -> None:
        actual = self.argument_value(operation, call_index, argument_name)
        assert_values_equal_as_equal(expected, actual)

    def assert_call_count(self, operation: Operation, expected_count: int) -> None:
        actual = self.call_count(operation)
        if actual != expected_count:
            raise AssertionFailure(
                msg.VALUES_NOT_EQUAL.format(EXPECTED=expected_count, ACTUAL=actual),
                expected=expected_count,
                actual=actual,
            )

    def assert_was_called(self, operation: Operation) -> None:
        self._assert_called_state(operation, True)

    def assert_was_not_called(self, operation: Operation) -> None:
        self._assert_called_state(operation, False)

    def find_first_call_matching(self, operation: Operation, *expected_values: Any) -> Any:
        """
        Return what the first call made with ``expected_values`` returned, or ``None``
        when that call has no recorded return.
        """
        name = operation_name(operation)
        for call_index in range(self.call_count(name)):
            try:
                self.assert_arguments(name, call_index, *expected_values)
            except (AssertionFailure, TypeMismatchError):
                # Try the next recorded call
                continue
            returns = self._returns.get(name, [])
            return returns[call_index] if call_index < len(returns) else None

        values = ", ".join(str(value) for value in expected_values)
        raise AssertionFailure(
            msg.NOT_CALLED_WITH_VALUES.format(METHOD=name, VALUES=values),
            expected=expected_values,
        )

    # ---- helpers -------------------------------------------------------------

    def _record_for(
        self, name: str, call_index: int, argument_name: Optional[str] = None
    ) -> CallRecord:
        if name not in self._calls:
            raise OperationNotFoundError(
                self._not_found(msg.WHAT_METHOD_NAME, name, call_index, argument_name),
                name,
                call_index,
                argument_name,
            )
        calls = self._calls[name]
        if not 0 <= call_index < len(calls):
            raise CallIndexNotFoundError(
                self._not_found(msg.WHAT_CALL_NUMBER, name, call_index, argument_name),
                name,
                call_index,
                argument_name,
            )
        return calls[call_index]

    @staticmethod
    def _not_found(
        what: str, name: str, call_index: int, argument_name: Optional[str] = None
    ) -> str:
        if argument_name is None:
            return msg.NOT_FOUND_FOR_CALL.format(WHAT=what, METHOD=name, CALL_NUMBER=call_index)
        return msg.NOT_FOUND_FOR_PARAMETER.format(
            WHAT=what, METHOD=name, CALL_NUMBER=call_index, PARAMETER=argument_name
        )

    def _assert_called_state(self, operation: Operation, expected: bool) -> None:
        actual = self.was_called(operation)
        if actual is not expected:
            raise AssertionFailure(
                msg.VALUES_NOT_EQUAL.format(EXPECTED=str(expected).lower(), ACTUAL=str(actual).lower()),
                expected=expected,
                actual=actual,
            )
