import logging
from typing import Any, Callable, Dict, Iterable, Optional

from spykit.core.config import SpyKitSettings, settings as default_settings
from spykit.core.exceptions import exception_constants as msg
from spykit.core.exceptions.base import NoAnswerRegisteredError
from spykit.core.naming import Operation, operation_name
from spykit.dispenser.answer_set import AnswerSet
from spykit.dispenser.operation_key import OperationKey

logger = logging.getLogger(__name__)


class ReturnValueDispenser:
    """
    Hands out pre-programmed answers to a spy, keyed by operation name and the exact
    argument values of the call.

    Resolution order for one key:
      1. the next unconsumed value queued with :meth:`queue_values`
      2. the supplier set with :meth:`set_supplier_for_arguments`
      3. the exception set with :meth:`set_exception`
      4. the default supplier for the bare operation name
    and a :class:`NoAnswerRegisteredError` when none of them applies.
    """

    def __init__(self, settings: Optional[SpyKitSettings] = None) -> None:
        self.settings = settings or default_settings
        self._answers: Dict[OperationKey, AnswerSet] = {}
        self._default_suppliers: Dict[str, Callable[[], Any]] = {}

    # ---- registration --------------------------------------------------------

    def queue_values(self, operation: Operation, values: Iterable[Any], *argument_values: Any) -> None:
        key = OperationKey(operation_name(operation), argument_values)
        self._answer_set(key).replace_values(values)
        self._log_registration("queued values", key)

    def set_exception(self, operation: Operation, exception: BaseException, *argument_values: Any) -> None:
        key = OperationKey(operation_name(operation), argument_values)
        self._answer_set(key).exception = exception
        self._log_registration(f"exception {type(exception).__name__}", key)

    def set_supplier_for_arguments(
        self, operation: Operation, supplier: Callable[[], Any], *argument_values: Any
    ) -> None:
        key = OperationKey(operation_name(operation), argument_values)
        self._answer_set(key).supplier = supplier
        self._log_registration("supplier", key)

    def set_default_supplier(self, operation: Operation, supplier: Callable[[], Any]) -> None:
        name = operation_name(operation)
        self._default_suppliers[name] = supplier
        if self.settings.LOG_CALLS:
            logger.debug(f"Registered default supplier for {name}")

    # ---- resolution ----------------------------------------------------------

    def resolve(self, operation: Operation, *argument_values: Any) -> Any:
        key = OperationKey(operation_name(operation), argument_values)
        answers = self._answers.get(key)

        if answers is not None:
            if answers.has_unconsumed_values:
                return self._resolved(key, "queue", answers.take_next_value())
            if answers.supplier is not None:
                return self._resolved(key, "supplier", answers.supplier())
            if answers.exception is not None:
                self._raise_programmed(key, answers.exception)

        default_supplier = self._default_suppliers.get(key.operation)
        if default_supplier is not None:
            return self._resolved(key, "default supplier", default_supplier())

        message = msg.NO_RETURN_VALUE.format(METHOD=key.operation, VALUES=key.printable_values())
        logger.info(message)
        raise NoAnswerRegisteredError(message, key.operation, key.argument_values)

    def raise_if_exception_is_next(self, operation: Operation, *argument_values: Any) -> None:
        """Raise the programmed exception for this key if resolving it now would raise it."""
        key = OperationKey(operation_name(operation), argument_values)
        answers = self._answers.get(key)
        if answers is not None and answers.raises_next:
            self._raise_programmed(key, answers.exception)

    def times_resolved_from_queue(self, operation: Operation, *argument_values: Any) -> int:
        answers = self._answers.get(OperationKey(operation_name(operation), argument_values))
        return answers.consumed if answers is not None else 0

    # ---- helpers -------------------------------------------------------------

    def _answer_set(self, key: OperationKey) -> AnswerSet:
        return self._answers.setdefault(key, AnswerSet())

    def _resolved(self, key: OperationKey, source: str, value: Any) -> Any:
        if self.settings.LOG_CALLS:
            logger.debug(
                f"Resolved {key.operation}{key.argument_values!r} from {source}: "
                f"{self.settings.short_repr(value)}"
            )
        return value

    def _raise_programmed(self, key: OperationKey, exception: BaseException) -> None:
        logger.debug(f"Raising programmed {type(exception).__name__} for {key!r}")
        raise exception

    def _log_registration(self, what: str, key: OperationKey) -> None:
        if self.settings.LOG_CALLS:
            logger.debug(f"Registered {what} for {key!r}")
