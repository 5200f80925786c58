from __future__ import annotations

from typing import Any, Callable, Optional, Union

from spykit.core.config import SpyKitSettings
from spykit.core.naming import operation_name
from spykit.dispenser.return_value_dispenser import ReturnValueDispenser
from spykit.ledger.call_ledger import CallLedger


class SpyBase:
    """
    For spies: call recording + programmed answers.
    Your class keeps its own method signatures and forwards each call to the helpers
    below, passing ``self.method`` (or a literal name) plus the arguments by keyword.
    Keyword order is the positional order the ledger compares against.
    """

    def __init__(self, settings: Optional[SpyKitSettings] = None) -> None:
        self.ledger = CallLedger(settings)
        self.dispenser = ReturnValueDispenser(settings)
        self.ledger.use_dispenser(self.dispenser)

    def _name(self, method: Union[str, Callable]) -> str:
        return operation_name(method)

    def _record(self, method: Union[str, Callable], /, **arguments: Any) -> str:
        mname = self._name(method)
        self.ledger.record_arguments(mname, arguments)
        return mname

    def _record_and_return(self, method: Union[str, Callable], /, **arguments: Any) -> Any:
        mname = self._record(method, **arguments)
        out = self.dispenser.resolve(mname, *arguments.values())
        self.ledger.record_return(mname, out)
        return out

    def _returned(self, method: Union[str, Callable], value: Any) -> Any:
        self.ledger.record_return(self._name(method), value)
        return value
