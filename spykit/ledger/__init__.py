from .call_ledger import CallLedger
from .call_record import CallRecord
from .comparison import (
    ComparisonStrategy,
    assert_values_equal,
    assert_values_equal_as_equal,
    register_value_type,
    strategy_for,
)

__all__ = [
    "CallLedger",
    "CallRecord",
    "ComparisonStrategy",
    "assert_values_equal",
    "assert_values_equal_as_equal",
    "register_value_type",
    "strategy_for",
]
