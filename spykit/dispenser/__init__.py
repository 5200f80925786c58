from .answer_set import AnswerSet
from .operation_key import OperationKey
from .return_value_dispenser import ReturnValueDispenser

__all__ = ["AnswerSet", "OperationKey", "ReturnValueDispenser"]
