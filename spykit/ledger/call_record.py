from typing import Any, Dict, Mapping, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from spykit.core.exceptions import exception_constants as msg
from spykit.core.exceptions.base import ArgumentPairsError


def pairs_to_dict(operation: str, pairs: Sequence[Any]) -> Dict[str, Any]:
    """Fold ``name, value, name, value, ...`` into an insertion-ordered dict."""
    if len(pairs) % 2:
        raise ArgumentPairsError(msg.ODD_NUMBER_OF_PAIRS.format(METHOD=operation, COUNT=len(pairs)))

    arguments: Dict[str, Any] = {}
    for position in range(0, len(pairs), 2):
        name = pairs[position]
        if not isinstance(name, str):
            raise ArgumentPairsError(
                msg.NAME_NOT_A_STRING.format(
                    POSITION=position, METHOD=operation, TYPE=type(name).__name__
                )
            )
        arguments[name] = pairs[position + 1]
    return arguments


def values_from_pairs(operation: str, pairs: Sequence[Any]) -> Tuple[Any, ...]:
    """Every value in ``pairs``, including values whose name repeats an earlier one."""
    pairs_to_dict(operation, pairs)
    return tuple(pairs[1::2])


class CallRecord(BaseModel):
    """One recorded invocation: argument names mapped to the values the spy received."""

    model_config = ConfigDict(frozen=True)

    operation: str
    arguments: Tuple[Tuple[str, Any], ...] = Field(default=())

    @classmethod
    def from_pairs(cls, operation: str, pairs: Sequence[Any]) -> "CallRecord":
        return cls.from_mapping(operation, pairs_to_dict(operation, pairs))

    @classmethod
    def from_mapping(cls, operation: str, arguments: Mapping[str, Any]) -> "CallRecord":
        return cls(operation=operation, arguments=tuple(arguments.items()))

    @property
    def values(self) -> Tuple[Any, ...]:
        return tuple(value for _, value in self.arguments)

    def as_dict(self) -> Dict[str, Any]:
        return dict(self.arguments)

    def has_argument(self, name: str) -> bool:
        return name in self.as_dict()
