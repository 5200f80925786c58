from typing import Any, Iterable, Tuple


def _element_hash(value: Any) -> int:
    try:
        return hash(value)
    except TypeError:
        # Unhashable values (lists, sets, dicts, ...) hash by their type
        return hash(type(value))


def _same_element(a: Any, b: Any) -> bool:
    # Elements must agree on type and hash as well as on ==, so equal keys always hash equal
    return type(a) is type(b) and a == b and _element_hash(a) == _element_hash(b)


class OperationKey:
    """
    Operation name plus the positional argument values a call was made with.

    Two keys are equal when their names are equal and their values pairwise have the same
    type and compare ``==``. ``1``, ``1.0`` and ``True`` are therefore different keys,
    as are ``{1}`` and ``frozenset({1})``.
    """

    __slots__ = ("operation", "argument_values")

    def __init__(self, operation: str, argument_values: Iterable[Any] = ()) -> None:
        self.operation = operation
        self.argument_values: Tuple[Any, ...] = tuple(argument_values)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, OperationKey):
            return NotImplemented
        if self.operation != other.operation:
            return False
        if len(self.argument_values) != len(other.argument_values):
            return False
        return all(_same_element(a, b) for a, b in zip(self.argument_values, other.argument_values))

    def __hash__(self) -> int:
        values_hash = sum(_element_hash(value) for value in self.argument_values)
        return hash((self.operation, values_hash))

    def __repr__(self) -> str:
        return f"OperationKey({self.operation!r}, {self.argument_values!r})"

    def printable_values(self) -> str:
        return ", ".join(str(value) for value in self.argument_values)
