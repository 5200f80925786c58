from typing import Callable, Union

Operation = Union[str, Callable]


def operation_name(operation: Operation) -> str:
    """Spies may pass ``self.method`` instead of a literal name."""
    if isinstance(operation, str):
        return operation
    try:
        return operation.__name__
    except AttributeError:
        raise TypeError(
            f"operation must be a str or a named callable, got {type(operation).__name__}"
        ) from None
