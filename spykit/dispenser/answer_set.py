from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional


@dataclass
class AnswerSet:
    """Answer sources registered for one exact operation key."""

    values: List[Any] = field(default_factory=list)
    consumed: int = 0
    supplier: Optional[Callable[[], Any]] = None
    exception: Optional[BaseException] = None

    def replace_values(self, values) -> None:
        self.values = list(values)
        self.consumed = 0

    @property
    def has_unconsumed_values(self) -> bool:
        return self.consumed < len(self.values)

    def take_next_value(self) -> Any:
        value = self.values[self.consumed]
        self.consumed += 1
        return value

    @property
    def raises_next(self) -> bool:
        """True when resolving this key right now would raise the registered exception."""
        return (
            self.exception is not None
            and not self.has_unconsumed_values
            and self.supplier is None
        )
