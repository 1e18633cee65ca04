from dataclasses import dataclass
import enum


class ErrorPolicy(enum.Enum):
    """What to do with a restaurant whose hours cannot be parsed."""

    SKIP = enum.auto()
    FAIL = enum.auto()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass
class Context:
    on_error: ErrorPolicy = ErrorPolicy.SKIP
