"""
ABOUTME: String, enum and delimited array accessors
ABOUTME: Conversions that keep the value as text or split it into text items
"""

from typing import List, Sequence

from .base import Accessor


class StringAccessor(Accessor):
    """Returns the value unchanged."""

    def __init__(self, name: str = "as_string"):
        super().__init__(name)

    def convert(self, value: str) -> str:
        if not isinstance(value, str):
            raise TypeError("should be a string")
        return value


class EnumAccessor(Accessor):
    """Value must exactly match one of the caller's permitted values."""

    def __init__(self, name: str = "as_enum"):
        super().__init__(name)

    def convert(self, value: str, valid_values: Sequence[str]) -> str:
        if value not in valid_values:
            permitted = ", ".join(str(v) for v in valid_values)
            raise ValueError(f"should be one of [{permitted}]")
        return value


class ArrayAccessor(Accessor):
    """Splits the value on every occurrence of a delimiter."""

    def __init__(self, name: str = "as_array"):
        super().__init__(name)

    def convert(self, value: str, delimiter: str = ",") -> List[str]:
        if not delimiter:
            raise ValueError("should be split with a non-empty delimiter")
        if not value:
            return []
        return value.split(delimiter)
