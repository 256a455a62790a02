"""
ABOUTME: Boolean accessors
ABOUTME: Accepts true/false and optionally 1/0, case-insensitively
"""

from .base import Accessor

_TRUE_VALUES = {"true", "1"}
_FALSE_VALUES = {"false", "0"}
_STRICT_TRUE_VALUES = {"true"}
_STRICT_FALSE_VALUES = {"false"}


class BoolAccessor(Accessor):
    """Boolean accessor; strict mode rejects the numeric forms."""

    def __init__(self, name: str = "as_bool", strict: bool = False):
        super().__init__(name)
        self.strict = strict

    def convert(self, value: str) -> bool:
        lowered = value.lower()
        if self.strict:
            true_values, false_values = _STRICT_TRUE_VALUES, _STRICT_FALSE_VALUES
        else:
            true_values, false_values = _TRUE_VALUES, _FALSE_VALUES

        if lowered in true_values:
            return True
        if lowered in false_values:
            return False

        if self.strict:
            raise ValueError('should be either "true", "false", "TRUE", or "FALSE"')
        raise ValueError('should be either "true", "false", "TRUE", "FALSE", 1, or 0')
