"""
ABOUTME: Integer, float and port number accessors
ABOUTME: Parses whole strings strictly and applies sign and range constraints
"""

import math
import re

from .base import Accessor

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

MIN_PORT = 0
MAX_PORT = 65535


def parse_int(value: str) -> int:
    """Parse a base-10 integer literal, rejecting decimals and trailing text."""
    stripped = value.strip()
    if not _INT_PATTERN.fullmatch(stripped):
        raise ValueError("should be a valid integer")
    return int(stripped)


def parse_float(value: str) -> float:
    """Parse a finite float literal, rejecting nan, inf and trailing text."""
    stripped = value.strip()
    if not _FLOAT_PATTERN.fullmatch(stripped):
        raise ValueError("should be a valid float")
    result = float(stripped)
    if not math.isfinite(result):
        raise ValueError("should be a valid float")
    return result


def _check_sign(number, sign: int, kind: str):
    if sign > 0 and number <= 0:
        raise ValueError(f"should be a positive {kind}")
    if sign < 0 and number >= 0:
        raise ValueError(f"should be a negative {kind}")
    return number


class IntAccessor(Accessor):
    """Strict integer accessor, optionally restricted to one sign."""

    def __init__(self, name: str = "as_int", sign: int = 0):
        super().__init__(name)
        self.sign = sign

    def convert(self, value: str) -> int:
        return _check_sign(parse_int(value), self.sign, "integer")


class FloatAccessor(Accessor):
    """Strict float accessor, optionally restricted to one sign."""

    def __init__(self, name: str = "as_float", sign: int = 0):
        super().__init__(name)
        self.sign = sign

    def convert(self, value: str) -> float:
        return _check_sign(parse_float(value), self.sign, "float")


class PortNumberAccessor(Accessor):
    """TCP/UDP port number in the inclusive range 0-65535."""

    def __init__(self, name: str = "as_port_number"):
        super().__init__(name)

    def convert(self, value: str) -> int:
        port = parse_int(value)
        if port > MAX_PORT:
            raise ValueError(f"cannot assign a port number greater than {MAX_PORT}")
        if port < MIN_PORT:
            raise ValueError(f"cannot assign a port number lower than {MIN_PORT}")
        return port
