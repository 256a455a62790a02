"""
ABOUTME: Base interface for named value accessors
ABOUTME: Every built-in and caller-supplied conversion implements the Accessor contract
"""

from abc import ABC, abstractmethod
from typing import Any, Callable


class Accessor(ABC):
    """Abstract base class for named string-to-value conversions."""

    def __init__(self, name: str):
        """
        Initializes the accessor with the name it is registered under.

        The name is the method name exposed on variables, e.g. ``as_int``.
        """
        self.name = name

    @abstractmethod
    def convert(self, value: str, *args: Any) -> Any:
        """
        Convert a raw, non-empty string into a typed value.

        Parameters:
            value (str): The raw value read from the source.
            *args: Extra arguments supplied by the caller at read time.

        Returns:
            Any: The converted value.

        Raises:
            ValueError: If the string does not satisfy the accessor's type.
        """
        pass

    def __call__(self, value: str, *args: Any) -> Any:
        return self.convert(value, *args)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


class FunctionAccessor(Accessor):
    """Accessor backed by a caller-supplied function."""

    def __init__(self, name: str, func: Callable[..., Any]):
        super().__init__(name)
        self.func = func

    def convert(self, value: str, *args: Any) -> Any:
        return self.func(value, *args)
