"""
ABOUTME: Chainable variable reads and the per-binding variable class factory
ABOUTME: Enforces required checks, applies transforms and runs exactly one accessor per read
"""

from typing import Any, Mapping, Optional

from .accessors import Accessor
from .exceptions import EnvVarError
from .transforms import decode_base64


class Variable:
    """
    One in-flight read of a configuration variable.

    Accessor methods (``as_int``, ``as_bool`` and any extensions) are not defined here; they are
    generated per source binding by ``build_variable_class``. A variable is consumed by the first
    accessor call made on it.
    """

    def __init__(self, name: str, value: Optional[str], default_used: bool = False):
        self.name = name
        self.value = value
        self.default_used = default_used
        self.is_required = False
        self._consumed = False

    def required(self, is_required: bool = True) -> "Variable":
        """
        Mark the variable as required, failing now if it has no value.

        Parameters:
            is_required (bool): Pass False to leave the variable optional, which makes this a no-op.

        Raises:
            EnvVarError: If the variable is required and its value is missing or empty.
        """
        self.is_required = is_required
        if is_required and not self.value:
            raise EnvVarError(self.name, "is a required variable, but it was not set")
        return self

    def convert_from_base64(self) -> "Variable":
        """Replace the value with its base64-decoded text; a missing value stays missing."""
        if self.value is None:
            return self
        try:
            self.value = decode_base64(self.value)
        except ValueError as e:
            raise EnvVarError(self.name, str(e)) from e
        return self

    def _access(self, name: str, accessor: Accessor, *args: Any) -> Any:
        if self._consumed:
            raise EnvVarError(
                self.name,
                f"has already been read; call get() again before using {name}",
            )
        self._consumed = True

        # A missing value on an optional variable is "not configured"
        if self.value is None:
            return None

        try:
            return accessor.convert(self.value, *args)
        except Exception as e:
            reason = e.reason if isinstance(e, EnvVarError) else str(e)
            raise EnvVarError(self.name, reason) from e

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name={self.name!r}, value={self.value!r}, "
            f"default_used={self.default_used!r})"
        )


RESERVED_NAMES = frozenset(dir(Variable)) | {
    "name",
    "value",
    "default_used",
    "is_required",
}


def _bind_accessor(name: str, accessor: Accessor):
    def read(self, *args):
        return self._access(name, accessor, *args)

    read.__name__ = name
    read.__qualname__ = f"Variable.{name}"
    read.__doc__ = accessor.__doc__
    return read


def build_variable_class(accessors: Mapping[str, Accessor]) -> type:
    """
    Create a Variable subclass with one method per accessor.

    Called once when a source is bound, so every read from that source shares the same resolved set
    of accessor methods.

    Raises:
        EnvVarError: If an accessor name would shadow a Variable attribute or chain method.
    """
    methods = {}
    for name, accessor in accessors.items():
        if name in RESERVED_NAMES:
            raise EnvVarError(None, f"accessor name '{name}' is reserved by Variable")
        methods[name] = _bind_accessor(name, accessor)
    return type("BoundVariable", (Variable,), methods)
