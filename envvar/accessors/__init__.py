"""
ABOUTME: Accessor catalog and registry
ABOUTME: Merges built-in conversions with caller extensions into one immutable lookup
"""

import logging
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Union

from ..exceptions import EnvVarError
from .base import Accessor, FunctionAccessor
from .booleans import BoolAccessor
from .numbers import FloatAccessor, IntAccessor, PortNumberAccessor
from .structured import JsonAccessor
from .text import ArrayAccessor, EnumAccessor, StringAccessor
from .urls import UrlObjectAccessor, UrlStringAccessor

BUILTIN_ACCESSORS = (
    StringAccessor("as_string"),
    IntAccessor("as_int"),
    IntAccessor("as_int_positive", sign=1),
    IntAccessor("as_int_negative", sign=-1),
    FloatAccessor("as_float"),
    FloatAccessor("as_float_positive", sign=1),
    FloatAccessor("as_float_negative", sign=-1),
    PortNumberAccessor("as_port_number"),
    BoolAccessor("as_bool"),
    BoolAccessor("as_bool_strict", strict=True),
    EnumAccessor("as_enum"),
    JsonAccessor("as_json"),
    JsonAccessor("as_json_array", expected=list),
    JsonAccessor("as_json_object", expected=dict),
    ArrayAccessor("as_array"),
    UrlStringAccessor("as_url_string"),
    UrlObjectAccessor("as_url_object"),
)

ExtensionAccessor = Union[Accessor, Callable[..., Any]]


class AccessorRegistry(Mapping):
    """Read-only mapping of accessor names to accessors for one source binding."""

    def __init__(self, extra_accessors: Optional[Mapping[str, ExtensionAccessor]] = None):
        """
        Build the registry from the built-in catalog and the caller's extensions.

        Extensions are registered after the built-ins, so an extension with the same name as a built-in
        replaces it.

        Parameters:
            extra_accessors (Optional[Mapping]): Accessor name to callable ``(value, *args)`` or Accessor instance.

        Raises:
            EnvVarError: If an extension name is not a public identifier or its accessor is not callable.
        """
        self._accessors: Dict[str, Accessor] = {}
        self._load_builtins()
        self._load_extensions(extra_accessors or {})

    def _load_builtins(self) -> None:
        for accessor in BUILTIN_ACCESSORS:
            self._accessors[accessor.name] = accessor

    def _load_extensions(self, extra_accessors: Mapping[str, ExtensionAccessor]) -> None:
        for name, accessor in extra_accessors.items():
            if not isinstance(name, str) or not name.isidentifier() or name.startswith("_"):
                raise EnvVarError(
                    None, f"extension accessor name {name!r} must be a public Python identifier"
                )
            if not isinstance(accessor, Accessor):
                if not callable(accessor):
                    raise EnvVarError(
                        None, f"extension accessor '{name}' must be callable"
                    )
                accessor = FunctionAccessor(name, accessor)

            if name in self._accessors:
                logging.debug(f"Extension accessor overrides built-in: {name}")
            else:
                logging.debug(f"Registered extension accessor: {name}")
            self._accessors[name] = accessor

    def __getitem__(self, name: str) -> Accessor:
        return self._accessors[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._accessors)

    def __len__(self) -> int:
        return len(self._accessors)

    def get_accessor(self, name: str) -> Optional[Accessor]:
        """
        Returns the accessor registered under the given name, or None if not found.
        """
        return self._accessors.get(name)

    def list_accessors(self) -> List[str]:
        """
        Return the sorted names of all registered accessors.
        """
        return sorted(self._accessors)


__all__ = [
    "Accessor",
    "AccessorRegistry",
    "ArrayAccessor",
    "BoolAccessor",
    "BUILTIN_ACCESSORS",
    "EnumAccessor",
    "FloatAccessor",
    "FunctionAccessor",
    "IntAccessor",
    "JsonAccessor",
    "PortNumberAccessor",
    "StringAccessor",
    "UrlObjectAccessor",
    "UrlStringAccessor",
]
