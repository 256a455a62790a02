"""
ABOUTME: Source bindings that turn a name-to-string mapping into typed variable reads
ABOUTME: Provides from_source for any mapping and from_dotenv for .env files layered on os.environ
"""

import json
import logging
import os
from collections import ChainMap
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from dotenv import dotenv_values

from .accessors import AccessorRegistry, ExtensionAccessor
from .exceptions import EnvVarError
from .variable import Variable, build_variable_class


def default_to_string(name: str, default: Any) -> str:
    """
    Convert a caller-supplied default to the string a source would have held.

    ``str`` is kept as-is, ``bool`` becomes "true"/"false", ``int`` and ``float`` use ``str()`` and
    ``list``/``dict`` are serialized with ``json.dumps``.

    Raises:
        EnvVarError: For any other type.
    """
    if isinstance(default, str):
        return default
    if isinstance(default, bool):
        return "true" if default else "false"
    if isinstance(default, (int, float)):
        return str(default)
    if isinstance(default, (list, dict)):
        return json.dumps(default)
    raise EnvVarError(
        name,
        "default value must be a str, bool, int, float, list or dict, "
        f"not {type(default).__name__}",
    )


class Source:
    """A lookup mapping bound to a fixed set of accessors."""

    def __init__(
        self,
        source: Mapping[str, str],
        extra_accessors: Optional[Mapping[str, ExtensionAccessor]] = None,
    ):
        """
        Bind a mapping and optional extension accessors.

        The mapping is kept by reference and read on every ``get()``, so changes the caller makes to it
        later are visible. The accessor set is fixed here and never changes afterwards.
        """
        self._source = source
        self.accessors = AccessorRegistry(extra_accessors)
        self._variable_class = build_variable_class(self.accessors)

    def get(
        self, name: Optional[str] = None, default: Any = None
    ) -> Union[Variable, Mapping[str, str]]:
        """
        Start a read of one variable, or return the whole mapping when no name is given.

        Parameters:
            name (Optional[str]): The variable name to look up.
            default (Any): Value used when the name is absent from the source; see ``default_to_string``.
                None means no default.

        Returns:
            Variable: A fresh variable ready for chaining, or the source mapping itself if name is None.
        """
        if name is None:
            return self._source

        value = self._source.get(name)
        if value is None and default is not None:
            return self._variable_class(name, default_to_string(name, default), default_used=True)
        return self._variable_class(name, value)

    def list_accessors(self) -> List[str]:
        """Return the names of the accessors available on variables from this source."""
        return self.accessors.list_accessors()


def from_source(
    source: Mapping[str, str],
    extra_accessors: Optional[Mapping[str, ExtensionAccessor]] = None,
) -> Source:
    """Bind a mapping (and optional extension accessors) for typed reads."""
    return Source(source, extra_accessors)


def from_dotenv(
    path: Union[str, Path] = ".env",
    extra_accessors: Optional[Mapping[str, ExtensionAccessor]] = None,
    override: bool = False,
) -> Source:
    """
    Bind the process environment layered with the entries of a .env file.

    The file is read once; the process environment stays live. By default process variables take
    precedence over the file; with ``override=True`` the file wins. A missing file gives a source over
    the process environment only.

    Parameters:
        path (Union[str, Path]): Location of the .env file.
        extra_accessors (Optional[Mapping]): Extension accessors, as for ``from_source``.
        override (bool): Whether .env entries take precedence over process variables.

    Returns:
        Source: The bound source.
    """
    env_path = Path(path)
    if env_path.exists():
        file_values = {
            key: value
            for key, value in dotenv_values(env_path).items()
            if value is not None
        }
        logging.debug(f"Loaded {len(file_values)} variables from {env_path}")
    else:
        file_values = {}
        logging.debug(f"No {env_path} file found, using process environment only")

    if override:
        layered = ChainMap(file_values, os.environ)
    else:
        layered = ChainMap(os.environ, file_values)
    return from_source(layered, extra_accessors)
