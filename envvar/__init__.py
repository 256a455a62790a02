"""
ABOUTME: Environment variable validation and type coercion package
ABOUTME: Reads string values from a source, checks presence and converts them to typed values
"""

import os

from .accessors import Accessor, AccessorRegistry
from .exceptions import EnvVarError
from .source import Source, from_dotenv, from_source
from .variable import Variable

__version__ = "0.1.0"

# Process-wide binding over the live process environment, created once at import
env = from_source(os.environ)
get = env.get

__all__ = [
    "Accessor",
    "AccessorRegistry",
    "EnvVarError",
    "Source",
    "Variable",
    "env",
    "from_dotenv",
    "from_source",
    "get",
]
