"""
ABOUTME: Settings for the envvar command-line tool
ABOUTME: Reads the tool's own configuration through the envvar accessors
"""

from typing import Any, Dict, Optional

from .source import Source

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _default_source(source: Optional[Source]) -> Source:
    if source is None:
        from . import env as source
    return source


def get_log_level(source: Optional[Source] = None) -> str:
    """Log level from ENVVAR_LOG_LEVEL, INFO when unset."""
    return _default_source(source).get("ENVVAR_LOG_LEVEL", "INFO").as_enum(LOG_LEVELS)


def get_env_file(source: Optional[Source] = None) -> str:
    """Path of the .env file from ENVVAR_ENV_FILE, ``.env`` when unset."""
    return _default_source(source).get("ENVVAR_ENV_FILE", ".env").as_string()


def load_settings(source: Optional[Source] = None) -> Dict[str, Any]:
    """
    Load CLI settings from the environment.

    Parameters:
        source (Optional[Source]): Source to read from; defaults to the process environment binding.

    Returns:
        Dict[str, Any]: ``log_level`` (from ENVVAR_LOG_LEVEL) and ``env_file`` (from ENVVAR_ENV_FILE).

    Raises:
        EnvVarError: If ENVVAR_LOG_LEVEL is not one of LOG_LEVELS.
    """
    return {
        "log_level": get_log_level(source),
        "env_file": get_env_file(source),
    }
