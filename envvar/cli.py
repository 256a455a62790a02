"""
ABOUTME: Command-line interface for reading and validating a single variable
ABOUTME: Handles argument parsing, .env loading, logging setup and result output
"""

import argparse
import json
import logging
import sys
from urllib.parse import SplitResult

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from . import __version__
from .config import LOG_LEVELS, get_env_file, get_log_level
from .exceptions import EnvVarError
from .source import Source, from_dotenv

console = Console()


def cli(argv=None) -> argparse.Namespace:
    """
    Parse and return command-line arguments for the envvar tool.

    Returns:
        argparse.Namespace: Parsed arguments naming the variable, the accessor and its arguments, the
        default, chain options (required, base64), the .env file and output options.
    """
    p = argparse.ArgumentParser(
        description="Read an environment variable and convert it to a typed value"
    )
    p.add_argument("name", nargs="?", help="Variable name to read")
    p.add_argument(
        "--as",
        dest="accessor",
        default="as_string",
        help="Accessor to apply, e.g. as_int or int (default: as_string)",
    )
    p.add_argument(
        "--arg",
        dest="args",
        action="append",
        default=[],
        help="Accessor argument; repeat for several (as_enum collects them into the permitted values)",
    )
    p.add_argument("--default", help="Value used when the variable is not set")
    p.add_argument(
        "--required", action="store_true", help="Fail if the variable is unset or empty"
    )
    p.add_argument(
        "--base64", action="store_true", help="Decode the value from base64 first"
    )
    p.add_argument(
        "--env-file",
        help="Path of a .env file to layer under the environment (default: $ENVVAR_ENV_FILE or .env)",
    )
    p.add_argument(
        "--override",
        action="store_true",
        help="Let .env entries take precedence over the process environment",
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="Output the result as JSON instead of rich console text",
    )
    p.add_argument(
        "--list-accessors",
        action="store_true",
        help="List all available accessors",
    )
    p.add_argument(
        "--log-level",
        default=None,
        choices=LOG_LEVELS,
        help="Log level (default: $ENVVAR_LOG_LEVEL or INFO)",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"envvar {__version__}",
    )
    a = p.parse_args(argv)
    if not a.name and not a.list_accessors:
        p.error("the following arguments are required: name")
    return a


def accessor_name(name: str) -> str:
    """Accept both ``as_int`` and the short form ``int``."""
    return name if name.startswith("as_") else f"as_{name}"


def read_variable(source: Source, a: argparse.Namespace):
    """
    Read the variable described by the parsed arguments from a source.

    Raises:
        EnvVarError: If the accessor is unknown or the value fails validation.
    """
    name = accessor_name(a.accessor)
    if source.accessors.get_accessor(name) is None:
        raise EnvVarError(
            None,
            f"unknown accessor '{name}'. Available accessors: {source.list_accessors()}",
        )

    variable = source.get(a.name, a.default).required(a.required)
    if a.base64:
        variable.convert_from_base64()

    args = [a.args] if name == "as_enum" else a.args
    return getattr(variable, name)(*args)


def _to_jsonable(value):
    if isinstance(value, SplitResult):
        return value.geturl()
    return value


def main(argv=None):
    """
    Execute the main entry point for the envvar CLI tool.

    Parses arguments, reads settings and the .env file, configures rich logging, then reads and prints
    one variable. Exits with status 1 on validation errors, on interruption or on unexpected failures.
    """
    a = cli(argv)

    try:
        # Command-line flags take precedence; the environment is only read when a flag is absent
        log_level = a.log_level or get_log_level()
        env_file = a.env_file or get_env_file()

        logging.basicConfig(
            level=getattr(logging, log_level),
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(console=console, rich_tracebacks=True)],
        )

        source = from_dotenv(env_file, override=a.override)

        if a.list_accessors:
            console.print(f"🔌 Available accessors: {escape(str(source.list_accessors()))}")
            sys.exit(0)

        value = read_variable(source, a)

        if a.json:
            print(json.dumps({"name": a.name, "value": _to_jsonable(value)}))
        elif value is None:
            console.print(f"⚠️  {a.name} is not set")
        else:
            console.print(f"✅ {a.name} = {escape(repr(_to_jsonable(value)))}")
    except EnvVarError as e:
        console.print(f"❌ {escape(str(e))}")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n❌ Interrupted by user")
        sys.exit(1)
    except Exception as exc:
        console.print(f"❌ Fatal error: {escape(str(exc))}")
        logging.exception("Fatal error occurred")
        sys.exit(1)


if __name__ == "__main__":
    main()
