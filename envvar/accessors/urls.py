"""
ABOUTME: URL accessors
ABOUTME: Validates absolute URLs and returns them normalized as text or as a SplitResult
"""

import ipaddress
import re
from urllib.parse import SplitResult, urlsplit, urlunsplit

from .base import Accessor

# Schemes whose empty path normalizes to "/" and whose default port is dropped
DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}

_LABEL_PATTERN = re.compile(r"[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?")
_BRACKETED_HOST_PATTERN = re.compile(r"\[[^\]]*\](?::[0-9]*)?")


def check_host(hostport: str, hostname: str) -> None:
    """
    Reject hosts that are neither an IP literal nor a sequence of DNS labels.

    Parameters:
        hostport (str): The netloc without userinfo, e.g. "[::1]:8080".
        hostname (str): The lower-cased host as reported by urlsplit.

    Raises:
        ValueError: If the host is malformed.
    """
    if hostport.startswith("["):
        if not _BRACKETED_HOST_PATTERN.fullmatch(hostport):
            raise ValueError(f"should be a valid URL: invalid host {hostport!r}")
        try:
            ipaddress.IPv6Address(hostname)
        except ValueError as e:
            raise ValueError(f"should be a valid URL: {e}") from e
        return

    try:
        ascii_host = hostname.encode("idna").decode("ascii")
    except UnicodeError as e:
        raise ValueError(f"should be a valid URL: invalid host {hostname!r}") from e

    labels = ascii_host[:-1].split(".") if ascii_host.endswith(".") else ascii_host.split(".")
    if not all(_LABEL_PATTERN.fullmatch(label) for label in labels):
        raise ValueError(f"should be a valid URL: invalid host {hostname!r}")

    # All-numeric hosts must be a real IPv4 address
    if all(label.isdigit() for label in labels):
        try:
            ipaddress.IPv4Address(ascii_host)
        except ValueError as e:
            raise ValueError(f"should be a valid URL: {e}") from e


def parse_url(value: str) -> SplitResult:
    """
    Strictly parse an absolute URL and return its normalized components.

    The scheme and host are required and must be well formed, the port (if any) must be in range and
    the value may not contain whitespace. Scheme and host are lower-cased, a default port is removed and
    an empty path becomes "/" for the schemes in DEFAULT_PORTS.

    Raises:
        ValueError: If the value is not a valid absolute URL.
    """
    if any(ch.isspace() for ch in value):
        raise ValueError("should be a valid URL: whitespace is not allowed")

    try:
        parts = urlsplit(value)
        port = parts.port
    except ValueError as e:
        raise ValueError(f"should be a valid URL: {e}") from e

    if not parts.scheme:
        raise ValueError("should be a valid URL: missing scheme")
    if not parts.hostname:
        raise ValueError("should be a valid URL: missing host")

    userinfo, sep, hostport = parts.netloc.rpartition("@")
    check_host(hostport, parts.hostname)

    host = parts.hostname
    if ":" in host:
        host = f"[{host}]"
    if port is not None and port != DEFAULT_PORTS.get(parts.scheme):
        host = f"{host}:{port}"
    netloc = f"{userinfo}{sep}{host}"

    path = parts.path
    if not path and parts.scheme in DEFAULT_PORTS:
        path = "/"

    return SplitResult(parts.scheme, netloc, path, parts.query, parts.fragment)


class UrlStringAccessor(Accessor):
    """Validated URL returned in its normalized string form."""

    def __init__(self, name: str = "as_url_string"):
        super().__init__(name)

    def convert(self, value: str) -> str:
        return urlunsplit(parse_url(value))


class UrlObjectAccessor(Accessor):
    """Validated URL returned as a ``urllib.parse.SplitResult``."""

    def __init__(self, name: str = "as_url_object"):
        super().__init__(name)

    def convert(self, value: str) -> SplitResult:
        return parse_url(value)
