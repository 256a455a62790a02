"""
ABOUTME: Raw value transforms applied before type conversion
ABOUTME: Currently base64 decoding of encoded variable values
"""

import base64
import binascii


def decode_base64(value: str) -> str:
    """Decode base64 text to a UTF-8 string, ignoring embedded whitespace."""
    try:
        return base64.b64decode("".join(value.split()), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise ValueError("should be a valid base64 string") from e
