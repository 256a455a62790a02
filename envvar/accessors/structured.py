"""
ABOUTME: JSON accessors
ABOUTME: Parses JSON text and optionally checks the shape of the decoded document
"""

import json
from typing import Any, Optional

from .base import Accessor


def parse_json(value: str) -> Any:
    """Decode JSON text, keeping the parser's message on failure."""
    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        raise ValueError(f"should be valid (parseable) JSON: {e}") from e


class JsonAccessor(Accessor):
    """JSON accessor; ``expected`` restricts the document to a list or dict."""

    _SHAPE_NAMES = {list: "Array", dict: "Object"}

    def __init__(self, name: str = "as_json", expected: Optional[type] = None):
        super().__init__(name)
        self.expected = expected

    def convert(self, value: str) -> Any:
        document = parse_json(value)
        if self.expected is not None and not isinstance(document, self.expected):
            raise ValueError(
                f"should be a parseable JSON {self._SHAPE_NAMES[self.expected]}"
            )
        return document
