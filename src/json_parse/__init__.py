"""
Strict JSON parsing with precise, position-anchored syntax errors.

Converts JSON text into native Python values (None, bool, float, str, list
and insertion-ordered dict) or raises a ParseError naming the offending
line and column. A pull-based Scanner feeds a recursive descent JsonParser.
"""

from typing import Any

from json_parse._config import JsonValueOrTransformed
from json_parse._config import ObjectHook
from json_parse._config import ObjectPairsHook
from json_parse._config import ParseConfig
from json_parse._data import JsonToken
from json_parse._data import JsonValue
from json_parse._data import ParseError
from json_parse._data import TokenKind
from json_parse._data import TokenPosition
from json_parse._parser import JsonParser
from json_parse._profiling import HotPathStats
from json_parse._profiling import ProfileContext
from json_parse._profiling import clear_hot_path_stats
from json_parse._profiling import get_hot_path_stats
from json_parse._scanner import Scanner

__version__ = "0.1.0"


def parse(json_text: str, **kwargs: Any) -> JsonValueOrTransformed:
    """
    Parses JSON text into a value tree.

    Objects keep their source key order and reject duplicated keys; numbers
    always become floats. Keyword arguments build a ParseConfig. Raises
    ParseError on the first lexical or structural fault.
    """
    if not isinstance(json_text, str):
        raise TypeError(
            f"the JSON text must be str, not {type(json_text).__name__}"
        )

    config = ParseConfig(**kwargs)
    with ProfileContext("parse", len(json_text)):
        return JsonParser(Scanner(json_text), config).parse()


__all__ = [
    "HotPathStats",
    "JsonParser",
    "JsonToken",
    "JsonValue",
    "ObjectHook",
    "ObjectPairsHook",
    "ParseConfig",
    "ParseError",
    "Scanner",
    "TokenKind",
    "TokenPosition",
    "clear_hot_path_stats",
    "get_hot_path_stats",
    "parse",
]
