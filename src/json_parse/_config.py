"""Parsing options and hook types."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from json_parse._data import JsonValue

# Union type for values that might be transformed by hooks
JsonValueOrTransformed = JsonValue | Any

# Hook type definitions - hooks can return custom types
ObjectHook = Callable[[dict[str, JsonValueOrTransformed]], Any] | None
ObjectPairsHook = (
    Callable[[list[tuple[str, JsonValueOrTransformed]]], Any] | None
)


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures parsing behavior with immutable settings.

    object_pairs_hook receives each object's ordered (key, value) pairs and
    takes priority over object_hook, which receives the built dict.
    max_depth caps array/object nesting; None leaves it bounded only by the
    interpreter's recursion limit.
    """

    object_pairs_hook: ObjectPairsHook = None
    object_hook: ObjectHook = None
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if self.object_pairs_hook is not None and not callable(
            self.object_pairs_hook
        ):
            raise TypeError("object_pairs_hook must be callable")
        if self.object_hook is not None and not callable(self.object_hook):
            raise TypeError("object_hook must be callable")
        if self.max_depth is not None:
            if not isinstance(self.max_depth, int) or isinstance(
                self.max_depth, bool
            ):
                raise TypeError("max_depth must be an integer")
            if self.max_depth < 1:
                raise ValueError("max_depth must be a positive integer")
