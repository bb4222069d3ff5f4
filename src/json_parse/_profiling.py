"""
Hot-path profiling for the scanner and parser.

Disabled unless the JSON_PARSE_PROFILE environment variable is set when the
package is imported, in which case every ProfileContext section records
its wall time under its section name.
"""

import os
import time
from dataclasses import dataclass
from typing import Any

# Decided once at import; -O runs never profile
PROFILE_HOT_PATHS = __debug__ and "JSON_PARSE_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Accumulated timings for one named scanner or parser section."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        """Adds one timed run of the section."""
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars

    @property
    def mean_time_ns(self) -> float:
        if not self.call_count:
            return 0.0
        return self.total_time_ns / self.call_count


_hot_path_stats: dict[str, HotPathStats] = {}


class _TimedSection:
    """Times the enclosed block and files it under the section name."""

    __slots__ = ("section", "chars", "started_ns")

    def __init__(self, section: str, chars: int = 0) -> None:
        self.section = section
        self.chars = chars
        self.started_ns = 0

    def __enter__(self) -> "_TimedSection":
        self.started_ns = time.perf_counter_ns()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        elapsed_ns = time.perf_counter_ns() - self.started_ns
        stats = _hot_path_stats.get(self.section)
        if stats is None:
            stats = _hot_path_stats[self.section] = HotPathStats(self.section)
        stats.record_call(elapsed_ns, self.chars)


class _NullSection:
    """Stand-in used when profiling is off; arguments are ignored."""

    __slots__ = ()

    def __init__(self, section: str, chars: int = 0) -> None:
        pass

    def __enter__(self) -> "_NullSection":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        pass


ProfileContext: type[_TimedSection] | type[_NullSection] = (
    _TimedSection if PROFILE_HOT_PATHS else _NullSection
)


def get_hot_path_stats() -> dict[str, HotPathStats]:
    """Returns a snapshot of the statistics, keyed by section name."""
    return dict(_hot_path_stats)


def clear_hot_path_stats() -> None:
    _hot_path_stats.clear()
