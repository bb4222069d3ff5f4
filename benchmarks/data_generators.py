"""
Document generators for the parsing benchmarks.

Every generator is seeded so repeated runs time identical inputs. Shapes
cover flat records, wide arrays, deep nesting, escape-heavy strings and
pretty-printed multi-line text.
"""

import json
import random
import string
from collections.abc import Callable
from typing import Any

_SEED = 20240115
_ESCAPE_PROBABILITY = 0.3
_SIMPLE_ESCAPES = ['\\"', "\\\\", "\\/", "\\b", "\\f", "\\n", "\\r", "\\t"]
# (high, low) surrogate halves for astral characters
_SURROGATE_PAIRS = [("D83D", "DCA9"), ("D834", "DD1E"), ("D83C", "DF89")]


def generate_test_data(data_type: str) -> str:
    """Generates a JSON document of the named shape."""
    generators: dict[str, Callable[[random.Random], str]] = {
        "small_object": _generate_small_object,
        "large_object": _generate_large_object,
        "mixed_array": _generate_mixed_array,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
        "pretty_printed": _generate_pretty_printed,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type](random.Random(_SEED))


def _generate_small_object(rng: random.Random) -> str:
    """Generates a single flat record well under 1KB."""
    data = {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "tags": ["admin", "beta"],
        "manager": None,
    }
    return json.dumps(data)


def _generate_large_object(rng: random.Random) -> str:
    """Generates an account document with long record lists (> 10KB)."""
    data = {
        "account": rng.randint(1000000, 9999999),
        "owner": {
            "name": _random_string(rng, 12),
            "email": f"{_random_string(rng, 8)}@example.com",
            "verified": rng.choice([True, False]),
        },
        "transactions": [
            {
                "id": f"txn_{i:06d}",
                "amount": round(rng.uniform(1.0, 1000.0), 2),
                "currency": rng.choice(["USD", "EUR", "GBP", "JPY"]),
                "day": _random_date(rng),
                "memo": f"Payment for {_random_string(rng, 20)}",
                "status": rng.choice(["completed", "pending", "failed"]),
            }
            for i in range(50)
        ],
        "sessions": [
            {
                "day": _random_date(rng),
                "action": rng.choice(["login", "logout", "view", "update"]),
                "address": ".".join(
                    str(rng.randint(1, 255)) for _ in range(4)
                ),
                "duration": rng.randint(1, 7200),
            }
            for _ in range(30)
        ],
    }
    return json.dumps(data)


def _generate_mixed_array(rng: random.Random) -> str:
    """Generates a wide array cycling through every value kind."""
    makers: list[Callable[[int], Any]] = [
        lambda i: rng.randint(-1000, 1000),
        lambda i: round(rng.uniform(-100.0, 100.0), 3),
        lambda i: rng.uniform(-1e10, 1e10),
        lambda i: _random_string(rng, rng.randint(5, 30)),
        lambda i: rng.choice([True, False]),
        lambda i: None,
        lambda i: {"index": i, "score": round(rng.uniform(0, 100), 2)},
        lambda i: [i, str(i)],
    ]
    array = [rng.choice(makers)(i) for i in range(200)]
    return json.dumps(array)


def _generate_nested_structure(rng: random.Random) -> str:
    """Generates a branching document six levels deep."""

    def create_nested_dict(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(rng, 10)}

        return {
            "level": depth,
            "data": _random_string(rng, 15),
            "items": [create_nested_dict(depth - 1) for _ in range(2)],
            "nested": create_nested_dict(depth - 1),
        }

    return json.dumps(create_nested_dict(6))


def _generate_string_heavy(rng: random.Random) -> str:
    """Generates strings dense with simple and unicode escapes."""

    def create_escaped_string() -> str:
        chars = []
        for _ in range(50):
            if rng.random() < _ESCAPE_PROBABILITY:
                chars.append(rng.choice(_SIMPLE_ESCAPES))
            else:
                chars.append(
                    rng.choice(string.ascii_letters + string.digits + " ")
                )
        return "".join(chars)

    def create_unicode_string() -> str:
        high, low = rng.choice(_SURROGATE_PAIRS)
        code = rng.randint(0x00A0, 0x07FF)
        return f"\\u{code:04x} and \\u{high}\\u{low}"

    # Escapes are written by hand, so the document is assembled as text
    strings = ", ".join(f'"{create_escaped_string()}"' for _ in range(100))
    unicode = ", ".join(f'"{create_unicode_string()}"' for _ in range(50))
    paths = ", ".join(
        f'"key_{i}": "C:\\\\Users\\\\{_random_string(rng, 8)}\\\\file.txt"'
        for i in range(20)
    )
    return (
        f'{{"strings": [{strings}], "unicode": [{unicode}], '
        f'"paths": {{{paths}}}}}'
    )


def _generate_pretty_printed(rng: random.Random) -> str:
    """Generates an indented, many-line document of sensor readings."""
    data = {
        "sensors": [
            {
                "name": _random_string(rng, 6),
                "online": rng.choice([True, False]),
                "readings": [
                    round(rng.gauss(20.0, 5.0), 4) for _ in range(10)
                ],
                "calibration": {"offset": -0.25, "scale": 1.5e-3},
            }
            for _ in range(40)
        ]
    }
    return json.dumps(data, indent=4)


def _random_date(rng: random.Random) -> str:
    return f"2024-{rng.randint(1, 12):02d}-{rng.randint(1, 28):02d}"


def _random_string(rng: random.Random, length: int) -> str:
    """Generates a random ASCII string of the given length."""
    return "".join(rng.choices(string.ascii_letters, k=length))
