"""
Data model shared by the scanner and the parser.

Positions, token kinds, tokens and the single error type that crosses the
public boundary.
"""

from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import TypeAlias

# Type aliases for domain concepts - recursive definition
JsonValue = (
    str | float | bool | None | dict[str, "JsonValue"] | list["JsonValue"]
)
KeyValue: TypeAlias = tuple[str, JsonValue]


@dataclass(frozen=True)
class TokenPosition:
    """
    Location of a character in the source text.

    Lines are 1-based, columns are 0-based and count characters, not bytes.
    """

    line: int = 1
    column: int = 0

    def behind(self) -> "TokenPosition":
        """Returns the position of the previously consumed character."""
        return TokenPosition(self.line, self.column - 1)


class TokenKind(Enum):
    """Lexical categories produced by the scanner."""

    LEFT_BRACE = "'{'"
    RIGHT_BRACE = "'}'"
    LEFT_BRACKET = "'['"
    RIGHT_BRACKET = "']'"
    COMMA = "','"
    COLON = "':'"
    TRUE = "boolean (true)"
    FALSE = "boolean (false)"
    NULL = "null"
    NUMBER = "number"
    STRING = "string"
    EOF = "end-of-file"

    def describe(self, value: float | str | None = None) -> str:
        """Renders the kind, and its payload if any, for error messages."""
        if self is TokenKind.NUMBER and value is not None:
            return f"number ({_format_number(value)})"
        if self is TokenKind.STRING and value is not None:
            return f'string ("{value}")'
        return self.value


def _format_number(value: float | str) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class JsonToken:
    """
    A classified lexical unit with the position of its first character.

    Dataclass equality compares kind, payload and position. Grammar dispatch
    uses the kind-only predicates instead.
    """

    kind: TokenKind
    pos: TokenPosition = field(default_factory=TokenPosition)
    value: float | str | None = None

    def is_kind(self, kind: TokenKind) -> bool:
        """Checks the token kind, ignoring payload and position."""
        return self.kind is kind

    def same_kind(self, other: "JsonToken") -> bool:
        """Checks whether two tokens share a kind, whatever their payloads."""
        return self.kind is other.kind

    def get_string(self) -> str:
        """Returns the decoded text of a STRING token."""
        if self.kind is not TokenKind.STRING or not isinstance(self.value, str):
            raise TypeError(f"cannot extract a string from {self}")
        return self.value

    def __str__(self) -> str:
        return self.kind.describe(self.value)


class ParseError(ValueError):
    """
    Reports a lexical or structural fault anchored to a source location.

    Carries the human-readable message, the 1-based line and the 0-based
    column of the offending character or token. Parsing stops at the first
    error, so no partial value accompanies it.
    """

    def __init__(self, message: str, line: int, column: int) -> None:
        if not isinstance(message, str):
            raise TypeError("message must be a string")

        self._message = message
        self._position = TokenPosition(line, column)

        super().__init__(f"{message} at line {line}, column {column}")

    @classmethod
    def at(cls, message: str, pos: TokenPosition) -> "ParseError":
        return cls(message, pos.line, pos.column)

    # Read-only so the fields always agree with str(err)

    @property
    def message(self) -> str:
        return self._message

    @property
    def line(self) -> int:
        return self._position.line

    @property
    def column(self) -> int:
        return self._position.column

    @property
    def position(self) -> TokenPosition:
        return self._position

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return (self.message, self.position) == (other.message, other.position)

    def __hash__(self) -> int:
        return hash((self.message, self.position))

    def __reduce__(self) -> tuple[type, tuple[str, int, int]]:
        return (type(self), (self.message, self.line, self.column))
