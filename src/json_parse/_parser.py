"""
Recursive descent parser building a value tree from scanner tokens.

Each grammar rule (value, array, object) is one method, so the call stack
mirrors the nesting of the input. Object keys are checked for uniqueness
while the object is being parsed.
"""

from collections.abc import Callable
from typing import Any

from json_parse._config import JsonValueOrTransformed
from json_parse._config import ParseConfig
from json_parse._data import JsonToken
from json_parse._data import KeyValue
from json_parse._data import ParseError
from json_parse._data import TokenKind
from json_parse._profiling import ProfileContext
from json_parse._scanner import Scanner


class JsonParser:
    """
    Parser over a scanner with a single token of lookahead.

    The lookahead slot starts empty and is filled once at the beginning of
    parse(); a parser instance handles a single document.
    """

    def __init__(
        self, scanner: Scanner, config: ParseConfig | None = None
    ) -> None:
        self.scanner = scanner
        self.config = config if config is not None else ParseConfig()
        self._upcoming: JsonToken | None = None
        self._depth = 0
        self._hook_error: RecursionError | None = None

    @classmethod
    def from_text(
        cls, text: str, config: ParseConfig | None = None
    ) -> "JsonParser":
        return cls(Scanner(text), config)

    def parse(self) -> JsonValueOrTransformed:
        """Parses one complete value followed by the end of input."""
        if self._upcoming is not None:
            raise RuntimeError("JsonParser instances parse a single document")

        self._upcoming = self.scanner.next_token()
        try:
            result = self.parse_value()
        except RecursionError as exc:
            if exc is self._hook_error:
                raise
            raise ParseError.at(
                "Maximum nesting depth exceeded", self.upcoming.pos
            ) from None

        self.expect(TokenKind.EOF)
        return result

    @property
    def upcoming(self) -> JsonToken:
        """The lookahead token, not yet consumed."""
        if self._upcoming is None:
            raise RuntimeError("lookahead requested before parsing started")
        return self._upcoming

    def consume(self) -> JsonToken:
        """Returns the lookahead token and refills it from the scanner."""
        token = self.upcoming
        self._upcoming = self.scanner.next_token()
        return token

    def matches(self, kind: TokenKind) -> bool:
        """Consumes the lookahead only if it is of the given kind."""
        if self.upcoming.is_kind(kind):
            self.consume()
            return True
        return False

    def expect(self, kind: TokenKind) -> JsonToken:
        """Consumes a token of the given kind or fails at the lookahead."""
        token = self.upcoming
        if not token.is_kind(kind):
            raise ParseError.at(
                f"Expected {kind.describe()}, found {token}", token.pos
            )
        return self.consume()

    def parse_value(self) -> JsonValueOrTransformed:
        """Parses any JSON value starting at the lookahead token."""
        token = self.consume()

        if token.is_kind(TokenKind.LEFT_BRACE):
            return self.parse_object(token)
        elif token.is_kind(TokenKind.LEFT_BRACKET):
            return self.parse_array(token)
        elif token.is_kind(TokenKind.NUMBER) or token.is_kind(
            TokenKind.STRING
        ):
            return token.value
        elif token.is_kind(TokenKind.TRUE):
            return True
        elif token.is_kind(TokenKind.FALSE):
            return False
        elif token.is_kind(TokenKind.NULL):
            return None
        else:
            raise ParseError.at(f"Unexpected {token}", token.pos)

    def parse_array(self, opening: JsonToken) -> list[JsonValueOrTransformed]:
        """Parses array elements after the consumed '['."""
        with ProfileContext("parse_array"):
            self._descend(opening)
            values: list[JsonValueOrTransformed] = []

            if not self.matches(TokenKind.RIGHT_BRACKET):
                while True:
                    values.append(self.parse_value())
                    if not self.matches(TokenKind.COMMA):
                        break
                self.expect(TokenKind.RIGHT_BRACKET)

            self._depth -= 1
            return values

    def parse_object(self, opening: JsonToken) -> JsonValueOrTransformed:
        """Parses key/value pairs after the consumed '{'."""
        with ProfileContext("parse_object"):
            self._descend(opening)
            pairs: list[KeyValue] = []
            seen: set[str] = set()

            if not self.matches(TokenKind.RIGHT_BRACE):
                while True:
                    key_token = self.expect(TokenKind.STRING)
                    key = key_token.get_string()
                    if key in seen:
                        raise ParseError.at(
                            f'Duplicated object key: "{key}"', key_token.pos
                        )
                    seen.add(key)

                    self.expect(TokenKind.COLON)
                    pairs.append((key, self.parse_value()))

                    if not self.matches(TokenKind.COMMA):
                        break
                self.expect(TokenKind.RIGHT_BRACE)

            self._depth -= 1
            return self._apply_object_hooks(pairs)

    def _descend(self, opening: JsonToken) -> None:
        self._depth += 1
        max_depth = self.config.max_depth
        if max_depth is not None and self._depth > max_depth:
            raise ParseError.at("Maximum nesting depth exceeded", opening.pos)

    def _apply_object_hooks(
        self, pairs: list[KeyValue]
    ) -> JsonValueOrTransformed:
        if self.config.object_pairs_hook:
            return self._call_hook(self.config.object_pairs_hook, pairs)

        obj = dict(pairs)
        if self.config.object_hook:
            return self._call_hook(self.config.object_hook, obj)
        return obj

    def _call_hook(self, hook: Callable[[Any], Any], arg: Any) -> Any:
        try:
            return hook(arg)
        except RecursionError as exc:
            # Not a nesting error; parse() lets this one through
            self._hook_error = exc
            raise
