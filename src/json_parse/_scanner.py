"""
Character-level scanner turning JSON text into a lazy stream of tokens.

Handles whitespace, string and escape decoding (UTF-16 surrogate pairs
included), number-literal validation and keyword matching. Every token and
every error carries a line/column position.
"""

import string
from collections.abc import Iterator

from json_parse._data import JsonToken
from json_parse._data import ParseError
from json_parse._data import TokenKind
from json_parse._data import TokenPosition
from json_parse._profiling import ProfileContext

_WHITESPACE = frozenset(" \t\r\n")
_DIGITS = frozenset(string.digits)
_HEX_DIGITS = frozenset(string.hexdigits)
_LETTERS = frozenset(string.ascii_letters + "_")
_NUMBER_START = _DIGITS | {"-"}
_EXPONENT = frozenset("eE")
_SIGNS = frozenset("+-")

_PUNCTUATION = {
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    "[": TokenKind.LEFT_BRACKET,
    "]": TokenKind.RIGHT_BRACKET,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
}

_KEYWORDS = {
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
    "null": TokenKind.NULL,
}

_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_CONTROL_CHARACTER_MESSAGES = {
    "\n": "Line breaks are not allowed inside a string "
    "(hint: you can escape them as \\n)",
    "\t": "Literal tabs are not allowed inside a string "
    "(hint: you can escape them as \\t)",
    "\r": "Carriage return line breaks are not allowed inside a string "
    "(hint: you can escape them as \\r)",
    "\b": "Backspace control characters are not allowed inside a string "
    "(hint: you can escape them as \\b)",
    "\f": "Form-feed control characters are not allowed inside a string "
    "(hint: you can escape them as \\f)",
}

_LONE_BACKSLASH_MESSAGE = (
    "A lone \\ is not allowed inside a string "
    "(hint: you can escape it with \\\\)"
)

_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)
_CONTROL_LIMIT = 0x20


class Scanner:
    """
    Pull-based tokenizer over an immutable source string.

    Each next_token() call skips whitespace and scans exactly one token.
    Once the input is exhausted, every further call returns the same EOF
    token without advancing.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self._current = 0
        self._start = 0
        self._line = 1
        self._column = 0
        self._start_pos = TokenPosition()

    @property
    def position(self) -> TokenPosition:
        """Position of the next character to be read."""
        return TokenPosition(self._line, self._column)

    def __iter__(self) -> Iterator[JsonToken]:
        """Yields tokens lazily, ending with the first EOF token."""
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.EOF:
                return

    def next_token(self) -> JsonToken:
        """Scans and returns the next token, raising ParseError on bad input."""
        self._skip_whitespace()
        self._start = self._current
        self._start_pos = self.position

        if self._is_at_end():
            return self._make_token(TokenKind.EOF)

        char = self._consume()

        if char in _PUNCTUATION:
            return self._make_token(_PUNCTUATION[char])
        elif char == '"':
            return self.scan_string()
        elif char in _LETTERS:
            return self.scan_keyword()
        elif char in _NUMBER_START:
            return self.scan_number()
        else:
            raise self._error_behind(f"Unexpected character: '{char}'")

    # String scanning

    def scan_string(self) -> JsonToken:
        """Scans a string body after its opening quote, decoding escapes."""
        with ProfileContext("scan_string"):
            chars: list[str] = []

            while not self._matches('"'):
                if self._is_at_end():
                    raise self._error_behind("Unterminated string")

                char = self._consume()
                if char == "\\":
                    chars.append(self._scan_escape())
                elif ord(char) < _CONTROL_LIMIT:
                    raise self._error_behind(_control_character_message(char))
                else:
                    chars.append(char)

            return self._make_token(TokenKind.STRING, "".join(chars))

    def _scan_escape(self) -> str:
        char = self._consume()

        if char in _ESCAPES:
            return _ESCAPES[char]
        elif char == "u":
            return self._scan_unicode_escape()
        elif char in ("", " "):
            raise self._error_behind(_LONE_BACKSLASH_MESSAGE)
        else:
            raise self._error_behind(f"Invalid escape sequence: \\{char}")

    def _scan_unicode_escape(self) -> str:
        """Decodes the code unit after a \\u prefix, pairing surrogates."""
        code = self._scan_code_unit()

        if code in _HIGH_SURROGATES:
            # A high surrogate must be followed by a \uXXXX low surrogate
            if not (self._matches("\\") and self._matches("u")):
                raise self._error_here(
                    f"The Unicode sequence '{code:04X}' represents an "
                    "unfinished character. A follow-up Unicode escape "
                    "sequence was expected but not found."
                )

            low = self._scan_code_unit()
            if low not in _LOW_SURROGATES:
                raise self._error_behind(
                    f"Invalid unicode character: \\u{code:04X}\\u{low:04X}"
                )
            return chr(0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00))

        if code in _LOW_SURROGATES:
            raise self._error_behind(
                f"Invalid unicode character: \\u{code:04X}"
            )
        return chr(code)

    def _scan_code_unit(self) -> int:
        """Reads the four hex digits of a single \\uXXXX escape."""
        start = self._current
        for _ in range(4):
            self._advance()
        seq = self.source[start : self._current]

        if not all(c in _HEX_DIGITS for c in seq):
            raise self._error_behind(
                f"Invalid Unicode escape sequence: '{seq}' "
                "(should be a 4-character hex code)"
            )
        if len(seq) < 4:
            raise self._error_behind("Unterminated string")
        return int(seq, 16)

    # Number scanning

    def scan_number(self) -> JsonToken:
        """Scans a number whose first character (digit or '-') was consumed."""
        with ProfileContext("scan_number"):
            self._scan_integer_part()
            self._scan_fraction_part()
            self._scan_exponent_part()

            # The accepted lexeme is always a valid float literal
            lexeme = self.source[self._start : self._current]
            return self._make_token(TokenKind.NUMBER, float(lexeme))

    def _scan_integer_part(self) -> None:
        if self._peek_behind() == "-" and self._consume() not in _DIGITS:
            raise self._error_behind("At least a digit is expected after '-'")
        # Leading zeros are accepted
        self._skip_digits()

    def _scan_fraction_part(self) -> None:
        if self._matches("."):
            if self._consume() not in _DIGITS:
                raise self._error_behind(
                    "At least a digit is expected after a fraction dot"
                )
            self._skip_digits()

    def _scan_exponent_part(self) -> None:
        if self._peek() in _EXPONENT:
            self._advance()
            if self._peek() in _SIGNS:
                self._advance()
            if self._consume() not in _DIGITS:
                raise self._error_behind(
                    "At least a digit is expected after an exponent"
                )
            self._skip_digits()

    # Keyword scanning

    def scan_keyword(self) -> JsonToken:
        """Scans a run of letters that must spell true, false or null."""
        with ProfileContext("scan_keyword"):
            while self._peek() in _LETTERS:
                self._advance()

            word = self.source[self._start : self._current]
            if word in _KEYWORDS:
                return self._make_token(_KEYWORDS[word])

            hint = ""
            if word.lower() in _KEYWORDS:
                hint = f" (hint: maybe you meant '{word.lower()}')"
            raise ParseError.at(
                f"Unknown keyword '{word}'{hint}", self._start_pos
            )

    # Token and error construction

    def _make_token(
        self, kind: TokenKind, value: float | str | None = None
    ) -> JsonToken:
        return JsonToken(kind, self._start_pos, value)

    def _error_here(self, message: str) -> ParseError:
        """Error at the character about to be read."""
        return ParseError.at(message, self.position)

    def _error_behind(self, message: str) -> ParseError:
        """Error at the character just consumed."""
        return ParseError.at(message, self.position.behind())

    # Cursor control

    def _advance(self) -> None:
        # Reads past the end still move the column
        self._current += 1
        self._column += 1

    def _consume(self) -> str:
        self._advance()
        return self._peek_behind()

    def _peek(self) -> str:
        """Returns the next character, or an empty string at the end."""
        return self.source[self._current : self._current + 1]

    def _peek_behind(self) -> str:
        return self.source[self._current - 1 : self._current]

    def _matches(self, expected: str) -> bool:
        if self._peek() == expected:
            self._advance()
            return True
        return False

    def _skip_whitespace(self) -> None:
        with ProfileContext("skip_whitespace"):
            while (char := self._peek()) in _WHITESPACE:
                self._advance()
                if char == "\n":
                    self._line += 1
                    self._column = 0

    def _skip_digits(self) -> None:
        while self._peek() in _DIGITS:
            self._advance()

    def _is_at_end(self) -> bool:
        return self._current >= len(self.source)


def _control_character_message(char: str) -> str:
    if char in _CONTROL_CHARACTER_MESSAGES:
        return _CONTROL_CHARACTER_MESSAGES[char]
    code = f"{ord(char):04X}"
    return (
        f"The control character U+{code} is not allowed inside a string "
        f"(hint: you can escape it as \\u{code})"
    )
