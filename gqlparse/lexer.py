"""Tokenizer for GraphQL documents with comment and description handling."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from gqlparse.blockstring import block_string


@dataclass(frozen=True)
class Location:
    """A one-based line and column position in a document."""

    line: int
    column: int


class QueryError(Exception):
    """An error reported while parsing or resolving a GraphQL document."""

    def __init__(
        self,
        message: str,
        locations: list[Location] | None = None,
        *,
        path: list[Any] | None = None,
        rule: str = "",
        resolver_error: BaseException | None = None,
        extensions: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.locations = list(locations or [])
        self.path = path
        self.rule = rule
        self.resolver_error = resolver_error
        self.extensions = extensions

    def __str__(self) -> str:
        text = f"graphql: {self.message}"
        for loc in self.locations:
            text += f" (line {loc.line}, column {loc.column})"
        return text


class GraphQLSyntaxError(QueryError):
    """A syntax error found while reading a document."""

    def __init__(self, reason: str, location: Location) -> None:
        super().__init__(f"syntax error: {reason}", [location])
        self.reason = reason


class Token(Enum):
    """Kinds of multi-character tokens; single characters are plain strings."""

    EOF = "EOF"
    IDENT = "Ident"
    INT = "Int"
    FLOAT = "Float"
    STRING = "String"


@dataclass(frozen=True)
class Ident:
    """A name together with where it appeared."""

    name: str
    loc: Location


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _token_string(token: Token | str) -> str:
    if isinstance(token, Token):
        return token.value
    return _quote(token)


_ESCAPE = re.compile(
    r'\\(?:[abfnrtv\\"\']|[0-7]{3}|x[0-9a-fA-F]{2}|u[0-9a-fA-F]{4}|U[0-9a-fA-F]{8})'
)
_SIMPLE_ESCAPES = {
    "a": "\a", "b": "\b", "f": "\f", "n": "\n", "r": "\r",
    "t": "\t", "v": "\v", "\\": "\\", '"': '"', "'": "'",
}
_HEX = "0123456789abcdefABCDEF"


def _unescape(match: re.Match[str]) -> str:
    body = match.group(0)[1:]
    if body in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[body]
    if body[0] in "xuU":
        return chr(int(body[1:], 16))
    return chr(int(body, 8))


def _unquote(text: str) -> str:
    return _ESCAPE.sub(_unescape, text[1:-1])


class Lexer:
    """Reads tokens from a GraphQL source, skipping commas and comments."""

    def __init__(self, source: str, use_string_descriptions: bool = False) -> None:
        self._src = source
        self._pos = 0
        self._line = 1
        self._col = 1
        self._tok_start = 0
        self._tok_end = 0
        self._tok_line = 0
        self._tok_col = 0
        self._next: Token | str = Token.EOF
        self._comment = ""
        self.use_string_descriptions = use_string_descriptions

    # -- character level -------------------------------------------------

    def _peek_char(self) -> str | None:
        return self._src[self._pos] if self._pos < len(self._src) else None

    def _next_char(self) -> str | None:
        char = self._peek_char()
        if char is None:
            return None
        self._pos += 1
        if char == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return char

    def _scan(self) -> Token | str:
        while self._peek_char() in (" ", "\t", "\n", "\r"):
            self._next_char()
        self._tok_start = self._pos
        self._tok_line, self._tok_col = self._line, self._col
        char = self._peek_char()
        if char is None:
            kind: Token | str = Token.EOF
        elif char.isalpha() or char == "_":
            while (c := self._peek_char()) is not None and (c.isalnum() or c == "_"):
                self._next_char()
            kind = Token.IDENT
        elif char.isdigit() or (char == "." and self._digit_at(self._pos + 1)):
            kind = self._scan_number()
        elif char == '"':
            self._scan_string()
            kind = Token.STRING
        else:
            self._next_char()
            kind = char
        self._tok_end = self._pos
        return kind

    def _digit_at(self, index: int) -> bool:
        return index < len(self._src) and self._src[index].isdigit()

    def _skip_digits(self, allowed: str = "0123456789") -> int:
        count = 0
        while (c := self._peek_char()) is not None and c in allowed:
            self._next_char()
            count += 1
        return count

    def _scan_number(self) -> Token:
        if self._peek_char() == "0" and self._src[self._pos + 1 : self._pos + 2] in ("x", "X"):
            self._next_char()
            self._next_char()
            if not self._skip_digits(_HEX):
                self.syntax_error("hexadecimal literal has no digits")
            return Token.INT
        kind = Token.INT
        self._skip_digits()
        if self._peek_char() == ".":
            self._next_char()
            self._skip_digits()
            kind = Token.FLOAT
        if self._peek_char() in ("e", "E"):
            self._next_char()
            if self._peek_char() in ("+", "-"):
                self._next_char()
            if not self._skip_digits():
                self.syntax_error("exponent has no digits")
            kind = Token.FLOAT
        return kind

    def _scan_string(self) -> None:
        self._next_char()
        while True:
            char = self._next_char()
            if char is None or char == "\n":
                self.syntax_error("literal not terminated")
            if char == '"':
                return
            if char == "\\":
                self._scan_escape()

    def _scan_escape(self) -> None:
        char = self._next_char()
        if char is None:
            self.syntax_error("escape sequence not terminated")
        widths = {"x": (2, _HEX), "u": (4, _HEX), "U": (8, _HEX)}
        if char in _SIMPLE_ESCAPES:
            return
        if char in "01234567":
            width, allowed = 2, "01234567"
        elif char in widths:
            width, allowed = widths[char]
        else:
            self.syntax_error("invalid char escape")
        for _ in range(width):
            c = self._next_char()
            if c is None or c not in allowed:
                self.syntax_error("invalid char escape")

    # -- token level -----------------------------------------------------

    def peek(self) -> Token | str:
        """Return the kind of the current token."""
        return self._next

    def token_text(self) -> str:
        """Return the source text of the current token."""
        return self._src[self._tok_start : self._tok_end]

    def consume_whitespace(self) -> None:
        """Advance to the next significant token, collecting comments."""
        self._comment = ""
        while True:
            self._next = self._scan()
            if self._next == ",":
                continue
            if self._next == "#":
                self._consume_comment()
                continue
            break

    def _consume_comment(self) -> None:
        if self._peek_char() == " ":
            self._next_char()
        if self._comment:
            self._comment += "\n"
        parts = []
        while (char := self._next_char()) not in (None, "\r", "\n"):
            parts.append(char)
        self._comment += "".join(parts)

    def _consume_description(self) -> str:
        if self._next != Token.STRING:
            return ""
        if self._peek_char() == '"':
            desc = self._consume_triple_quote()
        else:
            desc = _unquote(self.token_text())
        self.consume_whitespace()
        return desc

    def _consume_triple_quote(self) -> str:
        if self._next_char() != '"':
            raise RuntimeError("triple quote expected")
        parts: list[str] = []
        quotes = 0
        while (char := self._next_char()) is not None:
            quotes = quotes + 1 if char == '"' else 0
            parts.append(char)
            if quotes == 3:
                break
        value = "".join(parts)
        return block_string(value[: len(value) - quotes])

    def consume_ident(self) -> str:
        name = self.token_text()
        self.consume_token(Token.IDENT)
        return name

    def consume_ident_with_loc(self) -> Ident:
        loc = self.location()
        name = self.token_text()
        self.consume_token(Token.IDENT)
        return Ident(name, loc)

    def consume_keyword(self, keyword: str) -> None:
        if self._next != Token.IDENT or self.token_text() != keyword:
            self.syntax_error(
                f"unexpected {_quote(self.token_text())}, expecting {_quote(keyword)}"
            )
        self.consume_whitespace()

    def consume_literal(self):
        """Consume the current token and return it as a primitive value."""
        from gqlparse.ast import PrimitiveValue

        literal = PrimitiveValue(self._next, self.token_text())
        self.consume_whitespace()
        return literal

    def consume_token(self, expected: Token | str) -> None:
        if self._next != expected:
            self.syntax_error(
                f"unexpected {_quote(self.token_text())}, expecting {_token_string(expected)}"
            )
        self.consume_whitespace()

    def desc_comment(self) -> str:
        """Return the description of the next definition and consume it."""
        comment = self._comment
        desc = self._consume_description()
        return desc if self.use_string_descriptions else comment

    def syntax_error(self, message: str):
        raise GraphQLSyntaxError(message, self.location())

    def location(self) -> Location:
        return Location(self._tok_line, self._tok_col)