"""
  faye Lexer

- Pulls characters one at a time from the source through a single forward
  cursor; tokens are produced lazily, one per `read()` call.
- Every token carries the Span it was read from.
- Lexing never rewinds: to start over, build a new Lexer over the same text.

Token classification, in priority order:

    ( ) [ ]            brackets
    1  -2  +3.5  1e3   numbers (a digit, or a sign directly followed by a digit)
    ; ...              comment through end of line
    :name              keyword
    "..."              string, escapes \\" \\\\ \\n \\e
    'c'                character, same escapes
    true false nil     literals
    anything else      symbol

Whitespace and `,` separate tokens and are otherwise ignored.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional

from faye.types.errors import (
    InvalidChar,
    InvalidEscape,
    InvalidNumber,
    InvalidString,
    LexerError,
    UnclosedChar,
    UnclosedString,
)
from faye.types.span import Source, Span
from faye.types.symbol import Keyword, Symbol
from faye.types.token import Token, TokenKind
from faye.types.values import Char

logger = logging.getLogger(__name__)

WHITESPACE = " \t\n\r\x0b\x0c"
SEPARATORS = WHITESPACE + "()[];,"
DIGITS = "0123456789"

BRACKET_KINDS = {
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSE_PAREN,
    "[": TokenKind.OPEN_BRACKET,
    "]": TokenKind.CLOSE_BRACKET,
}

LITERAL_WORDS = {
    "true": (TokenKind.BOOL, True),
    "false": (TokenKind.BOOL, False),
    "nil": (TokenKind.NIL, None),
}

str_escape = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "e": "\x1b",
}

NUMBER_RE = re.compile(
    r"[+-]?(?:"
    r"(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"  # decimal with optional exponent
    r"|inf(?:inity)?|nan"  # IEEE specials
    r")",
    re.IGNORECASE,
)


def parse_number(word: str) -> float:
    """Parse `word` the way a strict 64-bit float parser does.

    Unlike `float()`, no surrounding whitespace and no `_` digit separators
    are accepted. Raises ValueError on anything else.
    """
    if not NUMBER_RE.fullmatch(word):
        raise ValueError(f"invalid float literal: {word!r}")
    return float(word)


def is_separator(char: Optional[str]) -> bool:
    return char is not None and char in SEPARATORS


class Lexer:
    __slots__ = ("source", "text", "pos", "char")

    def __init__(self, text: str, name: Optional[str] = None):
        self.source = Source(text, name)
        self.text = text
        self.pos: int = 0
        self.char: Optional[str] = text[0] if text else None

    def set_name(self, name: str) -> None:
        self.source.name = name

    def span(self) -> Span:
        """Empty span at the current cursor position."""
        return Span.empty(self.source, self.pos)

    def span_from(self, start: int) -> Span:
        return Span(start, self.pos, self.source)

    def advance(self) -> Optional[str]:
        """Move past the current character and return it."""
        char = self.char
        if char is not None:
            self.pos += 1
            self.char = self.text[self.pos] if self.pos < len(self.text) else None
        return char

    def peek(self, n: int = 1) -> Optional[str]:
        peek_pos = self.pos + n
        return self.text[peek_pos] if peek_pos < len(self.text) else None

    def read_word(self) -> str:
        """Read until a separator or the end of input."""
        start = self.pos
        while self.char is not None and not is_separator(self.char):
            self.advance()
        return self.text[start:self.pos]

    def error(self, err: LexerError) -> LexerError:
        logger.debug("lexer error at %d..%d: %s", err.span.start, err.span.end, err)
        return err

    def number(self, start: int) -> Token:
        word = self.read_word()
        try:
            value = parse_number(word)
        except ValueError:
            raise self.error(InvalidNumber(word, self.span_from(start)))
        return Token(TokenKind.NUMBER, value, self.span_from(start))

    def comment(self, start: int) -> Token:
        self.advance()  # ;
        body = self.pos
        while self.char is not None and self.char != "\n":
            self.advance()
        return Token(TokenKind.COMMENT, self.text[body:self.pos], self.span_from(start))

    def keyword(self, start: int) -> Token:
        self.advance()  # :
        return Token(TokenKind.KEYWORD, Keyword(self.read_word()), self.span_from(start))

    def escape(self, start: int, unclosed: type[LexerError]) -> str:
        """Read the character after a backslash and translate it."""
        char = self.advance()
        if char is None:
            raise self.error(unclosed(Span(start, start + 1, self.source)))
        if char not in str_escape:
            raise self.error(InvalidEscape(char, self.span_from(self.pos - 2)))
        return str_escape[char]

    def string(self, start: int) -> Token:
        self.advance()  # opening quote
        chunks: list[str] = []
        while True:
            char = self.char
            if char is None:
                raise self.error(UnclosedString(Span(start, start + 1, self.source)))
            self.advance()
            if char == '"':
                break
            if char == "\\":
                chunks.append(self.escape(start, UnclosedString))
            else:
                chunks.append(char)

        if self.char is not None and not is_separator(self.char):
            self.read_word()
            raise self.error(InvalidString(self.span_from(start)))

        return Token(TokenKind.STRING, "".join(chunks), self.span_from(start))

    def character(self, start: int) -> Token:
        self.advance()  # opening quote
        char = self.char
        if char is None:
            raise self.error(UnclosedChar(self.span_from(start)))
        if char == "'":
            self.advance()
            self.read_word()
            raise self.error(InvalidChar(self.span_from(start)))

        self.advance()
        if char == "\\":
            char = self.escape(start, UnclosedChar)

        if self.char is None:
            raise self.error(UnclosedChar(self.span_from(start)))
        if self.char != "'":
            # the rest of a multi-character literal such as 'ab' belongs to the error
            self.read_word()
            raise self.error(InvalidChar(self.span_from(start)))

        self.advance()  # closing quote
        return Token(TokenKind.CHAR, Char(char), self.span_from(start))

    def read(self) -> Optional[Token]:
        """Read the next token, or None once the input is exhausted.

        Raises a LexerError subclass on malformed input.
        """
        while self.char is not None and (self.char in WHITESPACE or self.char == ","):
            self.advance()

        char = self.char
        if char is None:
            return None

        start = self.pos

        if char in BRACKET_KINDS:
            self.advance()
            return Token(BRACKET_KINDS[char], None, self.span_from(start))

        if char in DIGITS:
            return self.number(start)

        if char in "+-":
            _peek = self.peek()
            if _peek is not None and _peek in DIGITS:
                return self.number(start)

        if char == ";":
            return self.comment(start)

        if char == ":":
            return self.keyword(start)

        if char == '"':
            return self.string(start)

        if char == "'":
            return self.character(start)

        word = self.read_word()
        if word in LITERAL_WORDS:
            kind, value = LITERAL_WORDS[word]
            return Token(kind, value, self.span_from(start))
        return Token(TokenKind.SYMBOL, Symbol(word), self.span_from(start))

    def __iter__(self) -> Iterator[Token]:
        while (token := self.read()) is not None:
            yield token
