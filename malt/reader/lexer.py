"""
  Lisp Lexer

A character-at-a-time finite state machine. Every character is dispatched on
the current State; characters accumulate in a buffer until a terminator
(whitespace, comma, a bracket or a comment start) flushes the buffered token.

    - ( ) [ ] { }      -> standalone bracket tokens
    - 1337 -322        -> Int
    - 1337.44 -322.0   -> Float
    - "text"           -> String (escapes kept verbatim, quotes dropped)
    - ; ... newline    -> discarded
    - anything else    -> Symbol
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, NamedTuple

from malt.errors import TransitionError, TokenTerminationError

logger = logging.getLogger(__name__)


class State(Enum):
    INIT = "Init"
    MINUS = "Minus"
    NUM = "Num"
    DOT = "Dot"
    FLOAT = "Float"
    STRING_START = "StringStart"
    ESCAPE = "Escape"
    STRING_CLOSE = "StringClose"
    SYMBOL = "Symbol"
    COMMENT = "Comment"

    def __str__(self) -> str:
        return self.value


class TokenKind(Enum):
    LEFT_PAREN = "LeftParen"
    RIGHT_PAREN = "RightParen"
    LEFT_BRACKET = "LeftBracket"
    RIGHT_BRACKET = "RightBracket"
    LEFT_BRACE = "LeftBrace"
    RIGHT_BRACE = "RightBrace"
    STRING = "String"
    INT = "Int"
    FLOAT = "Float"
    SYMBOL = "Symbol"

    def __str__(self) -> str:
        return self.value


class Token(NamedTuple):
    kind: TokenKind
    value: Any

    def __repr__(self) -> str:
        if self.kind in BRACKET_KINDS:
            return str(self.kind)
        return f"{self.kind}({self.value!r})"


LEFT_PAREN = Token(TokenKind.LEFT_PAREN, "(")
RIGHT_PAREN = Token(TokenKind.RIGHT_PAREN, ")")
LEFT_BRACKET = Token(TokenKind.LEFT_BRACKET, "[")
RIGHT_BRACKET = Token(TokenKind.RIGHT_BRACKET, "]")
LEFT_BRACE = Token(TokenKind.LEFT_BRACE, "{")
RIGHT_BRACE = Token(TokenKind.RIGHT_BRACE, "}")

BRACKETS: dict[str, Token] = {t.value: t for t in (
    LEFT_PAREN, RIGHT_PAREN, LEFT_BRACKET, RIGHT_BRACKET, LEFT_BRACE, RIGHT_BRACE
)}
BRACKET_KINDS = frozenset(t.kind for t in BRACKETS.values())

COMMENT_START = ";"
SEPARATORS = ","

# States that may be flushed into a token
_TERMINATING = {
    State.MINUS: TokenKind.SYMBOL,
    State.NUM: TokenKind.INT,
    State.FLOAT: TokenKind.FLOAT,
    State.STRING_CLOSE: TokenKind.STRING,
    State.SYMBOL: TokenKind.SYMBOL,
}


def _is_digit(c: str) -> bool:
    # str.isdigit() also accepts superscripts and other non-decimal digits
    return "0" <= c <= "9"


class Lexer:
    """Single-use tokenizer: feed characters, then collect `tokens`."""

    def __init__(self):
        self.state: State = State.INIT
        self.tokens: list[Token] = []
        self.buffer: str = ""

    # ----------------- buffer / token helpers -----------------
    def _trans(self, c: str, state: State) -> None:
        self.state = state
        self.buffer += c

    def _trans_ignore(self, state: State) -> None:
        self.state = state

    def _error(self, c: str) -> TransitionError:
        return TransitionError(c, self.buffer, self.state)

    def end_token(self) -> None:
        """Flush the buffered characters as a token and return to Init."""
        if self.state in (State.INIT, State.COMMENT):
            return
        kind = _TERMINATING.get(self.state)
        if kind is None:
            raise TokenTerminationError(self.state)
        b, self.buffer = self.buffer, ""
        if kind is TokenKind.INT:
            value: Any = int(b)
        elif kind is TokenKind.FLOAT:
            value = float(b)
        else:
            value = b
        self.tokens.append(Token(kind, value))
        self.state = State.INIT

    def _terminate(self, c: str) -> bool:
        """Handle `c` if it terminates the current token; report whether it did."""
        if c.isspace() or c in SEPARATORS:
            self.end_token()
        elif c in BRACKETS:
            self.end_token()
            self.tokens.append(BRACKETS[c])
        elif c == COMMENT_START:
            self.end_token()
            self.state = State.COMMENT
        else:
            return False
        return True

    # ----------------- per-state transitions -----------------
    def _trans_init(self, c: str) -> None:
        if self._terminate(c):
            return
        if c == "-":
            self._trans(c, State.MINUS)
        elif c == '"':
            self._trans_ignore(State.STRING_START)
        elif _is_digit(c):
            self._trans(c, State.NUM)
        else:
            self._trans(c, State.SYMBOL)

    def _trans_minus(self, c: str) -> None:
        if self._terminate(c):
            return
        if _is_digit(c):
            self._trans(c, State.NUM)
        elif c != '"':
            self._trans(c, State.SYMBOL)
        else:
            raise self._error(c)

    def _trans_num(self, c: str) -> None:
        if self._terminate(c):
            return
        if _is_digit(c):
            self.buffer += c
        elif c == ".":
            self._trans(c, State.DOT)
        else:
            raise self._error(c)

    def _trans_dot(self, c: str) -> None:
        if not _is_digit(c):
            raise self._error(c)
        self._trans(c, State.FLOAT)

    def _trans_float(self, c: str) -> None:
        if self._terminate(c):
            return
        if not _is_digit(c):
            raise self._error(c)
        self.buffer += c

    def _trans_string_start(self, c: str) -> None:
        if c == '"':
            self._trans_ignore(State.STRING_CLOSE)
        elif c == "\\":
            self._trans(c, State.ESCAPE)
        else:
            self.buffer += c

    def _trans_escape(self, c: str) -> None:
        self._trans(c, State.STRING_START)

    def _trans_string_close(self, c: str) -> None:
        if not self._terminate(c):
            raise self._error(c)

    def _trans_symbol(self, c: str) -> None:
        if self._terminate(c):
            return
        if c == '"':
            raise self._error(c)
        self.buffer += c

    def _trans_comment(self, c: str) -> None:
        if c == "\n":
            self._trans_ignore(State.INIT)

    _DISPATCH = {
        State.INIT: _trans_init,
        State.MINUS: _trans_minus,
        State.NUM: _trans_num,
        State.DOT: _trans_dot,
        State.FLOAT: _trans_float,
        State.STRING_START: _trans_string_start,
        State.ESCAPE: _trans_escape,
        State.STRING_CLOSE: _trans_string_close,
        State.SYMBOL: _trans_symbol,
        State.COMMENT: _trans_comment,
    }

    def process_char(self, c: str) -> None:
        self._DISPATCH[self.state](self, c)

    def tokenize(self, source: str) -> list[Token]:
        for c in source:
            self.process_char(c)
        self.end_token()
        logger.debug("tokenized %d chars into %d tokens", len(source), len(self.tokens))
        return self.tokens


def tokenize(source: str) -> list[Token]:
    """Tokenize `source`; raises TransitionError or TokenTerminationError."""
    return Lexer().tokenize(source)
