"""Reader turning program text into Lisp data."""

from __future__ import annotations

from typing import Any

from lspy.values import Cons, LispError, Symbol, from_iterable

_WHITESPACE = frozenset(" \n\t")
_SYMBOL_PUNCTUATION = frozenset("+-*/%<=>~!$@&|^?:_")
_ESCAPES = {
    "a": "\a",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    "'": "'",
    '"': '"',
}


class ParseError(LispError):
    """Raised when program text cannot be read."""


def _is_symbol_character(char: str) -> bool:
    return (
        ("a" <= char <= "z")
        or ("A" <= char <= "Z")
        or char in _SYMBOL_PUNCTUATION
    )


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


class _Reader:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def peek(self, ahead: int = 0) -> str:
        index = self.pos + ahead
        if index < len(self.text):
            char = self.text[index]
            return "" if char == "\0" else char
        return ""

    def advance(self) -> None:
        if self.peek():
            self.pos += 1

    def skip_whitespace(self) -> None:
        while self.peek() in _WHITESPACE and self.peek():
            self.advance()

    def read_all(self) -> Any:
        expressions = []
        while True:
            self.skip_whitespace()
            if not self.peek():
                return from_iterable(expressions)
            expressions.append(self.read_one())

    def read_one(self) -> Any:
        char = self.peek()
        lookahead = self.peek(1) if char else ""
        if char == "(":
            return self.read_list()
        if _is_digit(char) or (char == "-" and _is_digit(lookahead)):
            return self.read_number()
        if char == '"':
            return self.read_string()
        if char and _is_symbol_character(char):
            return self.read_symbol()
        if not char:
            raise ParseError("unexpected end of input")
        raise ParseError(f"unexpected character {char!r} at offset {self.pos}")

    def read_list(self) -> Any:
        self.advance()  # the opening bracket
        head = Cons()
        tail = head
        while True:
            self.skip_whitespace()
            char = self.peek()
            if char == ")":
                self.advance()
                break
            if char == ".":
                self.advance()
                self.skip_whitespace()
                tail.cdr = self.read_one()
                self.skip_whitespace()
                if self.peek() != ")":
                    raise ParseError(f"expected ')' after dotted tail at offset {self.pos}")
                self.advance()
                break
            cell = Cons(self.read_one(), None)
            tail.cdr = cell
            tail = cell
        return head.cdr

    def read_number(self) -> int:
        negative = False
        if self.peek() == "-":
            negative = True
            self.advance()
        value = 0
        while _is_digit(self.peek()):
            value = value * 10 + int(self.peek())
            self.advance()
        return -value if negative else value

    def read_string(self) -> str:
        self.advance()  # the opening quote
        chars = []
        while True:
            char = self.peek()
            if not char:
                raise ParseError("unterminated string")
            if char == '"':
                self.advance()
                return "".join(chars)
            if char == "\\":
                self.advance()
                escape = self.peek()
                if escape not in _ESCAPES or not escape:
                    raise ParseError(f"unsupported escape sequence \\{escape}")
                char = _ESCAPES[escape]
            chars.append(char)
            self.advance()

    def read_symbol(self) -> Symbol:
        chars = []
        while self.peek() and _is_symbol_character(self.peek()):
            chars.append(self.peek())
            self.advance()
        return Symbol("".join(chars))


def parse(text: str) -> Any:
    """Read every expression in ``text`` and return them as a list."""
    return _Reader(text).read_all()