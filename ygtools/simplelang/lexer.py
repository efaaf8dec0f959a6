"""Tokenizer of the small example language."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union

_I64_MAX = 2**63 - 1


class TokenKind(Enum):
    IDENT = auto()
    STRING = auto()
    NUMBER = auto()
    FUNC = auto()
    LPARAM = auto()
    RPARAM = auto()
    LCURLY = auto()
    RCURLY = auto()
    COMMA = auto()
    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()
    ADD_EQUAL = auto()
    SUB_EQUAL = auto()
    MUL_EQUAL = auto()
    DIV_EQUAL = auto()
    SEMICOLON = auto()
    EXTERN = auto()
    VAR = auto()
    ASSIGN = auto()
    IMPORT = auto()
    DOUBLE_DOT = auto()
    TRIPLE_DOT = auto()
    RETURN = auto()
    RIGHT_ARROW = auto()


@dataclass(frozen=True)
class Token:
    """A token; identifiers, strings and numbers carry a value."""

    kind: TokenKind
    value: Union[str, int, None] = None


class LexingError(ValueError):
    """Raised for input that does not form a token."""

    def __init__(self, message: str, char: Optional[str] = None, position: int = 0) -> None:
        super().__init__(message)
        self.char = char
        self.position = position


_KEYWORDS = {
    "func": TokenKind.FUNC,
    "extern": TokenKind.EXTERN,
    "var": TokenKind.VAR,
    "import": TokenKind.IMPORT,
    "return": TokenKind.RETURN,
}

# Longest symbols first so that "+=" wins over "+".
_SYMBOLS = [
    ("...", TokenKind.TRIPLE_DOT),
    ("+=", TokenKind.ADD_EQUAL),
    ("-=", TokenKind.SUB_EQUAL),
    ("*=", TokenKind.MUL_EQUAL),
    ("/=", TokenKind.DIV_EQUAL),
    ("->", TokenKind.RIGHT_ARROW),
    ("(", TokenKind.LPARAM),
    (")", TokenKind.RPARAM),
    ("{", TokenKind.LCURLY),
    ("}", TokenKind.RCURLY),
    (",", TokenKind.COMMA),
    ("+", TokenKind.ADD),
    ("-", TokenKind.SUB),
    ("*", TokenKind.MUL),
    ("/", TokenKind.DIV),
    (";", TokenKind.SEMICOLON),
    ("=", TokenKind.ASSIGN),
    (":", TokenKind.DOUBLE_DOT),
]

_SKIP = re.compile(r"[ \t\n\r\f]+|//[^\n]*|/\*(?:[^*]|\*[^/])*\*/")
_WORD = re.compile(r"[a-zA-Z0-9_]+")
_NUMBER = re.compile(r"0x[0-9a-fA-F]+|0b[01]+|[0-9]+")
_STRING = re.compile(r'"[^"]*"')

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "0": "\0",
    "b": "\b",
    "f": "\f",
    "\\": "\\",
    '"': '"',
    "'": "'",
    "/": "/",
}
_ESCAPE_RE = re.compile(r"\\(?:u\{([0-9a-fA-F]{1,6})\}|u([0-9a-fA-F]{4})|(.?))", re.DOTALL)


def _unescape(text: str, position: int) -> str:
    def replace(match: re.Match) -> str:
        code = match.group(1) or match.group(2)
        if code:
            return chr(int(code, 16))
        char = match.group(3)
        if char not in _ESCAPES:
            raise LexingError(f"invalid escape sequence: '\\{char}'", "\\", position)
        return _ESCAPES[char]

    return _ESCAPE_RE.sub(replace, text)


def _number(text: str, position: int) -> int:
    if text.startswith("0x"):
        value = int(text[2:], 16)
    elif text.startswith("0b"):
        value = int(text[2:], 2)
    else:
        value = int(text)
    if value > _I64_MAX:
        raise LexingError("number too large to fit in target type", text[0], position)
    return value


def _word(text: str, position: int) -> Token:
    if text in _KEYWORDS:
        return Token(_KEYWORDS[text])
    if _NUMBER.fullmatch(text):
        return Token(TokenKind.NUMBER, _number(text, position))
    return Token(TokenKind.IDENT, text)


def lex(text: str) -> list[Token]:
    """Split ``text`` into tokens, skipping whitespace and comments.

    Raises LexingError at the first character that starts no token.
    """
    tokens: list[Token] = []
    pos = 0
    while pos < len(text):
        skip = _SKIP.match(text, pos)
        if skip:
            pos = skip.end()
            continue

        word = _WORD.match(text, pos)
        if word:
            tokens.append(_word(word.group(), pos))
            pos = word.end()
            continue

        string = _STRING.match(text, pos)
        if string:
            tokens.append(Token(TokenKind.STRING, _unescape(string.group()[1:-1], pos)))
            pos = string.end()
            continue

        for symbol, kind in _SYMBOLS:
            if text.startswith(symbol, pos):
                tokens.append(Token(kind))
                pos += len(symbol)
                break
        else:
            char = text[pos]
            if not char.isascii():
                raise LexingError("non-ascii character", char, pos)
            raise LexingError(f"unexpected character '{char}'", char, pos)
    return tokens