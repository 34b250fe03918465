"""Tokenizer for HerLang source lines."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

from .text import CompileError, trim

KEYWORDS = frozenset(
    {
        "function",
        "start",
        "end",
        "if",
        "elif",
        "else",
        "say",
        "set",
        "add",
        "minus",
        "multiply",
        "divide",
    }
)

NEWLINE_VALUE = "\\n"

_TOKEN_RE = re.compile(
    r'(?P<space>[ \t\n\v\f\r]+)'
    r'|"(?P<string>[^"]*)"'
    r'|(?P<word>[A-Za-z_][A-Za-z0-9_]*)'
    r'|(?P<symbol>[:=()])'
    r'|(?P<quote>")'
    r'|(?P<other>.)',
    re.DOTALL,
)


class TokenType(Enum):
    KEYWORD = auto()
    IDENTIFIER = auto()
    STRING_LITERAL = auto()
    SYMBOL = auto()
    INDENT = auto()
    DEDENT = auto()
    NEWLINE = auto()
    EOF = auto()
    UNKNOWN = auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    line: int = 0


def _lex_line(line: str, lineno: int) -> Iterable[Token]:
    for match in _TOKEN_RE.finditer(line):
        kind = match.lastgroup
        if kind == "string":
            yield Token(TokenType.STRING_LITERAL, match.group("string"), lineno)
        elif kind == "word":
            word = match.group("word")
            kind_type = TokenType.KEYWORD if word in KEYWORDS else TokenType.IDENTIFIER
            yield Token(kind_type, word, lineno)
        elif kind == "symbol":
            yield Token(TokenType.SYMBOL, match.group("symbol"), lineno)
        elif kind == "quote":
            raise CompileError(f"Unterminated string at line {lineno}")
        # whitespace and unexpected characters are skipped


def lex(lines: list[str]) -> list[Token]:
    """Turn source lines into tokens, ending every line with a newline token."""
    tokens: list[Token] = []
    for lineno, raw in enumerate(lines, start=1):
        line = trim(raw)
        if not line or line.startswith("#"):
            continue
        tokens.extend(_lex_line(line, lineno))
        tokens.append(Token(TokenType.NEWLINE, NEWLINE_VALUE, lineno))
    tokens.append(Token(TokenType.EOF, "", len(lines)))
    return tokens