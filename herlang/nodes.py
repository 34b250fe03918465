"""Syntax tree nodes for HerLang programs."""

from __future__ import annotations

from dataclasses import dataclass, field

from .lexer import NEWLINE_VALUE, TokenType
from .text import CompileError


class Statement:
    """Base class of every statement node."""


@dataclass
class SayStatement(Statement):
    """Print arguments, each a literal string or a variable name."""

    args: list[str] = field(default_factory=list)
    is_vars: list[bool] = field(default_factory=list)
    end: str = NEWLINE_VALUE

    def __post_init__(self) -> None:
        if len(self.args) != len(self.is_vars):
            raise CompileError("Internal error: say args/vars mismatch.")


@dataclass
class SetStatement(Statement):
    var: str


@dataclass
class FunctionCall(Statement):
    name: str
    arg: str = ""
    arg_type: TokenType = TokenType.EOF


@dataclass
class FunctionDef(Statement):
    name: str
    param: str = ""
    body: list[Statement] = field(default_factory=list)


@dataclass
class StartBlock(Statement):
    body: list[Statement] = field(default_factory=list)


@dataclass
class Program:
    statements: list[Statement] = field(default_factory=list)