"""Recursive-descent parser turning HerLang tokens into a syntax tree."""

from __future__ import annotations

from collections.abc import Sequence

from .lexer import NEWLINE_VALUE, Token, TokenType
from .nodes import (
    FunctionCall,
    FunctionDef,
    Program,
    SayStatement,
    SetStatement,
    StartBlock,
    Statement,
)
from .text import CompileError

MAX_BLOCK_STATEMENTS = 10000

_EOF = Token(TokenType.EOF, "")


class _Parser:
    """Walks a token sequence, handing out an EOF token past its end."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = list(tokens)
        self._pos = 0

    @property
    def exhausted(self) -> bool:
        return self._pos >= len(self._tokens)

    def peek(self) -> Token:
        if self.exhausted:
            return _EOF
        return self._tokens[self._pos]

    def advance(self) -> Token:
        if self.exhausted:
            return _EOF
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def skip_newlines(self) -> None:
        while self.peek().type is TokenType.NEWLINE:
            self.advance()

    def parse_program(self) -> Program:
        program = Program()
        while not self.exhausted:
            if self.peek().type is TokenType.EOF:
                break
            statement = self.parse_statement()
            if statement is not None:
                program.statements.append(statement)
            else:
                self.advance()
        return program

    def parse_block(self) -> list[Statement]:
        body: list[Statement] = []
        parsed = 0
        while True:
            self.skip_newlines()
            current = self.peek()
            if current.type is TokenType.KEYWORD and current.value == "end":
                self.advance()
                return body
            if current.type is TokenType.EOF:
                raise CompileError("Unexpected end of file inside block.")

            statement = self.parse_statement()
            if statement is not None:
                body.append(statement)
            else:
                self.advance()

            parsed += 1
            if parsed > MAX_BLOCK_STATEMENTS:
                raise CompileError(
                    "Too many statements parsed without encountering 'end'"
                )

    def parse_statement(self) -> Statement | None:
        self.skip_newlines()
        token = self.peek()

        if token.type is TokenType.EOF:
            return None
        if token.type is TokenType.KEYWORD:
            handler = {
                "function": self._parse_function,
                "start": self._parse_start,
                "say": self._parse_say,
                "set": self._parse_set,
            }.get(token.value)
            if handler is not None:
                return handler()
        if token.type is TokenType.IDENTIFIER:
            return self._parse_call()

        self.advance()
        return None

    def _parse_function(self) -> FunctionDef:
        self.advance()
        name = self.advance()
        param_or_colon = self.advance()
        param = ""
        if not (
            param_or_colon.type is TokenType.SYMBOL and param_or_colon.value == ":"
        ):
            param = param_or_colon.value
            if self.advance().value != ":":
                raise CompileError(
                    "Expected ':' after parameter in function definition"
                )
        return FunctionDef(name.value, param, self.parse_block())

    def _parse_start(self) -> StartBlock:
        self.advance()
        if self.advance().value != ":":
            raise CompileError("Expected ':' after start")
        return StartBlock(self.parse_block())

    def _parse_say(self) -> SayStatement:
        self.advance()
        args: list[str] = []
        is_vars: list[bool] = []
        ending = NEWLINE_VALUE

        while True:
            following = self.peek()
            if following.type is TokenType.KEYWORD and following.value == "end":
                self.advance()
                equals = self.peek()
                if equals.type is not TokenType.SYMBOL or equals.value != "=":
                    raise CompileError("Expected '=' after 'end'")
                self.advance()
                if self.peek().type is not TokenType.STRING_LITERAL:
                    raise CompileError("Expected string literal after end=")
                ending = self.advance().value
                break

            if following.type in (TokenType.NEWLINE, TokenType.EOF):
                self.advance()
                break

            if following.type in (TokenType.STRING_LITERAL, TokenType.IDENTIFIER):
                arg = self.advance()
                args.append(arg.value)
                is_vars.append(arg.type is TokenType.IDENTIFIER)
                comma = self.peek()
                if comma.type is TokenType.SYMBOL and comma.value == ",":
                    self.advance()
            else:
                raise CompileError(f"Unexpected token in 'say': {following.value}")

        return SayStatement(args, is_vars, ending)

    def _parse_set(self) -> SetStatement:
        self.advance()
        return SetStatement(self.advance().value)

    def _parse_call(self) -> FunctionCall:
        name = self.advance()
        following = self.peek()
        if following.type in (TokenType.STRING_LITERAL, TokenType.IDENTIFIER):
            arg = self.advance()
            return FunctionCall(name.value, arg.value, arg.type)
        return FunctionCall(name.value, "", TokenType.EOF)


def parse(tokens: Sequence[Token]) -> Program:
    """Build a program tree from a token sequence."""
    return _Parser(tokens).parse_program()