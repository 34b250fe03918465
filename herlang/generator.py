"""Emit C++ source code from a HerLang program tree."""

from __future__ import annotations

from collections.abc import Iterable

from .lexer import NEWLINE_VALUE, TokenType
from .nodes import (
    FunctionCall,
    FunctionDef,
    Program,
    SayStatement,
    SetStatement,
    StartBlock,
    Statement,
)

_HEADER = (
    "#include <iostream>\n#include <string>\n\n"
    "#ifdef _WIN32\n#include <windows.h>\n#endif\n\n"
)
_MAIN_OPEN = "int main() {\n#ifdef _WIN32\nSetConsoleOutputCP(CP_UTF8);\n#endif\n\n"


def _indent(level: int) -> str:
    return " " * (level * 4)


def escape_string(s: str) -> str:
    """Escape double quotes and backslashes for a C++ string literal."""
    return s.replace("\\", "\\\\").replace('"', '\\"')


def _quoted(s: str) -> str:
    return f'"{escape_string(s)}"'


def _gen_statement(stmt: Statement, level: int) -> Iterable[str]:
    ind = _indent(level)
    match stmt:
        case SayStatement(args=args, is_vars=is_vars, end=end):
            parts = [arg if is_var else _quoted(arg) for arg, is_var in zip(args, is_vars)]
            line = ind + "std::cout" + "".join(f" << {part}" for part in parts)
            if end == NEWLINE_VALUE:
                yield line + " << std::endl;\n"
            else:
                yield line + f" << {_quoted(end)};\n"
        case SetStatement(var=var):
            yield f"{ind}auto {var} = 0;\n"
        case FunctionDef(name=name, param=param, body=body):
            params = f"auto {param}" if param else ""
            yield f"void {name}({params}) {{\n"
            for inner in body:
                yield from _gen_statement(inner, level + 1)
            yield "}\n"
        case FunctionCall(name=name, arg=arg, arg_type=arg_type):
            if not arg:
                rendered = ""
            elif arg_type is TokenType.STRING_LITERAL:
                rendered = _quoted(arg)
            else:
                rendered = arg
            yield f"{ind}{name}({rendered});\n"
        case StartBlock(body=body):
            yield _MAIN_OPEN
            for inner in body:
                yield from _gen_statement(inner, level + 1)
            yield f"{_indent(level + 1)}return 0;\n"
            yield "}\n"


def generate_cpp(program: Program) -> str:
    """Render a program as C++: function definitions first, then main."""
    chunks = [_HEADER]
    for kind in (FunctionDef, StartBlock):
        for stmt in program.statements:
            if isinstance(stmt, kind):
                chunks.extend(_gen_statement(stmt, 0))
                chunks.append("\n")
    return "".join(chunks)