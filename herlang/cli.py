"""Command line entry point: compile a HerLang file into C++ source."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .diagnostics import check_indentation
from .generator import generate_cpp
from .lexer import lex
from .parser import parse
from .text import CompileError, split_lines

USAGE = "Usage: hcp in.herc out.cpp"


def compile_source(source: str) -> str:
    """Compile HerLang source text to C++ code, warning about indentation."""
    check_indentation(source)
    tokens = lex(split_lines(source))
    return generate_cpp(parse(tokens))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the compiler with ``in.herc out.cpp`` arguments; return an exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(USAGE, file=sys.stderr)
        return 1
    in_path, out_path = args

    try:
        with open(in_path, encoding="utf-8", errors="surrogateescape", newline="") as fh:
            source = fh.read()
    except OSError:
        print(f"Cannot open input file: {in_path}", file=sys.stderr)
        return 1

    try:
        cpp_code = compile_source(source)
    except CompileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        with open(out_path, "w", encoding="utf-8", errors="surrogateescape", newline="") as fh:
            fh.write(cpp_code)
    except OSError:
        print(f"Cannot write to output file: {out_path}", file=sys.stderr)
        return 1

    print(f"Compilation successful: {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())