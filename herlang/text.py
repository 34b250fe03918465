"""Text helpers shared by the compiler stages."""

from __future__ import annotations

_ASCII_WHITESPACE = " \t\n\v\f\r"


class CompileError(RuntimeError):
    """Raised when a HerLang source cannot be compiled."""


def trim(s: str) -> str:
    """Strip leading and trailing ASCII whitespace."""
    return s.strip(_ASCII_WHITESPACE)


def split_lines(text: str) -> list[str]:
    """Split text on newlines, dropping the empty piece after a final newline.

    Carriage returns are kept, so CRLF lines end in ``"\\r"``.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines