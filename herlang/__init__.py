"""A compiler for the HerLang language that emits C++ source code."""

__version__ = "0.1.0"