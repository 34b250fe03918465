# herlang

`herlang` compiles programs written in HerLang, a small teaching language,
into C++ source code.

## Installation

```
pip install .
```

## Usage

```
hcp in.herc out.cpp
```

The compiler reads `in.herc` and writes the generated C++ to `out.cpp`.
Before compiling, it checks the block indentation and prints warnings to
standard error. These warnings do not stop compilation. On success it
prints:

```
Compilation successful: out.cpp
```

With the wrong number of arguments it prints `Usage: hcp in.herc out.cpp`
and exits with status 1. If the input cannot be read, the output cannot be
written, or the source has a syntax error, it prints a message to standard
error and exits with status 1.

## The language

```
# Lines starting with '#' are comments.
function greet name:
    say "Hello, " name
end

function banner:
    say "=====" end=""
end

start:
    banner
    greet "world"
    set counter
end
```

- `function NAME [PARAM]:` ... `end` defines a function with no parameter
  or one parameter. A parameter becomes an `auto` parameter in the C++
  output, which needs a compiler that accepts that (C++20, or an extension).
- `start:` ... `end` is the program entry point. It becomes `main()`.
- `say` prints string literals and variables one after another. It ends
  with a newline unless you give `end="..."`.
- `set NAME` declares a variable initialised to zero.
- `NAME [ARG]` calls a function. The optional argument is a string literal
  or an identifier.

In the output, all function definitions come first, then `main()`. Other
statements at the top level, outside any block, are left out of the output.

## Library use

```python
from herlang.cli import compile_source

cpp = compile_source('start:\n    say "hi"\nend\n')
```

The stages can also be used one at a time:

- `herlang.text.split_lines` splits source text into lines.
- `herlang.lexer.lex` turns lines into a list of `Token`s.
- `herlang.parser.parse` builds a `herlang.nodes.Program` from tokens.
- `herlang.generator.generate_cpp` renders a `Program` as C++ text.
- `herlang.diagnostics.check_indentation` prints indentation warnings to
  standard error and returns them as a list of strings.

Syntax errors are raised as `herlang.text.CompileError`.

## What it does not do

- It only writes C++ source; it does not build or run it.
- `if`, `elif`, `else`, `add`, `minus`, `multiply` and `divide` are
  recognised as keywords, and `if`/`elif`/`else` take part in the
  indentation check, but the parser does not handle them: such statements
  produce no output.