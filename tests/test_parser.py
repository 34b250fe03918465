import pytest

from herlang.lexer import NEWLINE_VALUE, Token, TokenType, lex
from herlang.nodes import (
    FunctionCall,
    FunctionDef,
    Program,
    SayStatement,
    SetStatement,
    StartBlock,
)
from herlang.parser import parse
from herlang.text import CompileError, split_lines


def parse_source(source):
    return parse(lex(split_lines(source)))


def test_empty_inputs_give_empty_program():
    assert parse([]) == Program([])
    assert parse_source("") == Program([])


def test_start_block_with_say():
    program = parse_source('start:\n    say "hi" name\nend\n')
    assert program == Program(
        [StartBlock([SayStatement(["hi", "name"], [False, True], NEWLINE_VALUE)])]
    )


def test_function_without_param():
    program = parse_source('function greet:\n    say "x"\nend\n')
    assert program == Program(
        [FunctionDef("greet", "", [SayStatement(["x"], [False])])]
    )


def test_function_with_param():
    program = parse_source("function greet who:\n    say who\nend\n")
    assert program == Program(
        [FunctionDef("greet", "who", [SayStatement(["who"], [True])])]
    )


def test_function_missing_colon_after_param():
    with pytest.raises(CompileError, match="Expected ':' after parameter"):
        parse_source("function greet who x\nend\n")


def test_start_missing_colon():
    with pytest.raises(CompileError, match="Expected ':' after start"):
        parse_source("start\nend\n")


def test_unterminated_block():
    with pytest.raises(CompileError, match="Unexpected end of file inside block"):
        parse_source('start:\n    say "x"\n')


def test_say_custom_ending():
    program = parse_source('start:\n    say "a" end=""\nend\n')
    assert program.statements[0].body == [SayStatement(["a"], [False], "")]


def test_say_end_without_equals():
    with pytest.raises(CompileError, match="Expected '=' after 'end'"):
        parse_source('start:\n    say "a" end "x"\nend\n')


def test_say_end_without_string():
    with pytest.raises(CompileError, match="Expected string literal after end="):
        parse_source('start:\n    say "a" end=x\nend\n')


def test_say_unexpected_token():
    with pytest.raises(CompileError, match=r"Unexpected token in 'say': \("):
        parse_source('start:\n    say "a" (\nend\n')


def test_set_statement():
    program = parse_source("start:\n    set counter\nend\n")
    assert program.statements[0].body == [SetStatement("counter")]


@pytest.mark.parametrize(
    "line, expected",
    [
        ('greet "bob"', FunctionCall("greet", "bob", TokenType.STRING_LITERAL)),
        ("greet bob", FunctionCall("greet", "bob", TokenType.IDENTIFIER)),
        ("greet", FunctionCall("greet", "", TokenType.EOF)),
    ],
)
def test_function_calls(line, expected):
    program = parse_source(f"start:\n    {line}\nend\n")
    assert program.statements[0].body == [expected]


def test_unknown_top_level_tokens_are_skipped():
    program = parse_source("add x\nstart:\nend\n")
    assert program == Program([StartBlock([])])


def test_tokens_without_eof_are_handled():
    program = parse([Token(TokenType.IDENTIFIER, "f", 1)])
    assert program == Program([FunctionCall("f", "", TokenType.EOF)])


def test_too_many_statements_in_block():
    lines = ["start:"] + ["set x"] * 10001
    with pytest.raises(CompileError, match="Too many statements"):
        parse(lex(lines))


def test_functions_and_start_keep_order():
    source = "start:\n    greet\nend\nfunction greet:\nend\n"
    program = parse_source(source)
    assert [type(s) for s in program.statements] == [StartBlock, FunctionDef]