import pytest

from core.errors import MissingLeftBracketError, MismatchedBracketsError, UnexpectedTokenError
from core.lexer import Lexer
from core.shunting_yard import ShuntingYardConverter, format_postfix
from core.token_system import TokenType, Token


def rpn(expression):
    return format_postfix(ShuntingYardConverter.to_postfix(Lexer().tokenize(expression)))


@pytest.mark.parametrize("expression, expected", [
    ("2+3*4", "2 3 4 * +"),
    ("(2+3)*4", "2 3 + 4 *"),
    ("8/4/2", "8 4 / 2 /"),
    ("2-3-4", "2 3 - 4 -"),
    ("1-2+3", "1 2 - 3 +"),
    ("2^3^2", "2 3 2 ^ ^"),
    ("2*3^2", "2 3 2 ^ *"),
    ("1+2*3-4", "1 2 3 * + 4 -"),
    ("[1+2]*{3-4}", "1 2 + 3 4 - *"),
])
def test_operators(expression, expected):
    assert rpn(expression) == expected


@pytest.mark.parametrize("expression, expected", [
    ("max(1,2)", "1 2 max"),
    ("sin(PI/2)", "PI 2 / sin"),
    ("max(1+2,3*4)", "1 2 + 3 4 * max"),
    ("max(max(1,5),3)", "1 5 max 3 max"),
    ("2*cos(0)+1", "2 0 cos * 1 +"),
])
def test_functions(expression, expected):
    assert rpn(expression) == expected


def test_output_has_no_brackets_or_separators():
    postfix = ShuntingYardConverter.to_postfix(Lexer().tokenize("max((1),(2+3))"))
    assert {t.type for t in postfix} == {TokenType.NUMBER, TokenType.OPERATOR, TokenType.FUNCTION}


@pytest.mark.parametrize("expression", ["2+)", ")(", "1,2", "(1)+2)"])
def test_missing_left_bracket(expression):
    with pytest.raises(MissingLeftBracketError) as exc_info:
        rpn(expression)
    assert str(exc_info.value) == "Missing left bracket in expression"


@pytest.mark.parametrize("expression", ["(2+3", "((1)", "max(1,2"])
def test_mismatched_brackets(expression):
    with pytest.raises(MismatchedBracketsError) as exc_info:
        rpn(expression)
    assert str(exc_info.value) == "Mismatched brackets in expression"


def test_unexpected_token():
    with pytest.raises(UnexpectedTokenError):
        ShuntingYardConverter.to_postfix([Token(TokenType.CONSTANT, 'PI')])


def test_input_not_consumed():
    tokens = Lexer().tokenize("(1+2)*3")
    snapshot = list(tokens)
    ShuntingYardConverter.to_postfix(tokens)
    assert tokens == snapshot
