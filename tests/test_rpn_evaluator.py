import pytest

from core.errors import (
    DivideByZeroError, StackUnderflowError, LeftoverOperandsError,
    NonFiniteResultError, UnexpectedTokenError
)
from core.rpn_evaluator import RPNEvaluator
from core.token_system import TokenType, Token, OPERATOR_DEFINITIONS, FUNCTION_DEFINITIONS


def num(value):
    return Token.number(value)


def op(symbol):
    return Token(TokenType.OPERATOR, symbol, spec=OPERATOR_DEFINITIONS[symbol])


def fn(name):
    return Token(TokenType.FUNCTION, name, spec=FUNCTION_DEFINITIONS[name])


def test_operand_order():
    assert RPNEvaluator.evaluate([num(2), num(3), op('-')]) == -1.0
    assert RPNEvaluator.evaluate([num(8), num(2), op('/')]) == 4.0
    assert RPNEvaluator.evaluate([num(2), num(3), op('^')]) == 8.0


def test_nested():
    # 1 + 2 * 3 - 4
    postfix = [num(1), num(2), num(3), op('*'), op('+'), num(4), op('-')]
    assert RPNEvaluator.evaluate(postfix) == 3.0


def test_function():
    assert RPNEvaluator.evaluate([num(1), num(7), fn('max')]) == 7.0
    assert RPNEvaluator.evaluate([num(0), fn('sin')]) == 0.0


def test_single_number():
    assert RPNEvaluator.evaluate([num(42)]) == 42.0


def test_underflow():
    with pytest.raises(StackUnderflowError) as exc_info:
        RPNEvaluator.evaluate([num(1), op('+')])
    assert exc_info.value.name == 'plus'
    assert exc_info.value.expected == 2
    assert exc_info.value.available == 1


def test_function_underflow():
    with pytest.raises(StackUnderflowError) as exc_info:
        RPNEvaluator.evaluate([num(1), fn('max')])
    assert exc_info.value.name == 'max'


def test_empty_postfix():
    with pytest.raises(StackUnderflowError):
        RPNEvaluator.evaluate([])


def test_leftover_operands():
    with pytest.raises(LeftoverOperandsError) as exc_info:
        RPNEvaluator.evaluate([num(1), num(2)])
    assert exc_info.value.count == 2


def test_divide_by_zero():
    with pytest.raises(DivideByZeroError):
        RPNEvaluator.evaluate([num(4), num(0), op('/')])


def test_non_finite():
    with pytest.raises(NonFiniteResultError) as exc_info:
        RPNEvaluator.evaluate([num(0), num(-1), op('^')])
    assert exc_info.value.name == 'power'


def test_bracket_in_postfix():
    with pytest.raises(UnexpectedTokenError):
        RPNEvaluator.evaluate([num(1), Token(TokenType.LEFT_BRACKET, '(')])


def test_tokens_not_mutated():
    postfix = [num(2), num(3), op('+')]
    RPNEvaluator.evaluate(postfix)
    assert [t.value for t in postfix] == [2.0, 3.0, None]
    assert [t.type for t in postfix] == [TokenType.NUMBER, TokenType.NUMBER, TokenType.OPERATOR]


def test_unexpected_token_belongs_to_both_stages():
    from core.errors import ConverterError, EvalError

    with pytest.raises(UnexpectedTokenError) as exc_info:
        RPNEvaluator.evaluate([Token(TokenType.SEPARATOR, ',')])
    assert isinstance(exc_info.value, ConverterError)
    assert isinstance(exc_info.value, EvalError)
