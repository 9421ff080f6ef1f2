"""核心模块 - Token系统、词法分析、shunting-yard转换和RPN求值器"""
from .token_system import (
    TokenType, Associativity, Token, OperatorSpec, FunctionSpec,
    OPERATOR_DEFINITIONS, FUNCTION_DEFINITIONS, CONSTANT_DEFINITIONS
)
from .errors import (
    ErrorKind, ExpressionError, LexError, ConverterError, EvalError,
    EmptyExpressionError, UnrecognizedTokenError, MalformedNumberError,
    MissingLeftBracketError, MismatchedBracketsError, UnexpectedTokenError,
    DivideByZeroError, StackUnderflowError, LeftoverOperandsError, NonFiniteResultError
)
from .lexer import Lexer, PATTERN_TABLE, normalize
from .shunting_yard import ShuntingYardConverter, format_postfix
from .rpn_evaluator import RPNEvaluator
from .operators import Operators

__all__ = [
    'TokenType', 'Associativity', 'Token', 'OperatorSpec', 'FunctionSpec',
    'OPERATOR_DEFINITIONS', 'FUNCTION_DEFINITIONS', 'CONSTANT_DEFINITIONS',
    'ErrorKind', 'ExpressionError', 'LexError', 'ConverterError', 'EvalError',
    'EmptyExpressionError', 'UnrecognizedTokenError', 'MalformedNumberError',
    'MissingLeftBracketError', 'MismatchedBracketsError', 'UnexpectedTokenError',
    'DivideByZeroError', 'StackUnderflowError', 'LeftoverOperandsError', 'NonFiniteResultError',
    'Lexer', 'PATTERN_TABLE', 'normalize',
    'ShuntingYardConverter', 'format_postfix',
    'RPNEvaluator', 'Operators'
]
