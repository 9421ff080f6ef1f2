"""core/errors.py - 表达式求值的错误分类"""
from enum import Enum


class ErrorKind(Enum):
    EMPTY_EXPRESSION = "empty_expression"
    UNRECOGNIZED_TOKEN = "unrecognized_token"
    MALFORMED_NUMBER = "malformed_number"
    MISSING_LEFT_BRACKET = "missing_left_bracket"
    MISMATCHED_BRACKETS = "mismatched_brackets"
    DIVIDE_BY_ZERO = "divide_by_zero"
    STACK_UNDERFLOW = "stack_underflow"
    LEFTOVER_OPERANDS = "leftover_operands"
    NON_FINITE_RESULT = "non_finite_result"
    UNEXPECTED_TOKEN = "unexpected_token"


class ExpressionError(Exception):
    """所有求值错误的基类，str(err) 即面向用户的错误信息"""
    kind = None

    def __init__(self, message):
        super().__init__(message)
        self.message = message


# 按阶段分组 ====================

class LexError(ExpressionError):
    pass


class ConverterError(ExpressionError):
    pass


class EvalError(ExpressionError):
    pass


# 词法阶段 ====================

class EmptyExpressionError(LexError):
    kind = ErrorKind.EMPTY_EXPRESSION

    def __init__(self):
        super().__init__("Expression to evaluate is empty")


class UnrecognizedTokenError(LexError):
    kind = ErrorKind.UNRECOGNIZED_TOKEN

    def __init__(self, remainder):
        super().__init__(f"Unrecognized token: '{remainder}'")
        self.remainder = remainder


class MalformedNumberError(LexError):
    """数字词素不是合法的十进制字面量（如 1.2.3）"""
    kind = ErrorKind.MALFORMED_NUMBER

    def __init__(self, lexeme):
        super().__init__(f"Malformed number: '{lexeme}'")
        self.lexeme = lexeme


# 转换阶段 ====================

class MissingLeftBracketError(ConverterError):
    kind = ErrorKind.MISSING_LEFT_BRACKET

    def __init__(self):
        super().__init__("Missing left bracket in expression")


class MismatchedBracketsError(ConverterError):
    kind = ErrorKind.MISMATCHED_BRACKETS

    def __init__(self):
        super().__init__("Mismatched brackets in expression")


class UnexpectedTokenError(ConverterError, EvalError):
    """转换器或求值器遇到了不应出现的Token类型，两个阶段共用"""
    kind = ErrorKind.UNEXPECTED_TOKEN

    def __init__(self, lexeme):
        super().__init__(f"Unexpected token in expression: '{lexeme}'")
        self.lexeme = lexeme


# 求值阶段 ====================

class DivideByZeroError(EvalError):
    kind = ErrorKind.DIVIDE_BY_ZERO

    def __init__(self):
        super().__init__("Divide by zero")


class StackUnderflowError(EvalError):
    kind = ErrorKind.STACK_UNDERFLOW

    def __init__(self, name, expected, available):
        super().__init__(
            f"Not enough operands for '{name}': expected {expected}, got {available}"
        )
        self.name = name
        self.expected = expected
        self.available = available


class LeftoverOperandsError(EvalError):
    kind = ErrorKind.LEFTOVER_OPERANDS

    def __init__(self, count):
        super().__init__(f"Malformed expression: {count} values left on the stack")
        self.count = count


class NonFiniteResultError(EvalError):
    kind = ErrorKind.NON_FINITE_RESULT

    def __init__(self, name):
        super().__init__(f"Result of '{name}' is not a finite number")
        self.name = name
