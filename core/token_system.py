"""core/token_system.py"""
from enum import Enum
from types import MappingProxyType

import numpy as np

from core.operators import Operators


class TokenType(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    FUNCTION = "function"
    CONSTANT = "constant"  # 只在词法表中出现，词法分析时即替换为 NUMBER
    LEFT_BRACKET = "l_bracket"
    RIGHT_BRACKET = "r_bracket"
    SEPARATOR = "separator"  # 函数参数分隔符 ','


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"
    FULL = "full"  # 可与同优先级操作符任意结合（+ 和 *）


class OperatorSpec:
    def __init__(self, name, symbol, precedence, associativity, evaluate):
        self.name = name
        self.symbol = symbol
        self.precedence = precedence
        self.associativity = associativity
        self.arity = 2
        self.evaluate = evaluate

    def pops_before(self, other):
        """
        shunting-yard 判定：self 入栈前是否应先弹出栈顶的 other
        左结合/完全结合：precedence(self) <= precedence(other)
        右结合：precedence(self) < precedence(other)
        """
        if self.associativity == Associativity.RIGHT:
            return self.precedence < other.precedence
        return self.precedence <= other.precedence

    def __repr__(self):
        return f"OperatorSpec({self.symbol!r}, precedence={self.precedence}, {self.associativity.value})"


class FunctionSpec:
    def __init__(self, name, arity, evaluate):
        self.name = name
        self.arity = arity
        self.evaluate = evaluate

    def __repr__(self):
        return f"FunctionSpec({self.name!r}, arity={self.arity})"


class Token:
    def __init__(self, token_type, lexeme, value=None, spec=None):
        self.type = token_type
        self.lexeme = lexeme
        self.value = value  # 仅 NUMBER 有值
        self.spec = spec  # OPERATOR / FUNCTION 的定义

    @property
    def name(self):
        return self.spec.name if self.spec is not None else self.lexeme

    @property
    def arity(self):
        return self.spec.arity if self.spec is not None else 0

    @classmethod
    def number(cls, value, lexeme=None):
        if lexeme is None:
            lexeme = repr(float(value))
        return cls(TokenType.NUMBER, lexeme, value=float(value))

    def __str__(self):
        return self.lexeme

    def __repr__(self):
        return f"Token({self.type.value}, {self.lexeme!r})"


# 二元操作符定义（按符号索引）
OPERATOR_DEFINITIONS = MappingProxyType({
    '+': OperatorSpec('plus', '+', 2, Associativity.FULL, Operators.plus),
    '-': OperatorSpec('minus', '-', 2, Associativity.LEFT, Operators.minus),
    '*': OperatorSpec('multiply', '*', 3, Associativity.FULL, Operators.multiply),
    '/': OperatorSpec('divide', '/', 3, Associativity.LEFT, Operators.divide),
    '^': OperatorSpec('power', '^', 4, Associativity.RIGHT, Operators.power),
})

# 函数定义
FUNCTION_DEFINITIONS = MappingProxyType({
    'sin': FunctionSpec('sin', 1, Operators.sin),
    'cos': FunctionSpec('cos', 1, Operators.cos),
    'tg': FunctionSpec('tg', 1, Operators.tg),
    'ctg': FunctionSpec('ctg', 1, Operators.ctg),
    'max': FunctionSpec('max', 2, Operators.max),
})

# 常量定义
CONSTANT_DEFINITIONS = MappingProxyType({
    'PI': float(np.pi),
    'E': float(np.e),
})
