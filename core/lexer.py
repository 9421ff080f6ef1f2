"""core/lexer.py - 按优先级顺序的正则规则表把输入切分为Token序列"""
import re
import logging

import numpy as np

from config.config import LEXER_CONFIG
from core.errors import EmptyExpressionError, MalformedNumberError, UnrecognizedTokenError
from core.token_system import (
    TokenType, Token, OPERATOR_DEFINITIONS, FUNCTION_DEFINITIONS, CONSTANT_DEFINITIONS
)

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(LEXER_CONFIG["whitespace_pattern"])
_BRACKETS = str.maketrans(LEXER_CONFIG["bracket_source"], LEXER_CONFIG["bracket_target"])
# 合法的十进制字面量: 1 / 1.5 / 1. / .5
_VALID_NUMBER = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")


def normalize(text):
    """删除所有空白，并把 {} [] 统一为 ()"""
    return _WHITESPACE.sub("", text or "").translate(_BRACKETS)


def _make_number(lexeme):
    if not _VALID_NUMBER.fullmatch(lexeme):
        raise MalformedNumberError(lexeme)
    value = float(lexeme)
    if not np.isfinite(value):
        raise MalformedNumberError(lexeme)
    return Token.number(value, lexeme)


def _make_constant(lexeme):
    # 常量在词法阶段直接替换为数字
    return Token.number(CONSTANT_DEFINITIONS[lexeme], lexeme)


def _make_operator(lexeme):
    return Token(TokenType.OPERATOR, lexeme, spec=OPERATOR_DEFINITIONS[lexeme])


def _make_function(lexeme):
    return Token(TokenType.FUNCTION, lexeme, spec=FUNCTION_DEFINITIONS[lexeme])


def _make_plain(token_type):
    def construct(lexeme):
        return Token(token_type, lexeme)
    return construct


def _rule(token_type, pattern, constructor):
    return token_type, re.compile(pattern), constructor


# 规则表：先列出的先尝试，第一个匹配的规则胜出
PATTERN_TABLE = (
    _rule(TokenType.NUMBER, r"[0-9.]+", _make_number),
    _rule(TokenType.LEFT_BRACKET, r"\(", _make_plain(TokenType.LEFT_BRACKET)),
    _rule(TokenType.RIGHT_BRACKET, r"\)", _make_plain(TokenType.RIGHT_BRACKET)),
    _rule(TokenType.SEPARATOR, r",", _make_plain(TokenType.SEPARATOR)),
    _rule(TokenType.OPERATOR, r"-", _make_operator),
    _rule(TokenType.OPERATOR, r"\+", _make_operator),
    _rule(TokenType.OPERATOR, r"/", _make_operator),
    _rule(TokenType.OPERATOR, r"\*", _make_operator),
    _rule(TokenType.OPERATOR, r"\^", _make_operator),
    _rule(TokenType.CONSTANT, r"PI", _make_constant),
    _rule(TokenType.CONSTANT, r"E", _make_constant),
    _rule(TokenType.FUNCTION, r"sin", _make_function),
    _rule(TokenType.FUNCTION, r"cos", _make_function),
    _rule(TokenType.FUNCTION, r"tg", _make_function),
    _rule(TokenType.FUNCTION, r"ctg", _make_function),
    _rule(TokenType.FUNCTION, r"max", _make_function),
)


class Lexer:

    def __init__(self, patterns=PATTERN_TABLE):
        self.patterns = patterns

    def tokenize(self, text):
        """
        Args:
            text: 原始表达式，规范化和空表达式检查都在这里完成
        Returns:
            Token列表
        """
        expression = normalize(text)
        if not expression:
            raise EmptyExpressionError()

        tokens = []
        position = 0
        while position < len(expression):
            for token_type, regex, constructor in self.patterns:
                match = regex.match(expression, position)
                if match:
                    tokens.append(constructor(match.group()))
                    position = match.end()
                    break
            else:
                raise UnrecognizedTokenError(expression[position:])

        logger.debug(f"Tokenized '{expression}' into {len(tokens)} tokens")
        return tokens
