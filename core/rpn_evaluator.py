"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import (
    StackUnderflowError, LeftoverOperandsError, NonFiniteResultError, UnexpectedTokenError
)
from core.operators import Operators
from core.token_system import TokenType, Token

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence):
        """
        Args:
            token_sequence: 后缀Token序列
        Returns:
            float 结果
        """
        stack = []

        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack.append(token)

            elif token.type in (TokenType.OPERATOR, TokenType.FUNCTION):
                arity = token.arity
                if len(stack) < arity:
                    logger.debug(f"Insufficient operands for {token.name}: {len(stack)} < {arity}")
                    raise StackUnderflowError(token.name, arity, len(stack))

                # 出栈后反转，恢复从左到右的参数顺序
                args = [stack.pop().value for _ in range(arity)][::-1]
                result = token.spec.evaluate(args)
                if not Operators.is_finite(result):
                    raise NonFiniteResultError(token.name)
                stack.append(Token.number(result))

            else:
                raise UnexpectedTokenError(token.lexeme)

        if len(stack) == 0:
            raise StackUnderflowError('result', 1, 0)
        if len(stack) > 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise LeftoverOperandsError(len(stack))
        return stack[0].value
