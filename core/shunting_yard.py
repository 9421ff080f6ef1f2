"""中缀Token序列 -> 后缀(RPN)Token序列，shunting-yard 算法"""
import logging

from core.errors import MissingLeftBracketError, MismatchedBracketsError, UnexpectedTokenError
from core.token_system import TokenType

logger = logging.getLogger(__name__)


def format_postfix(tokens):
    """后缀序列的文本形式，Token之间以空格分隔"""
    return ' '.join(str(token) for token in tokens)


class ShuntingYardConverter:
    """把中缀Token序列转换为后缀序列"""

    @staticmethod
    def to_postfix(tokens):
        """
        Args:
            tokens: Lexer 输出的Token序列
        Returns:
            后缀Token序列（不含括号和分隔符）
        """
        output = []
        stack = []  # 操作符/函数/左括号的暂存栈

        for token in tokens:
            if token.type == TokenType.NUMBER:
                output.append(token)

            elif token.type == TokenType.FUNCTION:
                # 函数只在对应的右括号处出栈
                stack.append(token)

            elif token.type == TokenType.SEPARATOR:
                # 弹出直到栈顶为左括号（左括号保留）
                while stack and stack[-1].type != TokenType.LEFT_BRACKET:
                    output.append(stack.pop())
                if not stack:
                    raise MissingLeftBracketError()

            elif token.type == TokenType.OPERATOR:
                while (stack and stack[-1].type == TokenType.OPERATOR
                       and token.spec.pops_before(stack[-1].spec)):
                    output.append(stack.pop())
                stack.append(token)

            elif token.type == TokenType.LEFT_BRACKET:
                stack.append(token)

            elif token.type == TokenType.RIGHT_BRACKET:
                left_bracket_found = False
                while stack:
                    top = stack.pop()
                    if top.type == TokenType.LEFT_BRACKET:
                        left_bracket_found = True
                        break
                    output.append(top)
                if not left_bracket_found:
                    raise MissingLeftBracketError()
                # 括号前是函数：参数已全部输出，接着输出函数本身
                if stack and stack[-1].type == TokenType.FUNCTION:
                    output.append(stack.pop())

            else:
                raise UnexpectedTokenError(token.lexeme)

        while stack:
            top = stack.pop()
            if top.type in (TokenType.LEFT_BRACKET, TokenType.RIGHT_BRACKET):
                raise MismatchedBracketsError()
            output.append(top)

        logger.debug(f"Postfix: {format_postfix(output)}")
        return output
