import logging
from typing import Dict, List, Union

from config.config import OUTPUT_CONFIG
from core import (
    Lexer, ShuntingYardConverter, RPNEvaluator, Token,
    ExpressionError, format_postfix
)

logger = logging.getLogger(__name__)


class ExpressionEngine:
    """中缀表达式求值：规范化 -> Lexer -> ShuntingYardConverter -> RPNEvaluator

    各阶段的工作栈都在单次调用内创建，同一个实例可以在多个线程间共享。
    """

    def __init__(self, lexer: Lexer = None):
        self.lexer = lexer or Lexer()
        self.converter = ShuntingYardConverter
        self.rpn_evaluator = RPNEvaluator

    def _postfix(self, raw: str) -> List[Token]:
        tokens = self.lexer.tokenize(raw)
        return self.converter.to_postfix(tokens)

    def evaluate(self, raw: str) -> float:
        """
        Args:
            raw: 原始表达式文本
        Returns:
            表达式的值
        Raises:
            ExpressionError: 任一阶段失败，str(e) 为失败原因
        """
        try:
            postfix = self._postfix(raw)
            result = self.rpn_evaluator.evaluate(postfix)
        except ExpressionError as e:
            logger.debug(f"Error evaluating expression '{raw}': {e.kind.value}: {e}")
            raise
        logger.debug(f"'{raw}' = {result}")
        return result

    def to_postfix(self, raw: str) -> str:
        """表达式的后缀(RPN)形式，不求值"""
        return format_postfix(self._postfix(raw))

    def compute(self, raw: str) -> Dict[str, Union[float, str]]:
        """兼容旧接口：成功和失败共用同一个 result 字段"""
        key = OUTPUT_CONFIG["result_key"]
        try:
            return {key: self.evaluate(raw)}
        except ExpressionError as e:
            logger.error(f"Expression '{raw}' failed: {e}")
            return {key: str(e)}


_default_engine = ExpressionEngine()


def evaluate(raw: str) -> float:
    return _default_engine.evaluate(raw)
