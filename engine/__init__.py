"""引擎模块 - 表达式求值入口"""
from .evaluator import ExpressionEngine, evaluate

__all__ = ['ExpressionEngine', 'evaluate']
