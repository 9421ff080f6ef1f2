"""配置模块"""
from .config import LEXER_CONFIG, OUTPUT_CONFIG, LOGGING_CONFIG, validate_config

__all__ = ['LEXER_CONFIG', 'OUTPUT_CONFIG', 'LOGGING_CONFIG', 'validate_config']
