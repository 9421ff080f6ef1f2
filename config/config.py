"""配置文件"""

# 词法分析参数
LEXER_CONFIG = {
    "whitespace_pattern": r"\s+",  # 扫描前整体删除的空白
    "bracket_source": "{}[]",  # 三种括号统一为圆括号
    "bracket_target": "()()",
}

# 输出参数（兼容旧接口 {"result": ...}）
OUTPUT_CONFIG = {
    "result_key": "result",
}

# 日志参数
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert len(LEXER_CONFIG["bracket_source"]) == len(LEXER_CONFIG["bracket_target"]), \
        "括号映射两侧长度必须一致"
    assert set(LEXER_CONFIG["bracket_target"]) <= {"(", ")"}, "括号只能统一为圆括号"
    assert OUTPUT_CONFIG["result_key"], "result_key 不能为空"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
