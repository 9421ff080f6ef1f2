from config.config import LEXER_CONFIG, OUTPUT_CONFIG, validate_config


def test_validate_config():
    validate_config()


def test_defaults():
    assert LEXER_CONFIG["bracket_source"] == "{}[]"
    assert OUTPUT_CONFIG["result_key"] == "result"
