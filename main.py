"""主程序入口 - 读取表达式，输出 {"result": ...} JSON"""
import argparse
import json
import logging
import sys

from config.config import LOGGING_CONFIG, OUTPUT_CONFIG, validate_config
from core import ExpressionError
from engine import ExpressionEngine

logger = logging.getLogger(__name__)


def run(expression, rpn=False, engine=None):
    """
    Returns:
        (payload, ok): payload 为 {"result": 数值或错误信息}，ok 表示是否成功
    """
    engine = engine or ExpressionEngine()
    key = OUTPUT_CONFIG["result_key"]
    if not rpn:
        payload = engine.compute(expression)
        return payload, not isinstance(payload[key], str)
    try:
        return {key: engine.to_postfix(expression)}, True
    except ExpressionError as e:
        logger.error(f"Expression '{expression}' failed: {e}")
        return {key: str(e)}, False


def main(args):
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG["format"]
    )
    validate_config()

    if args.expression:
        expression = ' '.join(args.expression)
    else:
        expression = sys.stdin.read()

    payload, ok = run(expression, rpn=args.rpn)
    print(json.dumps(payload))
    return 0 if ok else 1


def build_parser():
    parser = argparse.ArgumentParser(description="Evaluate an arithmetic expression")
    parser.add_argument("expression", nargs="*",
                        help="Expression to evaluate; read from stdin when omitted")
    parser.add_argument("--rpn", action="store_true",
                        help="Print the postfix (RPN) form instead of the value")
    parser.add_argument("--log-level", default=LOGGING_CONFIG["level"],
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level")
    return parser


def cli():
    sys.exit(main(build_parser().parse_args()))


if __name__ == "__main__":
    cli()
