"""主程序入口 - 命令行计算器"""
import argparse
import logging
import sys

from config.config import CLI_CONFIG, DISPLAY_CONFIG, LOGGING_CONFIG, validate_config
from core import evaluate, InvalidExpressionError
from utils import format_result

logger = logging.getLogger(__name__)


def calculate_line(expression):
    """求值一行表达式，返回 (显示文本, 是否成功)"""
    try:
        result = evaluate(expression)
    except InvalidExpressionError:
        return DISPLAY_CONFIG["error_text"], False
    return format_result(result), True


def run_interactive(stream=None, out=None):
    """逐行读取表达式直到 EOF 或退出命令"""
    stream = stream or sys.stdin
    out = out or sys.stdout
    show_prompt = stream.isatty()

    while True:
        if show_prompt:
            out.write(CLI_CONFIG["prompt"])
            out.flush()
        line = stream.readline()
        if not line:
            break
        line = line.strip()
        if not line:
            continue
        if line.lower() in CLI_CONFIG["exit_commands"]:
            break
        text, _ = calculate_line(line)
        print(text, file=out)
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Infix arithmetic calculator (+, -, ×, ÷)")
    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate, e.g. '2+3×4'. Reads stdin line by line when omitted"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: %(default)s)"
    )
    args = parser.parse_args(argv)

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG["format"]
    )
    validate_config()

    if not args.expressions:
        logger.info("Starting interactive mode")
        return run_interactive()

    failures = 0
    for expression in args.expressions:
        text, ok = calculate_line(expression)
        if not ok:
            failures += 1
        print(text)

    if failures:
        logger.info(f"{failures} of {len(args.expressions)} expressions failed")
        return 1
    return 0


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
