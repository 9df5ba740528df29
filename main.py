"""主程序入口 - 演示驱动：打印表达式及其求值结果"""
import argparse
import logging
import sys

import pandas as pd

from config.config import *
from batch.runner import evaluate_batch, summarize_results, save_results
from data.data_loader import load_expressions
from utils.formatting import format_result

logger = logging.getLogger(__name__)


def print_results(results, show_rpn=False, precision=OUTPUT_CONFIG['precision']):
    """逐行打印 evaluate_batch 的结果，全部成功返回True"""
    for row in results.itertuples(index=False):
        print(f"EXPRESSION: {row.expression}")
        if pd.isna(row.error):
            if show_rpn:
                print(f"RPN: {row.rpn}")
            print(f"= {format_result(row.result, precision)}")
        else:
            print(f"error: {row.message}")
        print(OUTPUT_CONFIG['separator'])
    return bool(results['error'].isna().all())


def run_repl(show_rpn=False, precision=OUTPUT_CONFIG['precision']):
    """交互模式：空行、quit 或 exit 退出"""
    while True:
        try:
            line = input("matheval> ")
        except EOFError:
            break

        if line.strip().lower() in ('', 'quit', 'exit'):
            break
        print_results(evaluate_batch([line]), show_rpn=show_rpn, precision=precision)


def main(args):
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG['format']
    )

    if args.repl:
        # 交互模式只读标准输入
        if args.expression or args.file:
            logger.error("--repl cannot be combined with --expression or --file")
            return 2
        run_repl(show_rpn=args.show_rpn, precision=args.precision)
        return 0

    expressions = list(args.expression or [])
    if args.file:
        expressions.extend(load_expressions(args.file))
    if not expressions:
        logger.info("No expressions given, running demo expressions")
        expressions = DEMO_EXPRESSIONS

    results = evaluate_batch(expressions)
    ok = print_results(results, show_rpn=args.show_rpn, precision=args.precision)

    if args.save_results:
        summarize_results(results)
        save_results(results, args.results_path)

    return 0 if ok else 1


def build_parser():
    parser = argparse.ArgumentParser(description="Arithmetic expression evaluator")

    parser.add_argument(
        "-e", "--expression",
        action="append",
        help="Expression to evaluate (repeatable)"
    )
    parser.add_argument(
        "--file",
        type=str,
        default=None,
        help="Path to a .csv (column 'expression') or text file with one expression per line"
    )
    parser.add_argument(
        "--repl",
        action="store_true",
        help="Read expressions interactively (not combinable with --expression or --file)"
    )
    parser.add_argument(
        "--show_rpn",
        action="store_true",
        help="Print the postfix (RPN) form of each expression"
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=OUTPUT_CONFIG['precision'],
        help="Significant digits when printing results"
    )
    parser.add_argument(
        "--save_results",
        action="store_true",
        help="Save the evaluation results to a CSV file"
    )
    parser.add_argument(
        "--results_path",
        type=str,
        default=OUTPUT_CONFIG['results_path'],
        help="Path to save the evaluation results"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    return parser


def cli():
    sys.exit(main(build_parser().parse_args()))


if __name__ == "__main__":
    cli()
