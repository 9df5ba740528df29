"""batch/runner.py - 批量求值并汇总为DataFrame"""
import numpy as np
import pandas as pd
import logging

from core import EvalError, evaluate_tree, parse
from utils.formatting import format_rpn

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ['expression', 'rpn', 'result', 'error', 'message']


def evaluate_batch(expressions):
    """
    逐个求值表达式，单个失败不影响其余。

    Args:
        expressions: 表达式字符串列表
    Returns:
        DataFrame，列为 expression / rpn / result / error / message；
        失败行的 result 为 NaN，error 为异常类名
    """
    rows = []
    for expression in expressions:
        try:
            rpn, tree = parse(expression)
            rows.append({
                'expression': expression,
                'rpn': format_rpn(rpn),
                'result': evaluate_tree(tree),
                'error': None,
                'message': None,
            })
        except EvalError as e:
            logger.warning(f"Failed to evaluate '{expression}': {e}")
            rows.append({
                'expression': expression,
                'rpn': None,
                'result': np.nan,
                'error': type(e).__name__,
                'message': str(e),
            })

    results = pd.DataFrame(rows, columns=RESULT_COLUMNS)
    results['result'] = results['result'].astype(float)
    return results


def summarize_results(results):
    """统计成功/失败数量"""
    failed = int(results['error'].notna().sum())
    summary = {
        'total': len(results),
        'succeeded': len(results) - failed,
        'failed': failed,
    }
    logger.info(f"Evaluated {summary['total']} expressions: "
                f"{summary['succeeded']} succeeded, {summary['failed']} failed")
    return summary


def save_results(results, output_path):
    """保存结果到CSV"""
    logger.info(f"Saving results to {output_path}")
    results.to_csv(output_path, index=False)
