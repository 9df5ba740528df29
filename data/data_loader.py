"""表达式数据加载模块"""
import pandas as pd
import logging

logger = logging.getLogger(__name__)


def load_expressions(file_path, column='expression'):
    """
    从文件加载表达式列表。

    Parameters:
    - file_path: CSV文件（按列名读取）或文本文件（每行一个表达式）
    - column: CSV中表达式所在列, 默认为 'expression'

    Returns:
    - 表达式字符串列表
    """
    logger.info(f"Loading expressions from {file_path}")

    if str(file_path).endswith('.csv'):
        # 全部按字符串读取，避免 "2" 之类被解析成数字
        frame = pd.read_csv(file_path, dtype=str, keep_default_na=False)

        if column not in frame.columns:
            raise ValueError(f"Column '{column}' not found in {file_path}.")

        expressions = [expr for expr in frame[column].tolist() if expr.strip()]
    else:
        with open(file_path, 'r', encoding='utf-8') as f:
            lines = [line.rstrip('\n') for line in f]
        # 跳过空行和 # 注释
        expressions = [line for line in lines if line.strip() and not line.lstrip().startswith('#')]

    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions
