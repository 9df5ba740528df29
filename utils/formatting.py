"""utils/formatting.py"""


def format_rpn(tokens):
    """RPN序列 -> 以空格分隔的字符串"""
    return ' '.join(token.value for token in tokens)


def format_result(value, precision=10):
    """按有效数字打印结果，整数值不带小数点"""
    return f"{value:.{precision}g}"
