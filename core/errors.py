"""core/errors.py - 表达式求值的异常类型"""


class EvalError(Exception):
    """所有求值错误的基类"""

    def __init__(self, message, expression=None):
        super().__init__(message)
        self.expression = expression


class UnrecognizedToken(EvalError):
    """无法识别的Token（未知名称、错误数字、非法符号）"""

    def __init__(self, token, expression=None):
        super().__init__(f"Unrecognized token '{token}' in expression '{expression}'", expression)
        self.token = token


class MismatchedParenthesis(EvalError):
    """括号不匹配"""

    def __init__(self, expression=None):
        super().__init__(f"Mismatched parenthesis in expression '{expression}'", expression)


class IncompleteExpression(EvalError):
    """操作数不足或表达式不完整"""

    def __init__(self, detail, expression=None):
        super().__init__(f"Incomplete/invalid expression: {detail}", expression)
        self.detail = detail
