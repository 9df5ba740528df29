"""core/token_system.py"""
import math
from collections import namedtuple
from enum import Enum

from core.operators import Operators


class TokenKind(Enum):
    NUMBER = "number"  # 数字字面量
    VARIABLE = "variable"  # 命名常数
    OPERATOR = "operator"  # 二元中缀操作符
    FUNCTION = "function"  # 函数名
    OPEN_PAREN = "open_paren"
    CLOSE_PAREN = "close_paren"
    INVALID = "invalid"


class Token(namedtuple('Token', ['value', 'kind'])):
    """Token: 原始文本 + 类型。value可带一个前导'-'表示一元取负"""

    __slots__ = ()

    def __repr__(self):
        return f"Token({self.value!r}, {self.kind.name})"


class OperatorExpr:
    """二元操作符描述：计算函数、优先级、结合性"""

    __slots__ = ('symbol', 'apply', 'precedence', 'left_associative')

    def __init__(self, symbol, apply, precedence, left_associative=True):
        self.symbol = symbol
        self.apply = apply
        self.precedence = precedence
        self.left_associative = left_associative


# 分隔字符：操作符、括号、空格、逗号
SPECIAL = frozenset(['+', '-', '*', '/', '(', ')', ' ', ',', '^', '%'])

# 命名常数
VARIABLES = {
    'pi': math.pi,
    'e': math.e,
    'rc': 1729.0,
}

# 操作符定义字典
OPERATORS = {
    '+': OperatorExpr('+', Operators.add, 2),
    '-': OperatorExpr('-', Operators.sub, 2),
    '*': OperatorExpr('*', Operators.mul, 3),
    '/': OperatorExpr('/', Operators.div, 3),
    '%': OperatorExpr('%', Operators.mod, 3),
    '^': OperatorExpr('^', Operators.pow, 4, left_associative=False),
}

UNARY_FUNCTIONS = {
    'sin': Operators.sin,
    'cos': Operators.cos,
    'sqrt': Operators.sqrt,
}

BINARY_FUNCTIONS = {
    'max': Operators.max,
}


def strip_negation(value):
    """去掉一个前导'-'，返回 (名称, 是否取负)"""
    if len(value) > 1 and value[0] == '-':
        return value[1:], True
    return value, False


def is_special(char):
    return char in SPECIAL


def is_operator(token):
    return token in OPERATORS


def is_unary_function(token):
    return token in UNARY_FUNCTIONS


def is_binary_function(token):
    return token in BINARY_FUNCTIONS


def is_function(token):
    name, _ = strip_negation(token)
    return is_binary_function(name) or is_unary_function(name)


def is_variable(token):
    name, _ = strip_negation(token)
    return name in VARIABLES


def is_number(token):
    """
    完整解析为有限浮点数才算数字。
    拒绝部分解析、空白/下划线（float()本身会接受）以及inf/nan。
    """
    if not token or any(c.isspace() or c == '_' for c in token):
        return False
    try:
        number = float(token)
    except ValueError:
        return False
    return math.isfinite(number)


def classify(token):
    """按优先级判断Token类型：函数 > 数字 > 常数 > 操作符 > 括号"""
    if is_function(token):
        return TokenKind.FUNCTION

    if is_number(token):
        return TokenKind.NUMBER

    if is_variable(token):
        return TokenKind.VARIABLE

    if is_operator(token):
        return TokenKind.OPERATOR

    if token == '(':
        return TokenKind.OPEN_PAREN
    if token == ')':
        return TokenKind.CLOSE_PAREN

    return TokenKind.INVALID
