"""core/tokenizer.py - 把表达式文本切分为带类型的Token序列"""
import logging

from core.errors import UnrecognizedToken
from core.token_system import Token, TokenKind, classify, is_special

logger = logging.getLogger(__name__)


class Tokenizer:
    """
    单次使用的分词器。每次求值新建一个实例，状态不跨调用共享。

    allow_negative: 当前位置的'-'是否作为一元负号并入下一个Token
    （表达式开头和'('之后为True，其余Token之后为False，逗号不改变它）
    """

    def __init__(self, source, expression=None):
        self.source = source
        # 原始（未转小写的）表达式，只用于错误信息
        self.expression = source if expression is None else expression
        self.allow_negative = True
        self._pos = 0

    def _scan_until_special(self, start):
        """返回从start开始第一个分隔字符的位置（或字符串末尾）"""
        stop = start
        while stop < len(self.source) and not is_special(self.source[stop]):
            stop += 1
        return stop

    def next_token(self):
        """取下一个原始Token字符串，输入耗尽时返回None"""
        source = self.source
        while self._pos < len(source) and source[self._pos] == ' ':
            self._pos += 1

        if self._pos >= len(source):
            return None

        start = self._pos
        char = source[start]

        # 一元负号：连同后续字符一起作为一个Token（-3, -pi, -sin）
        if char == '-' and self.allow_negative:
            self.allow_negative = False
            self._pos = self._scan_until_special(start + 1)
            return source[start:self._pos]

        if is_special(char):
            if char == '(':
                self.allow_negative = True
            elif char != ',':
                self.allow_negative = False
            self._pos += 1
            return char

        self._pos = self._scan_until_special(start)
        self.allow_negative = False
        return source[start:self._pos]

    def tokenize(self):
        """
        Returns:
            按出现顺序排列的Token列表（逗号被丢弃）
        Raises:
            UnrecognizedToken: 遇到无法分类的子串
        """
        tokens = []
        raw = self.next_token()
        while raw is not None:
            # 逗号只用于分隔函数参数
            if raw != ',':
                kind = classify(raw)
                if kind == TokenKind.INVALID:
                    raise UnrecognizedToken(raw, self.expression)
                tokens.append(Token(raw, kind))
            raw = self.next_token()

        logger.debug(f"Tokens: {tokens}")
        return tokens


def tokenize(expression):
    return Tokenizer(expression).tokenize()
