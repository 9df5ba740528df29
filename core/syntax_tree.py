"""core/syntax_tree.py - 由RPN序列构建语法树"""
from core.errors import IncompleteExpression
from core.token_system import TokenKind, is_binary_function, strip_negation


class Node:
    """
    语法树节点。每个节点独占自己的子节点，没有父指针。

    叶子（数字/常数）没有子节点；操作符和二元函数有left和right；
    一元函数只使用left，right为None。
    """

    __slots__ = ('token', 'left', 'right')

    def __init__(self, token, left=None, right=None):
        self.token = token
        self.left = left
        self.right = right

    def is_leaf(self):
        return self.left is None and self.right is None

    def children(self):
        return [child for child in (self.left, self.right) if child is not None]

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        # 显式栈逐对比较，深树不触发递归上限
        pairs = [(self, other)]
        while pairs:
            a, b = pairs.pop()
            if a is None or b is None:
                if a is not b:
                    return False
                continue
            if a.token != b.token:
                return False
            pairs.append((a.left, b.left))
            pairs.append((a.right, b.right))
        return True

    def __repr__(self):
        if self.is_leaf():
            return f"Node({self.token.value!r})"
        return f"Node({self.token.value!r}, children={len(self.children())})"


class SyntaxTree:
    """把一个RPN序列折叠成单根的树"""

    def __init__(self, rpn, expression=None):
        self.rpn = rpn
        self.expression = expression

    def _pop(self, stack, count, token):
        if len(stack) < count:
            raise IncompleteExpression(
                f"'{token.value}' needs {count} operand(s), found {len(stack)}", self.expression)
        # 先弹出的是右操作数
        popped = [stack.pop() for _ in range(count)]
        return popped[::-1]

    def build(self):
        """
        Returns:
            根节点
        Raises:
            IncompleteExpression: 操作数不足，或结束时栈中不是恰好一个节点
        """
        stack = []

        for token in self.rpn:
            if token.kind in (TokenKind.NUMBER, TokenKind.VARIABLE):
                stack.append(Node(token))

            elif token.kind == TokenKind.OPERATOR:
                left, right = self._pop(stack, 2, token)
                stack.append(Node(token, left, right))

            elif token.kind == TokenKind.FUNCTION:
                name, _ = strip_negation(token.value)
                if is_binary_function(name):
                    left, right = self._pop(stack, 2, token)
                    stack.append(Node(token, left, right))
                else:
                    (operand,) = self._pop(stack, 1, token)
                    stack.append(Node(token, operand))

        if len(stack) != 1:
            raise IncompleteExpression(
                f"expected a single root, found {len(stack)} value(s)", self.expression)
        return stack[0]


def build_syntax_tree(rpn, expression=None):
    return SyntaxTree(rpn, expression).build()
