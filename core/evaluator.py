"""语法树求值器 + 完整的求值入口"""
import logging

from core.token_system import (
    TokenKind, OPERATORS, VARIABLES, UNARY_FUNCTIONS, BINARY_FUNCTIONS, strip_negation
)
from core.tokenizer import Tokenizer
from core.shunting_yard import build_rpn
from core.syntax_tree import SyntaxTree

logger = logging.getLogger(__name__)


def _reduce(node, operands):
    """由子节点的值计算本节点的值，前导'-'只作用于本节点"""
    value, negative = strip_negation(node.token.value)
    kind = node.token.kind

    if kind == TokenKind.NUMBER:
        output = float(value)
    elif kind == TokenKind.VARIABLE:
        output = VARIABLES[value]
    elif kind == TokenKind.OPERATOR:
        output = OPERATORS[value].apply(*operands)
    elif kind == TokenKind.FUNCTION:
        if value in BINARY_FUNCTIONS:
            output = BINARY_FUNCTIONS[value](*operands)
        else:
            output = UNARY_FUNCTIONS[value](*operands)
    else:
        raise ValueError(f"Unexpected node kind: {kind}")

    return -output if negative else output


def evaluate_tree(root):
    """
    后序遍历求值（先左后右），用显式栈代替递归，树的深度不受递归上限限制。
    不修改树，可重复求值。
    """
    values = []
    pending = [(root, False)]

    while pending:
        node, children_done = pending.pop()

        if node.is_leaf() or children_done:
            arity = 0 if node.is_leaf() else (1 if node.right is None else 2)
            operands = values[len(values) - arity:]
            del values[len(values) - arity:]
            values.append(_reduce(node, operands))
            continue

        pending.append((node, True))
        # 右子节点先入栈，保证左子树先求值
        if node.right is not None:
            pending.append((node.right, False))
        pending.append((node.left, False))

    return values[0]


def parse(expression):
    """
    文本 -> Token -> RPN -> 语法树（输入先统一转小写）

    Returns:
        (rpn, tree)
    """
    tokens = Tokenizer(expression.lower(), expression).tokenize()
    rpn = build_rpn(tokens, expression)
    tree = SyntaxTree(rpn, expression).build()
    return rpn, tree


def evaluate(expression):
    """
    求值一个中缀表达式

    Args:
        expression: 表达式文本，大小写不敏感
    Returns:
        float结果
    Raises:
        UnrecognizedToken / MismatchedParenthesis / IncompleteExpression
    """
    _, tree = parse(expression)
    result = evaluate_tree(tree)
    logger.debug(f"{expression!r} = {result}")
    return result
