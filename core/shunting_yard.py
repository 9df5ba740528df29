"""core/shunting_yard.py - 调度场算法：中缀Token序列 -> RPN"""
import logging

from core.errors import MismatchedParenthesis
from core.token_system import TokenKind, OPERATORS

logger = logging.getLogger(__name__)


def _should_pop(top, token):
    """栈顶是否应在token入栈前先输出"""
    # 函数没有优先级，总是先于其后的操作符输出
    if top.kind == TokenKind.FUNCTION:
        return True
    if top.kind != TokenKind.OPERATOR:
        return False

    top_op = OPERATORS[top.value]
    token_op = OPERATORS[token.value]
    if top_op.precedence > token_op.precedence:
        return True
    return top_op.precedence == token_op.precedence and token_op.left_associative


def build_rpn(tokens, expression=None):
    """
    Args:
        tokens: 已分类的Token列表
        expression: 原始表达式，仅用于错误信息
    Returns:
        RPN顺序的Token列表
    """
    operator_stack = []
    output = []

    for token in tokens:
        if token.kind in (TokenKind.OPEN_PAREN, TokenKind.FUNCTION):
            operator_stack.append(token)

        elif token.kind in (TokenKind.NUMBER, TokenKind.VARIABLE):
            output.append(token)

        elif token.kind == TokenKind.OPERATOR:
            while operator_stack and operator_stack[-1].kind != TokenKind.OPEN_PAREN:
                if not _should_pop(operator_stack[-1], token):
                    break
                output.append(operator_stack.pop())
            operator_stack.append(token)

        elif token.kind == TokenKind.CLOSE_PAREN:
            while operator_stack and operator_stack[-1].kind != TokenKind.OPEN_PAREN:
                output.append(operator_stack.pop())
            if not operator_stack:
                raise MismatchedParenthesis(expression)
            operator_stack.pop()

    # 清空剩余的栈
    while operator_stack:
        top = operator_stack.pop()
        if top.kind == TokenKind.OPEN_PAREN:
            raise MismatchedParenthesis(expression)
        output.append(top)

    logger.debug(f"RPN: {' '.join(t.value for t in output)}")
    return output
