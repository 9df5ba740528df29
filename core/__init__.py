"""核心模块 - Token系统、分词、调度场、语法树和求值"""
from .errors import EvalError, UnrecognizedToken, MismatchedParenthesis, IncompleteExpression
from .token_system import (
    TokenKind, Token, OperatorExpr, OPERATORS, VARIABLES,
    UNARY_FUNCTIONS, BINARY_FUNCTIONS, SPECIAL, classify
)
from .operators import Operators
from .tokenizer import Tokenizer, tokenize
from .shunting_yard import build_rpn
from .syntax_tree import Node, SyntaxTree, build_syntax_tree
from .evaluator import evaluate, evaluate_tree, parse

__all__ = [
    'EvalError', 'UnrecognizedToken', 'MismatchedParenthesis', 'IncompleteExpression',
    'TokenKind', 'Token', 'OperatorExpr', 'OPERATORS', 'VARIABLES',
    'UNARY_FUNCTIONS', 'BINARY_FUNCTIONS', 'SPECIAL', 'classify',
    'Operators', 'Tokenizer', 'tokenize', 'build_rpn',
    'Node', 'SyntaxTree', 'build_syntax_tree',
    'evaluate', 'evaluate_tree', 'parse'
]
