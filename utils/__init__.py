"""工具模块"""
from .formatting import format_rpn, format_result

__all__ = ['format_rpn', 'format_result']
