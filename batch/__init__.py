"""批量求值模块"""
from .runner import evaluate_batch, summarize_results, save_results

__all__ = ['evaluate_batch', 'summarize_results', 'save_results']
