"""
Evaluation Module

This module provides position evaluation functions for the search. The key
design principle is that evaluators are SWAPPABLE: the search works with
any evaluator that implements the base interface.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - MaterialEvaluator: Red pieces minus Blue pieces

Data Flow:
    Board → evaluator.evaluate() → int
                                   Positive = Red advantage
                                   Negative = Blue advantage
"""

from ataxx_engine.evaluation.base import Evaluator, INFINITY
from ataxx_engine.evaluation.material import MaterialEvaluator

__all__ = ['Evaluator', 'MaterialEvaluator', 'INFINITY']
