"""Evaluation package for line balancing."""

from .base import Evaluator
from .balance import BalanceEvaluator

__all__ = ['Evaluator', 'BalanceEvaluator']
