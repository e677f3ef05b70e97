"""Solvers package for line balancing."""

from .base import Solver
from .greedy import GreedySolver
from .exact import ExactSolver
from .line_balancer import LineBalancer, balance_line

__all__ = ['Solver', 'GreedySolver', 'ExactSolver', 'LineBalancer', 'balance_line']
