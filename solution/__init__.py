"""Solution package for line balancing."""

from .partition import Partition
from .ordering import validate_level_order, validate_sequence_order
from .statistics import variance, std_dev, balance_rate
from .trace import SearchTrace

__all__ = [
    'Partition', 'SearchTrace',
    'validate_level_order', 'validate_sequence_order',
    'variance', 'std_dev', 'balance_rate',
]
