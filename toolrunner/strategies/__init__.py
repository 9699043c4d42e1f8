# Execution strategies
"""Execution strategies"""
from .sequential import SequentialStrategy
from .parallel import ParallelStrategy

__all__ = [
    "SequentialStrategy",
    "ParallelStrategy",
]
