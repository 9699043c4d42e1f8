# Core execution components
"""Core execution components"""
from .registry import ToolRegistry
from .executor import ToolExecutor
from .service import ToolService
from .result import StatisticsAggregator, ResultFormatter

__all__ = [
    "ToolRegistry",
    "ToolExecutor",
    "ToolService",
    "StatisticsAggregator",
    "ResultFormatter",
]
