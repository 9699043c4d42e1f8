# Resilience & safety mechanisms
"""Safety and resilience mechanisms"""
from .retries import RetryPolicy
from .timeout import TimeoutHandler
from .validators import ArgumentValidator, ValidationResult, json_schema_for

__all__ = [
    "RetryPolicy",
    "TimeoutHandler",
    "ArgumentValidator",
    "ValidationResult",
    "json_schema_for",
]
