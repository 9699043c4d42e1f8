# Execution status enums
"""Execution status enum"""
from enum import Enum


class ToolStatus(str, Enum):
    """Outcome of a single tool attempt"""
    SUCCESS = "success"
    FAILED = "failed"
    TIMEOUT = "timeout"
    INVALID_ARGS = "invalid_args"
    NOT_FOUND = "not_found"
