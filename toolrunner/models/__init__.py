# Execution data models
"""Execution models"""
from .status import ToolStatus
from .errors import (
    ToolError,
    ToolValidationError,
    ToolNotFoundError,
    ToolTimeoutError,
    ContextRequiredError,
    StoreRequiredError,
)
from .tool import ToolCall, ToolMetadata, ToolCategory, RegisteredTool, ToolInvocation
from .context import ToolContext, ToolConfig
from .execution import (
    ExecutionResult,
    ExecutionOptions,
    ExecutionStatistics,
    ToolStats,
)

__all__ = [
    # Status
    "ToolStatus",
    # Errors
    "ToolError",
    "ToolValidationError",
    "ToolNotFoundError",
    "ToolTimeoutError",
    "ContextRequiredError",
    "StoreRequiredError",
    # Tool
    "ToolCall",
    "ToolMetadata",
    "ToolCategory",
    "RegisteredTool",
    "ToolInvocation",
    # Context
    "ToolContext",
    "ToolConfig",
    # Execution
    "ExecutionResult",
    "ExecutionOptions",
    "ExecutionStatistics",
    "ToolStats",
]
