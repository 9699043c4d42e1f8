"""In-process tool execution: registry, executor, batching and statistics"""
from toolrunner.core import (
    ToolRegistry,
    ToolExecutor,
    ToolService,
    StatisticsAggregator,
    ResultFormatter,
)
from toolrunner.models import (
    ExecutionOptions,
    ExecutionResult,
    ExecutionStatistics,
    RegisteredTool,
    ToolCall,
    ToolConfig,
    ToolContext,
    ToolInvocation,
    ToolStatus,
    ToolError,
)
from toolrunner.safety import ValidationResult
from toolrunner.tools import (
    BaseTool,
    FunctionTool,
    JsonSchemaTool,
    ToolBuilder,
    CommonSchemas,
    create_tool_with_defaults,
)

__version__ = "0.1.0"

__all__ = [
    "ToolRegistry",
    "ToolExecutor",
    "ToolService",
    "StatisticsAggregator",
    "ResultFormatter",
    "ExecutionOptions",
    "ExecutionResult",
    "ExecutionStatistics",
    "RegisteredTool",
    "ToolCall",
    "ToolConfig",
    "ToolContext",
    "ToolInvocation",
    "ToolStatus",
    "ToolError",
    "ValidationResult",
    "BaseTool",
    "FunctionTool",
    "JsonSchemaTool",
    "ToolBuilder",
    "CommonSchemas",
    "create_tool_with_defaults",
]
