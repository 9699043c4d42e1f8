# Tool kinds and factories
"""Tools"""
from .base import BaseTool, FunctionTool, JsonSchemaTool
from .builder import ToolBuilder, CommonSchemas, create_tool_with_defaults

__all__ = [
    "BaseTool",
    "FunctionTool",
    "JsonSchemaTool",
    "ToolBuilder",
    "CommonSchemas",
    "create_tool_with_defaults",
]
