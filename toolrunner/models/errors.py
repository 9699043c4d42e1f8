# ToolError hierarchy
"""Error types raised inside the tool execution path"""
from typing import Optional, Dict, Any, List


class ToolError(Exception):
    """Base exception for tool execution errors"""

    def __init__(
        self,
        message: str,
        tool_name: Optional[str] = None,
        tool_args: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.tool_name = tool_name
        self.tool_args = tool_args
        self.error_code = error_code


class ToolValidationError(ToolError):
    """Arguments failed schema validation"""

    def __init__(self, message: str, errors: Optional[List[str]] = None, **kwargs):
        kwargs.setdefault("error_code", "INVALID_ARGS")
        super().__init__(message, **kwargs)
        self.errors = errors or [message]


class ToolNotFoundError(ToolError):
    """Tool name is missing or not registered"""
    pass


class ToolTimeoutError(ToolError):
    """Attempt exceeded its timeout"""

    def __init__(self, message: str, timeout_ms: Optional[float] = None, **kwargs):
        kwargs.setdefault("error_code", "TIMEOUT")
        super().__init__(message, **kwargs)
        self.timeout_ms = timeout_ms


class ContextRequiredError(ToolError):
    """Tool needs config.context and none was given"""
    pass


class StoreRequiredError(ToolError):
    """Tool needs config.store and none was given"""
    pass
