# Package-wide constants and small helpers
"""Configuration constants for tool execution"""
import random
import re
import string
import time
from typing import Dict, Optional

from toolrunner.models import ToolCategory


EXECUTION_CONFIG = {
    "default_timeout_ms": 30000,
    "default_retries": 2,
    "retry_delay_ms": 1000,
    "max_concurrent_executions": 5,
    "max_history_size": 100,
}

EXECUTION_LIMITS = {
    "max_execution_time_ms": 60000,
    "max_retries": 5,
    "max_parallel_tools": 10,
}

VALIDATION_RULES = {
    "max_name_length": 64,
    "max_description_length": 500,
    "max_parameters": 20,
    "reserved_names": ["system", "internal", "reserved", "admin"],
    "name_pattern": re.compile(r"^[a-z][a-z0-9_]*$"),
}

ERROR_MESSAGES = {
    "TOOL_NOT_FOUND": "Tool not found in registry",
    "INVALID_ARGS": "Invalid arguments provided to tool",
    "EXECUTION_TIMEOUT": "Tool execution timed out",
    "EXECUTION_FAILED": "Tool execution failed",
    "VALIDATION_FAILED": "Tool validation failed",
    "CONTEXT_REQUIRED": "Tool requires context but none was provided",
    "STORE_REQUIRED": "Tool requires store but none was provided",
    "INVALID_TOOL_NAME": "Invalid tool name format",
    "RESERVED_NAME": "Tool name is reserved",
    "NAME_TOO_LONG": "Tool name exceeds maximum length",
}

COMMON_TAGS = {
    "SEARCH": "search",
    "CALCULATION": "calculation",
    "DATA": "data",
    "API": "api",
    "FILE": "file",
    "DATABASE": "database",
    "WEATHER": "weather",
    "ASYNC": "async",
    "EXTERNAL": "external",
}

_CATEGORY_DISPLAY_NAMES = {
    ToolCategory.DATA_RETRIEVAL.value: "Data Retrieval",
    ToolCategory.COMPUTATION.value: "Computation",
    ToolCategory.FILE_OPERATIONS.value: "File Operations",
    ToolCategory.API_CALLS.value: "API Calls",
    ToolCategory.DATABASE.value: "Database",
    ToolCategory.WEATHER.value: "Weather",
    ToolCategory.USER_INFO.value: "User Information",
    ToolCategory.GENERAL.value: "General",
}


def validate_tool_name(name: str) -> Dict[str, Optional[str]]:
    """
    Check a tool name against the naming rules

    Returns:
        {"valid": bool, "error": message or None}
    """
    if len(name) > VALIDATION_RULES["max_name_length"]:
        return {"valid": False, "error": ERROR_MESSAGES["NAME_TOO_LONG"]}

    if name.lower() in VALIDATION_RULES["reserved_names"]:
        return {"valid": False, "error": ERROR_MESSAGES["RESERVED_NAME"]}

    if not VALIDATION_RULES["name_pattern"].match(name):
        return {"valid": False, "error": ERROR_MESSAGES["INVALID_TOOL_NAME"]}

    return {"valid": True, "error": None}


def validate_tool_description(description: str) -> Dict[str, Optional[str]]:
    """Check a description against the length limit"""
    limit = VALIDATION_RULES["max_description_length"]
    if len(description) > limit:
        return {
            "valid": False,
            "error": f"Description exceeds maximum length of {limit}",
        }
    return {"valid": True, "error": None}


def format_execution_time(ms: float) -> str:
    """Render a duration as ms, seconds, or minutes+seconds"""
    if ms < 1000:
        return f"{ms:.0f}ms"
    if ms < 60000:
        return f"{ms / 1000:.2f}s"
    minutes = int(ms // 60000)
    seconds = (ms % 60000) / 1000
    return f"{minutes}m {seconds:.0f}s"


def generate_tool_id() -> str:
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=9))
    return f"tool_{int(time.time() * 1000)}_{suffix}"


def get_category_display_name(category: str) -> str:
    return _CATEGORY_DISPLAY_NAMES.get(category, category)
