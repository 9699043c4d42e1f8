# ToolCall, ToolMetadata, RegisteredTool
"""Tool-related models"""
from typing import Dict, Any, Optional, List, Union
from pydantic import BaseModel, ConfigDict, Field
from enum import Enum
import time


class ToolCategory(str, Enum):
    """Tool categories"""
    DATA_RETRIEVAL = "data_retrieval"
    COMPUTATION = "computation"
    FILE_OPERATIONS = "file_operations"
    API_CALLS = "api_calls"
    DATABASE = "database"
    WEATHER = "weather"
    USER_INFO = "user_info"
    GENERAL = "general"


def _generate_call_id() -> str:
    return f"call_{int(time.time() * 1000)}"


class ToolCall(BaseModel):
    """A single tool invocation requested by a model"""
    id: str = Field(default_factory=_generate_call_id)
    name: str
    args: Dict[str, Any] = Field(default_factory=dict)


class ToolMetadata(BaseModel):
    """Classification metadata attached at registration"""
    category: Optional[str] = None
    tags: List[str] = Field(default_factory=list)


class RegisteredTool(BaseModel):
    """Registry entry for a tool"""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    tool: Any
    name: str
    description: str = ""
    parameter_schema: Optional[Dict[str, Any]] = None
    category: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

    def to_definition(self) -> Dict[str, Any]:
        """Export without the implementation object"""
        return {
            "name": self.name,
            "description": self.description,
            "schema": self.parameter_schema,
            "category": self.category,
            "tags": list(self.tags),
        }


class ToolInvocation(BaseModel):
    """One item of a batch: the tool, its args and an optional config"""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    tool: Any
    args: Dict[str, Any] = Field(default_factory=dict)
    config: Optional[Any] = None

    @classmethod
    def coerce(cls, item: Union["ToolInvocation", tuple, Dict[str, Any]]) -> "ToolInvocation":
        """Accept an invocation, a (tool, args[, config]) tuple, or a dict"""
        if isinstance(item, cls):
            return item
        if isinstance(item, tuple):
            return cls(**dict(zip(("tool", "args", "config"), item)))
        if isinstance(item, dict):
            return cls(**item)
        raise TypeError(f"Cannot build a tool invocation from {type(item).__name__}")
