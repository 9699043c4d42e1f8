# ToolContext, ToolConfig
"""Contextual values handed to tools at invocation time"""
from typing import Any, Callable, Dict, Optional, Union
from pydantic import BaseModel, ConfigDict


class ToolContext(BaseModel):
    """Caller identity and arbitrary extra values"""
    model_config = ConfigDict(extra="allow")

    user_id: Optional[str] = None
    session_id: Optional[str] = None


class ToolConfig(BaseModel):
    """Optional bag passed through to a tool unmodified"""
    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)

    context: Optional[ToolContext] = None
    store: Optional[Any] = None
    stream_writer: Optional[Callable[[str], Any]] = None

    @classmethod
    def coerce(cls, config: Union["ToolConfig", Dict[str, Any], None]) -> "ToolConfig":
        if config is None:
            return cls()
        if isinstance(config, cls):
            return config
        return cls(**config)

    def get(self, key: str, default: Any = None) -> Any:
        """Read a declared or extra field"""
        value = getattr(self, key, None)
        if value is None and self.model_extra:
            value = self.model_extra.get(key)
        return default if value is None else value
