# ExecutionResult, ExecutionOptions, statistics
"""Execution result, options and statistics models"""
from typing import Any, Callable, Dict, Optional, Union
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .status import ToolStatus


class ExecutionResult(BaseModel):
    """Recorded outcome of one tool attempt"""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    success: bool
    result: Any = None
    error: Optional[str] = None
    execution_time_ms: float
    tool_name: str
    args: Any = None
    status: ToolStatus = ToolStatus.SUCCESS
    attempt: int = 1
    timestamp: datetime = Field(default_factory=datetime.utcnow)

    @model_validator(mode="after")
    def _check_outcome(self) -> "ExecutionResult":
        if self.success and self.error is not None:
            raise ValueError("successful result cannot carry an error")
        if not self.success and self.error is None:
            raise ValueError("failed result must carry an error")
        return self

    @classmethod
    def succeeded(
        cls,
        tool_name: str,
        args: Any,
        result: Any,
        execution_time_ms: float,
        attempt: int = 1,
    ) -> "ExecutionResult":
        return cls(
            success=True,
            result=result,
            execution_time_ms=execution_time_ms,
            tool_name=tool_name,
            args=args,
            attempt=attempt,
        )

    @classmethod
    def failed(
        cls,
        tool_name: str,
        args: Any,
        error: str,
        execution_time_ms: float,
        status: ToolStatus = ToolStatus.FAILED,
        attempt: int = 1,
    ) -> "ExecutionResult":
        return cls(
            success=False,
            error=error,
            execution_time_ms=execution_time_ms,
            tool_name=tool_name,
            args=args,
            status=status,
            attempt=attempt,
        )


class ExecutionOptions(BaseModel):
    """Options controlling timeout, retry and batching"""
    model_config = ConfigDict(extra="forbid", frozen=True)

    timeout_ms: Optional[float] = Field(default=None, gt=0)
    retries: int = Field(default=0, ge=0)
    retry_delay_ms: float = Field(default=0, ge=0)
    retry_backoff: float = Field(default=1.0, ge=1.0)
    max_parallel: Optional[int] = Field(default=None, ge=1)
    stop_on_error: bool = False
    on_progress: Optional[Callable[[str], Any]] = None

    @model_validator(mode="after")
    def _check_limits(self) -> "ExecutionOptions":
        from toolrunner.config import EXECUTION_LIMITS

        if self.retries > EXECUTION_LIMITS["max_retries"]:
            raise ValueError(f"retries must be at most {EXECUTION_LIMITS['max_retries']}")
        if self.max_parallel is not None and self.max_parallel > EXECUTION_LIMITS["max_parallel_tools"]:
            raise ValueError(f"max_parallel must be at most {EXECUTION_LIMITS['max_parallel_tools']}")
        if self.timeout_ms is not None and self.timeout_ms > EXECUTION_LIMITS["max_execution_time_ms"]:
            raise ValueError(
                f"timeout_ms must be at most {EXECUTION_LIMITS['max_execution_time_ms']}"
            )
        return self

    @classmethod
    def coerce(
        cls, options: Union["ExecutionOptions", Dict[str, Any], None]
    ) -> "ExecutionOptions":
        """Normalize None, a dict, or an instance into options"""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls(**options)

    @classmethod
    def recommended(cls, **overrides) -> "ExecutionOptions":
        """Options built from the package-wide execution defaults"""
        from toolrunner.config import EXECUTION_CONFIG

        values = {
            "timeout_ms": EXECUTION_CONFIG["default_timeout_ms"],
            "retries": EXECUTION_CONFIG["default_retries"],
            "retry_delay_ms": EXECUTION_CONFIG["retry_delay_ms"],
            "max_parallel": EXECUTION_CONFIG["max_concurrent_executions"],
        }
        values.update(overrides)
        return cls(**values)

    def retry_delay_for(self, retry_number: int) -> float:
        """Delay in ms before the given retry (1-based)"""
        return self.retry_delay_ms * (self.retry_backoff ** (retry_number - 1))


class ToolStats(BaseModel):
    """Per-tool statistics"""
    count: int = 0
    success_rate: float = 0.0
    average_time: float = 0.0


class ExecutionStatistics(BaseModel):
    """Statistics over the retained history"""
    total_executions: int = 0
    success_count: int = 0
    failure_count: int = 0
    average_execution_time: float = 0.0
    by_tool: Dict[str, ToolStats] = Field(default_factory=dict)
