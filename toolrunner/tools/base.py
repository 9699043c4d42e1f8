# Base tool interface
"""Tool interface and its function-backed variants"""
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional
import asyncio
import inspect
import logging

from pydantic import BaseModel

from toolrunner.config import ERROR_MESSAGES
from toolrunner.models import ToolMetadata, ToolValidationError
from toolrunner.safety.validators import (
    ArgsSchema,
    ArgumentValidator,
    ValidationResult,
    json_schema_for,
)

logger = logging.getLogger(__name__)

_validator = ArgumentValidator()


class BaseTool(ABC):
    """
    Base class for every tool the executor can run

    Subclasses implement ``_run``; ``invoke`` validates the arguments against
    ``args_schema`` first and raises ToolValidationError on bad input.
    """

    def __init__(
        self,
        name: str,
        description: str = "",
        args_schema: ArgsSchema = None,
        category: Optional[str] = None,
        tags: Optional[List[str]] = None,
    ):
        self.name = name
        self.description = description
        self.args_schema = args_schema
        self.category = category
        self.tags = list(tags or [])

    @abstractmethod
    async def _run(self, args: Dict[str, Any], config: Optional[Any] = None) -> Any:
        """Run the tool with already-validated arguments"""
        pass

    async def invoke(self, args: Optional[Dict[str, Any]] = None, config: Optional[Any] = None) -> Any:
        """
        Validate and run the tool

        Args:
            args: Tool arguments
            config: Optional ToolConfig passed through to the implementation

        Returns:
            Whatever the implementation returns
        """
        parsed = self.parse(args if args is not None else {})
        return await self._run(parsed, config)

    def validate(self, args: Any) -> ValidationResult:
        return _validator.validate(self.args_schema, args)

    def parse(self, args: Any) -> Dict[str, Any]:
        """Validate arguments and return them with schema defaults applied"""
        result = self.validate(args)
        if not result.valid:
            raise ToolValidationError(
                message=f"{ERROR_MESSAGES['INVALID_ARGS']}: {'; '.join(result.errors or [])}",
                errors=result.errors,
                tool_name=self.name,
                tool_args=args if isinstance(args, dict) else None,
            )

        if isinstance(self.args_schema, type) and issubclass(self.args_schema, BaseModel):
            return self.args_schema.model_validate(args).model_dump()
        return dict(args)

    def get_parameter_schema(self) -> Optional[Dict[str, Any]]:
        return json_schema_for(self.args_schema)

    def get_metadata(self) -> ToolMetadata:
        return ToolMetadata(category=self.category, tags=self.tags)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


async def call_function(func: Callable[..., Any], kwargs: Dict[str, Any]) -> Any:
    """Await a coroutine function, or run a sync one in a worker thread"""
    if inspect.iscoroutinefunction(func):
        return await func(**kwargs)

    result = await asyncio.to_thread(func, **kwargs)
    if inspect.isawaitable(result):
        return await result
    return result


def _accepts_config(func: Callable) -> bool:
    try:
        parameters = inspect.signature(func).parameters
    except (TypeError, ValueError):
        return False
    return "config" in parameters or any(
        p.kind == inspect.Parameter.VAR_KEYWORD for p in parameters.values()
    )


async def call_with_config(func: Callable[..., Any], args: Dict[str, Any], config: Optional[Any]) -> Any:
    """Call ``func`` with ``args`` as keywords, adding ``config=`` if it takes one"""
    kwargs = dict(args)
    if _accepts_config(func):
        kwargs["config"] = config
    return await call_function(func, kwargs)


class FunctionTool(BaseTool):
    """
    Tool backed by a plain function whose arguments are described by a
    pydantic model

    The function is called with the validated arguments as keywords, plus
    ``config=`` when its signature accepts it. Synchronous functions run in a
    worker thread so they don't block the event loop.
    """

    def __init__(
        self,
        name: str,
        func: Callable[..., Any],
        description: str = "",
        args_schema: ArgsSchema = None,
        category: Optional[str] = None,
        tags: Optional[List[str]] = None,
    ):
        super().__init__(
            name=name,
            description=description,
            args_schema=args_schema,
            category=category,
            tags=tags,
        )
        self.func = func
        self._pass_config = _accepts_config(func)

    async def _run(self, args: Dict[str, Any], config: Optional[Any] = None) -> Any:
        kwargs = dict(args)
        if self._pass_config:
            kwargs["config"] = config
        return await call_function(self.func, kwargs)


class JsonSchemaTool(FunctionTool):
    """Function tool whose arguments are described by a raw JSON schema"""

    def __init__(
        self,
        name: str,
        func: Callable[..., Any],
        parameters: Dict[str, Any],
        description: str = "",
        category: Optional[str] = None,
        tags: Optional[List[str]] = None,
    ):
        if not isinstance(parameters, dict):
            raise TypeError("parameters must be a JSON schema dict")
        super().__init__(
            name=name,
            func=func,
            description=description,
            args_schema=parameters,
            category=category,
            tags=tags,
        )
