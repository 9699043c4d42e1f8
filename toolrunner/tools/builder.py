# Tool factory
"""Factory helpers for building tools with schema validation and context access"""
from typing import Any, Awaitable, Callable, Dict, List, Literal, Optional, Union
import json
import logging

import httpx
from pydantic import BaseModel, Field

from toolrunner.config import COMMON_TAGS, ERROR_MESSAGES
from toolrunner.models import (
    ContextRequiredError,
    StoreRequiredError,
    ToolCategory,
    ToolConfig,
    ToolValidationError,
)
from toolrunner.safety.validators import ArgsSchema
from toolrunner.tools.base import FunctionTool, JsonSchemaTool, call_with_config
from toolrunner.tools.calculator import evaluate

logger = logging.getLogger(__name__)


class CommonSchemas:
    """Reusable argument schemas"""

    class Search(BaseModel):
        query: str = Field(description="Search query")
        limit: Optional[int] = Field(default=None, description="Result limit")

    class Weather(BaseModel):
        city: str = Field(description="City name")
        units: Optional[Literal["celsius", "fahrenheit"]] = None

    class FileOperation(BaseModel):
        path: str = Field(description="File path")

    class Calculation(BaseModel):
        expression: str = Field(description="Mathematical expression")

    class ApiCall(BaseModel):
        params: Optional[Dict[str, Any]] = None
        body: Optional[Any] = None

    class UserInfo(BaseModel):
        user_id: str = Field(description="User identifier")

    class DatabaseQuery(BaseModel):
        sql: str = Field(description="SQL query to execute")


class ToolBuilder:
    """Factory for creating tools"""

    @staticmethod
    def create_tool(
        name: str,
        description: str,
        func: Callable[..., Any],
        args_schema: ArgsSchema = None,
        category: Optional[str] = None,
        tags: Optional[List[str]] = None,
    ) -> FunctionTool:
        """
        Create a basic tool

        A dict ``args_schema`` is treated as JSON schema, a pydantic model
        class as a model schema.
        """
        if isinstance(args_schema, dict):
            return JsonSchemaTool(
                name=name,
                func=func,
                parameters=args_schema,
                description=description,
                category=category,
                tags=tags,
            )
        return FunctionTool(
            name=name,
            func=func,
            description=description,
            args_schema=args_schema,
            category=category,
            tags=tags,
        )

    @classmethod
    def create_tools(cls, definitions: List[Dict[str, Any]]) -> List[FunctionTool]:
        return [cls.create_tool(**definition) for definition in definitions]

    @classmethod
    def create_context_tool(
        cls,
        name: str,
        description: str,
        func: Callable[..., Any],
        args_schema: ArgsSchema = None,
        requires_context: bool = False,
        **kwargs,
    ) -> FunctionTool:
        """Create a tool that receives ``config`` and may insist on ``config.context``"""

        async def wrapped(config: Optional[Any] = None, **args):
            if requires_context and ToolConfig.coerce(config).context is None:
                raise ContextRequiredError(
                    f"Tool {name} requires context but none was provided",
                    tool_name=name,
                    error_code="CONTEXT_REQUIRED",
                )
            return await call_with_config(func, args, config)

        return cls.create_tool(name, description, wrapped, args_schema, **kwargs)

    @classmethod
    def create_memory_tool(
        cls,
        name: str,
        description: str,
        func: Callable[..., Any],
        args_schema: ArgsSchema = None,
        requires_store: bool = False,
        **kwargs,
    ) -> FunctionTool:
        """Create a tool that may insist on ``config.store``"""

        async def wrapped(config: Optional[Any] = None, **args):
            if requires_store and ToolConfig.coerce(config).store is None:
                raise StoreRequiredError(
                    f"Tool {name} requires store but none was provided",
                    tool_name=name,
                    error_code="STORE_REQUIRED",
                )
            return await call_with_config(func, args, config)

        return cls.create_tool(name, description, wrapped, args_schema, **kwargs)

    @classmethod
    def create_streaming_tool(
        cls,
        name: str,
        description: str,
        func: Callable[..., Any],
        args_schema: ArgsSchema = None,
        **kwargs,
    ) -> FunctionTool:
        """
        Create a tool that reports progress through ``config.stream_writer``

        When the caller supplies no writer, progress goes to the debug log.
        """

        async def wrapped(config: Optional[Any] = None, **args):
            tool_config = ToolConfig.coerce(config)
            if tool_config.stream_writer is None:
                tool_config = tool_config.model_copy(
                    update={"stream_writer": lambda message: logger.debug(f"[{name}] {message}")}
                )
            return await call_with_config(func, args, tool_config)

        return cls.create_tool(name, description, wrapped, args_schema, **kwargs)

    @classmethod
    def create_validated_tool(
        cls,
        name: str,
        description: str,
        func: Callable[..., Any],
        args_schema: ArgsSchema = None,
        validator: Optional[Callable[[Dict[str, Any]], Union[bool, str]]] = None,
        **kwargs,
    ) -> FunctionTool:
        """
        Create a tool with an extra validation step

        ``validator`` returns True to accept, or an error string / False to reject.
        """

        async def wrapped(config: Optional[Any] = None, **args):
            if validator is not None:
                verdict = validator(args)
                if verdict is not True:
                    message = verdict if isinstance(verdict, str) else ERROR_MESSAGES["VALIDATION_FAILED"]
                    raise ToolValidationError(message, tool_name=name, tool_args=args)
            return await call_with_config(func, args, config)

        return cls.create_tool(name, description, wrapped, args_schema, **kwargs)

    @classmethod
    def create_search_tool(
        cls,
        search_function: Callable[[str, int], Awaitable[List[Any]]],
    ) -> FunctionTool:
        async def search(query: str, limit: Optional[int] = None) -> str:
            results = await search_function(query, limit or 10)
            return json.dumps(results)

        return cls.create_tool(
            name="search_database",
            description="Search the database for records matching the query.",
            func=search,
            args_schema=CommonSchemas.Search,
            category=ToolCategory.DATA_RETRIEVAL.value,
            tags=[COMMON_TAGS["SEARCH"], COMMON_TAGS["DATA"]],
        )

    @classmethod
    def create_weather_tool(
        cls,
        get_weather: Callable[[str], Awaitable[str]],
    ) -> FunctionTool:
        async def weather(city: str, units: Optional[str] = None) -> str:
            return await get_weather(city)

        return cls.create_tool(
            name="get_weather",
            description="Get current weather for a specified city.",
            func=weather,
            args_schema=CommonSchemas.Weather,
            category=ToolCategory.WEATHER.value,
            tags=[COMMON_TAGS["WEATHER"], COMMON_TAGS["EXTERNAL"]],
        )

    @classmethod
    def create_calculator_tool(cls) -> FunctionTool:
        def calculate(expression: str) -> str:
            try:
                return f"{expression} = {evaluate(expression)}"
            except (ValueError, ZeroDivisionError, OverflowError) as e:
                return f"Error evaluating expression: {e}"

        return cls.create_tool(
            name="calculator",
            description="Perform mathematical calculations. Supports +, -, *, /, and parentheses.",
            func=calculate,
            args_schema=CommonSchemas.Calculation,
            category=ToolCategory.COMPUTATION.value,
            tags=[COMMON_TAGS["CALCULATION"]],
        )

    @classmethod
    def create_file_read_tool(
        cls,
        read_func: Callable[[str], Awaitable[str]],
    ) -> FunctionTool:
        async def read_file(path: str) -> str:
            try:
                return await read_func(path)
            except Exception as e:
                logger.warning(f"Failed to read {path}: {e}")
                return f"Error reading file: {e}"

        return cls.create_tool(
            name="read_file",
            description="Read contents of a file from the filesystem.",
            func=read_file,
            args_schema=CommonSchemas.FileOperation,
            category=ToolCategory.FILE_OPERATIONS.value,
            tags=[COMMON_TAGS["FILE"]],
        )

    @classmethod
    def create_api_tool(
        cls,
        api_name: str,
        endpoint: str,
        method: Literal["GET", "POST"] = "GET",
        timeout_seconds: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> FunctionTool:
        """
        Create a tool that calls an HTTP endpoint

        Query params come from ``params``; ``body`` is sent as JSON on POST.
        Failures are returned as text rather than raised.
        """

        async def call_api(params: Optional[Dict[str, Any]] = None, body: Optional[Any] = None) -> str:
            try:
                async with httpx.AsyncClient(transport=transport, timeout=timeout_seconds) as client:
                    request_kwargs: Dict[str, Any] = {
                        "params": {k: str(v) for k, v in (params or {}).items()},
                    }
                    if method == "POST" and body is not None:
                        request_kwargs["json"] = body
                    response = await client.request(method, endpoint, **request_kwargs)
                    response.raise_for_status()
                    return json.dumps(response.json())
            except (httpx.HTTPError, ValueError) as e:
                logger.error(f"API call to {api_name} failed: {e}")
                return f"API call failed: {e}"

        return cls.create_tool(
            name=f"call_{api_name}_api",
            description=f"Call the {api_name} API endpoint.",
            func=call_api,
            args_schema=CommonSchemas.ApiCall,
            category=ToolCategory.API_CALLS.value,
            tags=[COMMON_TAGS["API"], COMMON_TAGS["EXTERNAL"], COMMON_TAGS["ASYNC"]],
        )

    @classmethod
    def create_database_tool(
        cls,
        query_func: Callable[[str], Awaitable[List[Any]]],
    ) -> FunctionTool:
        async def query_database(sql: str) -> str:
            try:
                return json.dumps(await query_func(sql))
            except Exception as e:
                logger.error(f"Database query failed: {e}")
                return f"Database error: {e}"

        return cls.create_tool(
            name="query_database",
            description="Execute a SQL query against the database.",
            func=query_database,
            args_schema=CommonSchemas.DatabaseQuery,
            category=ToolCategory.DATABASE.value,
            tags=[COMMON_TAGS["DATABASE"]],
        )


def create_tool_with_defaults(
    name: str,
    func: Callable[..., Any],
    args_schema: ArgsSchema = None,
    description: Optional[str] = None,
) -> FunctionTool:
    """Create a tool, falling back to a generic description"""
    return ToolBuilder.create_tool(
        name=name,
        description=description or "A custom tool",
        func=func,
        args_schema=args_schema,
    )
