# Tool executor
"""Tool executor with timeout, retry and execution history"""
from collections import deque
from typing import Any, Deque, Dict, Iterable, List, Optional, Union
import inspect
import logging
import time

from toolrunner.config import EXECUTION_CONFIG, format_execution_time
from toolrunner.core.result import ResultFormatter, StatisticsAggregator
from toolrunner.models import (
    ExecutionOptions,
    ExecutionResult,
    ExecutionStatistics,
    ToolInvocation,
    ToolStatus,
    ToolTimeoutError,
    ToolValidationError,
)
from toolrunner.safety import RetryPolicy, TimeoutHandler
from toolrunner.strategies import ParallelStrategy, SequentialStrategy

logger = logging.getLogger(__name__)

OptionsLike = Union[ExecutionOptions, Dict[str, Any], None]


def _error_message(error: BaseException) -> str:
    return str(error) or type(error).__name__


class ToolExecutor:
    """
    Executes tools and keeps a bounded history of every attempt

    Tool failures never escape as exceptions: each attempt becomes an
    ExecutionResult. Only malformed options raise, before the first attempt.
    """

    def __init__(
        self,
        max_history_size: int = EXECUTION_CONFIG["max_history_size"],
        timeout_handler: Optional[TimeoutHandler] = None,
    ):
        if max_history_size < 1:
            raise ValueError("max_history_size must be at least 1")

        self.max_history_size = max_history_size
        self.timeout_handler = timeout_handler or TimeoutHandler()
        self._history: Deque[ExecutionResult] = deque(maxlen=max_history_size)

        self._parallel = ParallelStrategy(self)
        self._sequential = SequentialStrategy(self)

    async def execute_tool(
        self,
        tool: Any,
        args: Optional[Dict[str, Any]] = None,
        config: Optional[Any] = None,
        options: OptionsLike = None,
    ) -> ExecutionResult:
        """
        Execute a tool with timeout and retries

        Every attempt is appended to history; only the last one is returned.

        Args:
            tool: Tool to execute
            args: Tool arguments
            config: Passed through to the tool unmodified
            options: ExecutionOptions or an equivalent dict

        Returns:
            ExecutionResult of the final attempt
        """
        options = ExecutionOptions.coerce(options)
        retry_policy = RetryPolicy(options)
        tool_name = getattr(tool, "name", None) or "unknown_tool"
        args = args if args is not None else {}

        result: Optional[ExecutionResult] = None
        for attempt in retry_policy.attempts():
            result = await self._attempt(tool, tool_name, args, config, options, attempt)
            self._add_to_history(result)

            if result.success:
                if attempt > 1:
                    logger.info(
                        f"Retry succeeded for {tool_name} "
                        f"on attempt {attempt}/{retry_policy.max_attempts}"
                    )
                return result

            if retry_policy.has_more(attempt):
                await retry_policy.wait_before_retry(attempt, tool_name, result.error)
            elif options.retries:
                logger.error(f"All retry attempts exhausted for {tool_name}: {result.error}")

        return result

    async def _attempt(
        self,
        tool: Any,
        tool_name: str,
        args: Dict[str, Any],
        config: Optional[Any],
        options: ExecutionOptions,
        attempt: int,
    ) -> ExecutionResult:
        start_time = time.monotonic()
        logger.debug(f"Invoking {tool_name} (attempt {attempt})")

        try:
            value = await self.timeout_handler.execute_with_timeout(
                self._invoke(tool, args, config),
                options.timeout_ms,
                tool_name=tool_name,
            )
        except Exception as e:
            execution_time = (time.monotonic() - start_time) * 1000

            status = ToolStatus.FAILED
            if isinstance(e, ToolTimeoutError):
                status = ToolStatus.TIMEOUT
            elif isinstance(e, ToolValidationError):
                status = ToolStatus.INVALID_ARGS

            logger.warning(f"Tool {tool_name} attempt {attempt} failed ({status.value}): {e}")

            return ExecutionResult.failed(
                tool_name=tool_name,
                args=args,
                error=_error_message(e),
                execution_time_ms=execution_time,
                status=status,
                attempt=attempt,
            )

        execution_time = (time.monotonic() - start_time) * 1000
        logger.debug(f"Tool {tool_name} completed in {format_execution_time(execution_time)}")

        return ExecutionResult.succeeded(
            tool_name=tool_name,
            args=args,
            result=value,
            execution_time_ms=execution_time,
            attempt=attempt,
        )

    @staticmethod
    async def _invoke(tool: Any, args: Dict[str, Any], config: Optional[Any]) -> Any:
        outcome = tool.invoke(args, config)
        if inspect.isawaitable(outcome):
            return await outcome
        return outcome

    async def execute_tools(
        self,
        tools: Iterable[Any],
        options: OptionsLike = None,
    ) -> List[ExecutionResult]:
        """
        Execute several tools concurrently

        Items are ToolInvocation objects, (tool, args[, config]) tuples or
        dicts. ``max_parallel`` switches to chunked execution.

        Returns:
            Results in input order
        """
        options = ExecutionOptions.coerce(options)
        invocations = [ToolInvocation.coerce(item) for item in tools]
        return await self._parallel.execute(invocations, options)

    async def execute_tools_sequential(
        self,
        tools: Iterable[Any],
        options: OptionsLike = None,
    ) -> List[ExecutionResult]:
        """Execute tools one at a time in input order"""
        options = ExecutionOptions.coerce(options)
        invocations = [ToolInvocation.coerce(item) for item in tools]
        return await self._sequential.execute(invocations, options)

    def _add_to_history(self, result: ExecutionResult):
        # deque(maxlen) drops the oldest entry once full
        self._history.append(result)

    def get_history(self) -> List[ExecutionResult]:
        return list(self._history)

    def get_tool_history(self, tool_name: str) -> List[ExecutionResult]:
        return [r for r in self._history if r.tool_name == tool_name]

    def get_statistics(self) -> ExecutionStatistics:
        """Statistics over the retained history only"""
        return StatisticsAggregator.aggregate(list(self._history))

    def clear_history(self):
        self._history.clear()

    def format_result(self, result: ExecutionResult) -> str:
        return ResultFormatter.format_result(result)

    def format_results(self, results: List[ExecutionResult]) -> str:
        return ResultFormatter.format_results(results)
