# Timeout handling
"""Per-attempt timeout enforcement"""
import asyncio
from typing import Any, Awaitable, Optional

from toolrunner.models import ToolTimeoutError


class TimeoutHandler:
    """Races an awaitable against a timer"""

    async def execute_with_timeout(
        self,
        awaitable: Awaitable[Any],
        timeout_ms: Optional[float],
        tool_name: Optional[str] = None,
    ) -> Any:
        """
        Await with a timeout

        Args:
            awaitable: Tool invocation to wait for
            timeout_ms: Timeout in milliseconds, None waits indefinitely
            tool_name: Tool name for error reporting

        Returns:
            Result of the awaitable

        Raises:
            ToolTimeoutError if the timer fires first. The invocation is
            cancelled, which only stops coroutines that reach an await;
            work running in a thread keeps going.
        """
        if timeout_ms is None:
            return await awaitable

        task = asyncio.ensure_future(awaitable)

        try:
            done, _ = await asyncio.wait({task}, timeout=timeout_ms / 1000)
        except asyncio.CancelledError:
            task.cancel()
            raise

        if task not in done:
            task.cancel()
            raise ToolTimeoutError(
                message=f"Execution timed out after {timeout_ms:g}ms",
                tool_name=tool_name,
                timeout_ms=timeout_ms,
            )

        return task.result()
