# retry helpers
"""Retry policy with optional multiplicative backoff"""
import asyncio
import logging
from typing import Iterator, Optional

from toolrunner.models import ExecutionOptions

logger = logging.getLogger(__name__)


class RetryPolicy:
    """Bounded retry schedule derived from execution options"""

    def __init__(self, options: ExecutionOptions):
        self.retries = options.retries
        self.options = options

    @property
    def max_attempts(self) -> int:
        return self.retries + 1

    def attempts(self) -> Iterator[int]:
        """Yield 1-based attempt numbers"""
        return iter(range(1, self.max_attempts + 1))

    def has_more(self, attempt: int) -> bool:
        return attempt < self.max_attempts

    async def wait_before_retry(
        self,
        attempt: int,
        tool_name: Optional[str] = None,
        error: Optional[str] = None,
    ):
        """
        Sleep before the attempt following ``attempt``

        Args:
            attempt: The attempt that just failed (1-based)
            tool_name: Tool name for logging
            error: Failure message for logging
        """
        delay_ms = self.options.retry_delay_for(attempt)
        logger.warning(
            f"Retry attempt {attempt}/{self.max_attempts} "
            f"for {tool_name or 'unknown'} failed: {error}. "
            f"Retrying in {delay_ms / 1000:.2f}s..."
        )
        if delay_ms > 0:
            await asyncio.sleep(delay_ms / 1000)
