# Execute tools in parallel
"""Parallel execution strategy"""
from typing import TYPE_CHECKING, List, Optional, Sequence
import asyncio
import logging

from toolrunner.models import ExecutionOptions, ExecutionResult, ToolInvocation

if TYPE_CHECKING:
    from toolrunner.core.executor import ToolExecutor

logger = logging.getLogger(__name__)


class ParallelStrategy:
    """
    Execute tools concurrently

    Without ``max_parallel`` every invocation starts at once. With it, the
    invocations are split into consecutive chunks of that size and each chunk
    finishes entirely before the next one starts, so a slow item holds back
    the following chunk even when other slots are idle.
    """

    def __init__(self, executor: "ToolExecutor"):
        self.executor = executor

    async def execute(
        self,
        invocations: Sequence[ToolInvocation],
        options: Optional[ExecutionOptions] = None,
    ) -> List[ExecutionResult]:
        """
        Execute tools in parallel

        Returns:
            List of results in input order
        """
        options = options or ExecutionOptions()

        if options.max_parallel:
            results = await self._execute_chunked(invocations, options, options.max_parallel)
        else:
            logger.info(f"Executing {len(invocations)} tools in parallel")
            results = await self._execute_all(invocations, options)

        success_count = sum(1 for r in results if r.success)
        logger.info(
            f"Parallel execution complete: "
            f"{success_count}/{len(results)} succeeded"
        )
        return results

    async def _execute_all(
        self,
        invocations: Sequence[ToolInvocation],
        options: ExecutionOptions,
    ) -> List[ExecutionResult]:
        tasks = [
            self.executor.execute_tool(item.tool, item.args, item.config, options)
            for item in invocations
        ]
        return list(await asyncio.gather(*tasks))

    async def _execute_chunked(
        self,
        invocations: Sequence[ToolInvocation],
        options: ExecutionOptions,
        chunk_size: int,
    ) -> List[ExecutionResult]:
        results: List[ExecutionResult] = []
        total_chunks = (len(invocations) + chunk_size - 1) // chunk_size

        for start in range(0, len(invocations), chunk_size):
            chunk = invocations[start:start + chunk_size]
            logger.debug(
                f"Starting chunk {start // chunk_size + 1}/{total_chunks} "
                f"({len(chunk)} tools)"
            )
            results.extend(await self._execute_all(chunk, options))

        return results
