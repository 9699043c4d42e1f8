# Execute tools sequentially
"""Sequential execution strategy"""
from typing import TYPE_CHECKING, List, Optional, Sequence
import logging

from toolrunner.models import ExecutionOptions, ExecutionResult, ToolInvocation

if TYPE_CHECKING:
    from toolrunner.core.executor import ToolExecutor

logger = logging.getLogger(__name__)


class SequentialStrategy:
    """Execute tools one after another"""

    def __init__(self, executor: "ToolExecutor"):
        self.executor = executor

    async def execute(
        self,
        invocations: Sequence[ToolInvocation],
        options: Optional[ExecutionOptions] = None,
    ) -> List[ExecutionResult]:
        """
        Execute tools sequentially

        Args:
            invocations: Tools to run, in order
            options: ``stop_on_error`` halts after the first failure;
                ``on_progress`` receives a notice for every failure

        Returns:
            List of tool results gathered so far
        """
        options = options or ExecutionOptions()
        results: List[ExecutionResult] = []

        for i, item in enumerate(invocations):
            logger.debug(
                f"Executing tool {i + 1}/{len(invocations)}: "
                f"{getattr(item.tool, 'name', 'unknown_tool')}"
            )

            result = await self.executor.execute_tool(item.tool, item.args, item.config, options)
            results.append(result)

            if result.success:
                continue

            logger.warning(f"Tool {result.tool_name} failed: {result.error}")
            if options.on_progress is not None:
                try:
                    options.on_progress(f"Tool {result.tool_name} failed: {result.error}")
                except Exception:
                    logger.exception("Progress callback raised")

            if options.stop_on_error:
                logger.info("Stopping execution due to error")
                break

        return results
