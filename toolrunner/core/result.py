# Statistics and report formatting over execution results
"""Result aggregation and presentation"""
from typing import Any, Dict, List, Sequence
from collections import defaultdict
import json

from toolrunner.models import ExecutionResult, ExecutionStatistics, ToolStats


class StatisticsAggregator:
    """Derives global and per-tool statistics from a result sequence"""

    @staticmethod
    def aggregate(results: Sequence[ExecutionResult]) -> ExecutionStatistics:
        total = len(results)
        if total == 0:
            return ExecutionStatistics()

        success_count = sum(1 for r in results if r.success)

        grouped: Dict[str, List[ExecutionResult]] = defaultdict(list)
        for result in results:
            grouped[result.tool_name].append(result)

        by_tool = {
            tool_name: ToolStats(
                count=len(tool_results),
                success_rate=sum(1 for r in tool_results if r.success) / len(tool_results),
                average_time=sum(r.execution_time_ms for r in tool_results) / len(tool_results),
            )
            for tool_name, tool_results in grouped.items()
        }

        return ExecutionStatistics(
            total_executions=total,
            success_count=success_count,
            failure_count=total - success_count,
            average_execution_time=sum(r.execution_time_ms for r in results) / total,
            by_tool=by_tool,
        )


def _to_json(value: Any) -> str:
    return json.dumps(value, default=str, ensure_ascii=False)


class ResultFormatter:
    """Human-readable rendering of execution results"""

    @staticmethod
    def format_result(result: ExecutionResult) -> str:
        status = "✅ SUCCESS" if result.success else "❌ FAILED"
        lines = [
            f"{status} [{result.tool_name}] ({result.execution_time_ms:.0f}ms)",
            f"Args: {_to_json(result.args)}",
        ]
        if result.success:
            lines.append(f"Result: {_to_json(result.result)}")
        else:
            lines.append(f"Error: {result.error}")
        return "\n".join(lines)

    @classmethod
    def format_results(cls, results: Sequence[ExecutionResult]) -> str:
        return "\n\n".join(cls.format_result(r) for r in results)
