# Tool discovery and registration
"""Tool registry for discovery and management"""
from typing import Any, Dict, List, Optional, Set
import json
import logging
from collections import defaultdict

from toolrunner.config import ERROR_MESSAGES
from toolrunner.models import RegisteredTool
from toolrunner.safety.validators import ArgumentValidator, ValidationResult
from toolrunner.tools.base import BaseTool

logger = logging.getLogger(__name__)

UNCATEGORIZED = "Uncategorized"


class ToolRegistry:
    """Central registry for all tools"""

    def __init__(self):
        self._tools: Dict[str, RegisteredTool] = {}
        self._categories: Dict[str, Set[str]] = defaultdict(set)
        self._tags: Dict[str, Set[str]] = defaultdict(set)
        self._validator = ArgumentValidator()

    def register(
        self,
        tool: BaseTool,
        category: Optional[str] = None,
        tags: Optional[List[str]] = None,
    ) -> RegisteredTool:
        """
        Register a tool

        An existing tool with the same name is replaced. Category and tags
        default to the tool's own metadata.

        Args:
            tool: Tool instance to register
            category: Category override
            tags: Tags override

        Returns:
            The stored entry
        """
        if tool.name in self._tools:
            logger.warning(f"Tool '{tool.name}' already registered, overwriting")
            self._remove(tool.name)

        metadata = tool.get_metadata() if hasattr(tool, "get_metadata") else None
        if category is None and metadata is not None:
            category = metadata.category
        if tags is None and metadata is not None:
            tags = metadata.tags

        entry = RegisteredTool(
            tool=tool,
            name=tool.name,
            description=getattr(tool, "description", "") or "",
            parameter_schema=self._schema_of(tool),
            category=category,
            tags=list(tags or []),
        )
        self._tools[entry.name] = entry

        if entry.category is not None:
            self._categories[entry.category].add(entry.name)
        for tag in entry.tags:
            self._tags[tag].add(entry.name)

        logger.info(f"Registered tool: {entry.name} ({entry.category or UNCATEGORIZED})")
        return entry

    def register_many(self, tools: List[BaseTool], category: Optional[str] = None):
        """Register multiple tools, optionally under one category"""
        for tool in tools:
            self.register(tool, category=category)

    def unregister(self, tool_name: str) -> bool:
        """
        Unregister a tool

        Returns:
            True if the tool existed and was removed
        """
        if tool_name not in self._tools:
            logger.warning(f"Tool '{tool_name}' not registered")
            return False

        self._remove(tool_name)
        logger.info(f"Unregistered tool: {tool_name}")
        return True

    def _remove(self, tool_name: str):
        entry = self._tools.pop(tool_name)
        if entry.category is not None:
            self._categories[entry.category].discard(tool_name)
            if not self._categories[entry.category]:
                del self._categories[entry.category]
        for tag in entry.tags:
            self._tags[tag].discard(tool_name)
            if not self._tags[tag]:
                del self._tags[tag]

    def clear(self):
        self._tools.clear()
        self._categories.clear()
        self._tags.clear()

    def get(self, tool_name: str) -> Optional[RegisteredTool]:
        return self._tools.get(tool_name)

    def has_tool(self, tool_name: str) -> bool:
        return tool_name in self._tools

    def get_tool_count(self) -> int:
        return len(self._tools)

    def list_all(self) -> List[RegisteredTool]:
        return list(self._tools.values())

    def list_by_category(self, category: str) -> List[RegisteredTool]:
        return [self._tools[name] for name in self._categories.get(category, ())]

    def list_by_tag(self, tag: str) -> List[RegisteredTool]:
        return [self._tools[name] for name in self._tags.get(tag, ())]

    def search(self, query: str) -> List[RegisteredTool]:
        """Case-insensitive substring match on name or description"""
        query_lower = query.lower()
        return [
            entry for entry in self._tools.values()
            if query_lower in entry.name.lower()
            or query_lower in entry.description.lower()
        ]

    def validate_args(self, tool_name: str, args: Any) -> ValidationResult:
        """
        Validate arguments for a registered tool

        Unknown tools yield an invalid result rather than raising.
        """
        entry = self._tools.get(tool_name)
        if entry is None:
            return ValidationResult.invalid([f"{ERROR_MESSAGES['TOOL_NOT_FOUND']}: {tool_name}"])

        if hasattr(entry.tool, "validate"):
            return entry.tool.validate(args)
        return self._validator.validate(entry.parameter_schema, args)

    def get_schema(self, tool_name: str) -> Optional[Dict[str, Any]]:
        entry = self._tools.get(tool_name)
        return entry.parameter_schema if entry else None

    def get_tools_for_binding(self) -> List[BaseTool]:
        """Tool objects in a form a model can be bound to"""
        return [entry.tool for entry in self._tools.values()]

    def export_definitions(self) -> List[Dict[str, Any]]:
        return [entry.to_definition() for entry in self._tools.values()]

    def create_catalog(self) -> str:
        """Markdown catalog of tools grouped by category"""
        by_category: Dict[str, List[RegisteredTool]] = defaultdict(list)
        for entry in self._tools.values():
            by_category[entry.category or UNCATEGORIZED].append(entry)

        lines = ["# Tool Catalog", ""]
        for category, entries in by_category.items():
            lines += [f"## {category}", ""]
            for entry in entries:
                lines += [f"### {entry.name}", "", f"**Description:** {entry.description}", ""]
                if entry.tags:
                    lines += [f"**Tags:** {', '.join(entry.tags)}", ""]
                lines += [
                    "**Schema:**",
                    "```json",
                    json.dumps(entry.parameter_schema, indent=2, default=str),
                    "```",
                    "",
                ]
        return "\n".join(lines)

    def get_statistics(self) -> Dict[str, Any]:
        """Get registry statistics"""
        return {
            "total_tools": len(self._tools),
            "by_category": {
                category: len(names)
                for category, names in self._categories.items()
            },
            "total_tags": len(self._tags),
        }

    @staticmethod
    def _schema_of(tool: Any) -> Optional[Dict[str, Any]]:
        if hasattr(tool, "get_parameter_schema"):
            return tool.get_parameter_schema()
        return getattr(tool, "schema", None)
