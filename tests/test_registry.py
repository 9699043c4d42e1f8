"""
Registry Tests
--------------
Registration, lookup, filtering, validation and export.
"""

import pytest
from pydantic import BaseModel

from toolrunner import ToolBuilder
from toolrunner.tools.builder import CommonSchemas


async def _noop(**kwargs) -> str:
    return "ok"


def _tool(name, description="A tool", args_schema=None, category=None, tags=None):
    return ToolBuilder.create_tool(
        name=name,
        description=description,
        func=_noop,
        args_schema=args_schema,
        category=category,
        tags=tags,
    )


class TestRegistration:
    """Tests for register / unregister."""

    def test_register_and_get(self, registry):
        tool = _tool("lookup", "Look things up")

        entry = registry.register(tool, category="data_retrieval", tags=["search"])

        assert registry.get("lookup") is entry
        assert entry.tool is tool
        assert entry.description == "Look things up"
        assert entry.category == "data_retrieval"
        assert entry.tags == ["search"]
        assert registry.has_tool("lookup")

    def test_get_unknown_returns_none(self, registry):
        assert registry.get("missing") is None
        assert not registry.has_tool("missing")

    def test_reregister_overwrites(self, registry):
        registry.register(_tool("dup", "first"), category="a")
        registry.register(_tool("dup", "second"), category="b")

        assert registry.get_tool_count() == 1
        assert registry.get("dup").description == "second"
        assert registry.list_by_category("a") == []
        assert [e.name for e in registry.list_by_category("b")] == ["dup"]

    def test_metadata_used_when_not_overridden(self, registry):
        tool = _tool("weather", category="weather", tags=["external"])

        entry = registry.register(tool)

        assert entry.category == "weather"
        assert entry.tags == ["external"]

    def test_unregister(self, registry):
        registry.register(_tool("temp"), tags=["x"])

        assert registry.unregister("temp") is True
        assert registry.unregister("temp") is False
        assert registry.get_tool_count() == 0
        assert registry.list_by_tag("x") == []

    def test_register_many_with_category(self, registry):
        registry.register_many([_tool("a"), _tool("b")], category="general")

        names = {e.name for e in registry.list_by_category("general")}
        assert names == {"a", "b"}

    def test_clear(self, registry):
        registry.register(_tool("a"), category="c", tags=["t"])
        registry.clear()

        assert registry.list_all() == []
        assert registry.list_by_category("c") == []
        assert registry.list_by_tag("t") == []


class TestQueries:
    """Tests for listing and search."""

    @pytest.fixture
    def populated(self, registry):
        registry.register(_tool("get_weather", "Get current Weather"), category="weather", tags=["external"])
        registry.register(_tool("calculator", "Do arithmetic"), category="computation", tags=["calculation"])
        registry.register(_tool("forecast", "Weekly weather outlook"), category="weather", tags=["external"])
        return registry

    def test_list_all_in_registration_order(self, populated):
        assert [e.name for e in populated.list_all()] == ["get_weather", "calculator", "forecast"]

    def test_list_by_category(self, populated):
        names = {e.name for e in populated.list_by_category("weather")}

        assert names == {"get_weather", "forecast"}

    def test_list_by_tag(self, populated):
        assert [e.name for e in populated.list_by_tag("calculation")] == ["calculator"]
        assert populated.list_by_tag("unknown") == []

    def test_search_is_case_insensitive(self, populated):
        names = {e.name for e in populated.search("WEATHER")}

        assert names == {"get_weather", "forecast"}

    def test_search_no_match(self, populated):
        assert populated.search("database") == []

    def test_statistics(self, populated):
        stats = populated.get_statistics()

        assert stats["total_tools"] == 3
        assert stats["by_category"] == {"weather": 2, "computation": 1}
        assert stats["total_tags"] == 2


class TestValidationAndExport:
    """Tests for argument validation, schema export and the catalog."""

    def test_validate_args_for_model_schema(self, registry):
        registry.register(_tool("calc", args_schema=CommonSchemas.Calculation))

        assert registry.validate_args("calc", {"expression": "1+1"}).valid

        result = registry.validate_args("calc", {})
        assert not result.valid
        assert any("expression" in e for e in result.errors)

    def test_validate_args_for_json_schema(self, registry):
        registry.register(_tool("lookup", args_schema={
            "type": "object",
            "properties": {"id": {"type": "integer"}},
            "required": ["id"],
        }))

        assert registry.validate_args("lookup", {"id": 3}).valid
        assert not registry.validate_args("lookup", {"id": "three"}).valid

    def test_validate_args_unknown_tool(self, registry):
        result = registry.validate_args("ghost", {})

        assert not result.valid
        assert result.errors == ["Tool not found in registry: ghost"]

    def test_get_schema(self, registry):
        class Args(BaseModel):
            limit: int

        registry.register(_tool("limited", args_schema=Args))

        schema = registry.get_schema("limited")
        assert schema["properties"]["limit"]["type"] == "integer"
        assert registry.get_schema("missing") is None

    def test_export_omits_implementation(self, registry):
        registry.register(_tool("a", "Alpha"), category="general", tags=["x"])

        definitions = registry.export_definitions()

        assert definitions == [{
            "name": "a",
            "description": "Alpha",
            "schema": None,
            "category": "general",
            "tags": ["x"],
        }]

    def test_tools_for_binding(self, registry):
        tool = _tool("a")
        registry.register(tool)

        assert registry.get_tools_for_binding() == [tool]

    def test_catalog(self, registry):
        registry.register(_tool("calc", "Do math", args_schema=CommonSchemas.Calculation),
                          category="computation", tags=["calculation"])
        registry.register(_tool("misc", "Something else"))

        catalog = registry.create_catalog()

        assert catalog.startswith("# Tool Catalog")
        assert "## computation" in catalog
        assert "## Uncategorized" in catalog
        assert "### calc" in catalog
        assert "**Description:** Do math" in catalog
        assert "**Tags:** calculation" in catalog
        assert "```json" in catalog
        assert '"expression"' in catalog
