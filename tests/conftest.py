"""Shared fixtures for toolrunner tests"""
import asyncio

import pytest
from pydantic import BaseModel

from toolrunner import ToolBuilder, ToolExecutor, ToolRegistry, ToolService


class EchoArgs(BaseModel):
    text: str


class FlakyArgs(BaseModel):
    fail: bool = False


@pytest.fixture
def executor():
    return ToolExecutor()


@pytest.fixture
def registry():
    return ToolRegistry()


@pytest.fixture
def service():
    return ToolService()


@pytest.fixture
def echo_tool():
    async def echo(text: str) -> str:
        return text

    return ToolBuilder.create_tool(
        name="echo",
        description="Returns its text argument unchanged",
        func=echo,
        args_schema=EchoArgs,
    )


@pytest.fixture
def failing_tool():
    async def boom() -> str:
        raise RuntimeError("Tool failed")

    return ToolBuilder.create_tool(name="failing_tool", description="Always fails", func=boom)


@pytest.fixture
def flaky_tool():
    """Succeeds unless called with fail=True"""
    async def maybe_fail(fail: bool) -> str:
        if fail:
            raise ValueError("asked to fail")
        return "ok"

    return ToolBuilder.create_tool(
        name="flaky",
        description="Fails on request",
        func=maybe_fail,
        args_schema=FlakyArgs,
    )


def make_sleep_tool(name: str, seconds: float, result: str = "done"):
    async def sleeper() -> str:
        await asyncio.sleep(seconds)
        return result

    return ToolBuilder.create_tool(name=name, description=f"Sleeps {seconds}s", func=sleeper)


@pytest.fixture
def sleep_tool():
    return make_sleep_tool
