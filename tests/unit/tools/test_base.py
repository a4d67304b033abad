"""Tests for tool manifests and argument validation."""

from typing import Any

import pytest

from dotnet_build_test.config import DotnetConfig
from dotnet_build_test.tools.base import (
    InvalidArgumentsError,
    SolutionArguments,
    ToolManifest,
)


async def _handler(
    arguments: SolutionArguments, config: DotnetConfig
) -> dict[str, Any]:
    return {"success": True, "solution_path": arguments.solution_path}


@pytest.fixture
def manifest() -> ToolManifest[SolutionArguments]:
    """Create a manifest with a trivial handler."""
    return ToolManifest(
        name="example",
        description="Example tool",
        arguments_cls=SolutionArguments,
        handler=_handler,
    )


def test_parse_arguments_returns_model(
    manifest: ToolManifest[SolutionArguments],
) -> None:
    """Validates arguments into the arguments model."""
    parsed = manifest.parse_arguments({"solution_path": "/src/App.sln"})

    assert parsed == SolutionArguments(solution_path="/src/App.sln")


@pytest.mark.parametrize(
    "arguments",
    [
        {},
        {"solution_path": None},
        {"solution_path": 42},
        {"solution_path": ""},
        {"solution_path": "   "},
    ],
)
def test_parse_arguments_rejects_missing_path(
    manifest: ToolManifest[SolutionArguments], arguments: dict[str, Any]
) -> None:
    """Rejects a missing, non-string or blank solution_path."""
    with pytest.raises(InvalidArgumentsError) as exc_info:
        manifest.parse_arguments(arguments)

    assert str(exc_info.value) == "solution_path is required."


async def test_handler_receives_parsed_arguments(
    manifest: ToolManifest[SolutionArguments],
) -> None:
    """The handler is called with the validated arguments."""
    parsed = manifest.parse_arguments({"solution_path": "App.sln"})

    result = await manifest.handler(parsed, DotnetConfig())

    assert result == {"success": True, "solution_path": "App.sln"}


def test_config_defaults() -> None:
    """Uses dotnet from PATH with the detailed console logger."""
    config = DotnetConfig()

    assert config.dotnet_path == "dotnet"
    assert config.test_logger == "console;verbosity=detailed"
    assert config.max_raw_chars == 4000
    assert config.timeout is None
