"""Loading of tools from entry points."""

from collections.abc import Sequence
from importlib.metadata import entry_points
from typing import Any

from dotnet_build_test.tools.base import ToolManifest

ENTRY_POINT_GROUP = "dotnet_build_test.tools"


class ToolNotFoundError(Exception):
    """Raised when a tool is not found."""


def load_tool_manifest(name: str) -> ToolManifest[Any]:
    """Load a tool manifest by name.

    Args:
        name: The tool name as registered in pyproject.toml
              (e.g., "build_structured", "run_tests")

    Returns:
        The tool manifest instance

    Raises:
        ToolNotFoundError: If no tool with the given name is found

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == name:
            manifest: ToolManifest[Any] = entry.load()
            return manifest

    available = sorted(e.name for e in entries)
    raise ToolNotFoundError(f"Unknown tool: {name}. Available tools: {available}")


def list_tool_manifests() -> Sequence[ToolManifest[Any]]:
    """Load all registered tool manifests, sorted by name."""
    entries = sorted(entry_points(group=ENTRY_POINT_GROUP), key=lambda e: e.name)
    return [entry.load() for entry in entries]
