"""Tools exposing the parsers over real dotnet invocations."""

from dotnet_build_test.tools.build_structured import build_structured_manifest
from dotnet_build_test.tools.dispatch import ToolResponse, call_tool
from dotnet_build_test.tools.run_tests import run_tests_manifest

__all__ = [
    "ToolResponse",
    "build_structured_manifest",
    "call_tool",
    "run_tests_manifest",
]
