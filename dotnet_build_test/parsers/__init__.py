"""Parsers for dotnet build and test console output."""

from dotnet_build_test.parsers.build_output import parse_build_output
from dotnet_build_test.parsers.test_output import parse_test_output

__all__ = ["parse_build_output", "parse_test_output"]
