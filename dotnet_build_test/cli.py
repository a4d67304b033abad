"""CLI entry point for structured dotnet build and test results."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, TextIO

from dotnet_build_test.config import DotnetConfig
from dotnet_build_test.models.diagnostic import BuildParseResult
from dotnet_build_test.models.outcome import TestParseResult
from dotnet_build_test.parsers.build_output import parse_build_output
from dotnet_build_test.parsers.test_output import parse_test_output
from dotnet_build_test.serialization import format_build_result, format_test_result
from dotnet_build_test.tools.dispatch import call_tool
from dotnet_build_test.tools.loading import list_tool_manifests

STATUS_SYMBOLS = {
    True: "✅",
    False: "❌",
}


def log_build_summary(log: logging.Logger, result: BuildParseResult) -> None:
    """Log a formatted summary of build diagnostics."""
    log.info(
        "%s Build: exit code %d, %d error(s), %d warning(s)",
        STATUS_SYMBOLS[result.success],
        result.exit_code,
        len(result.errors),
        len(result.warnings),
    )
    for diagnostic in result.errors:
        log.info(
            "  %s(%d): %s %s",
            diagnostic.file,
            diagnostic.line,
            diagnostic.code or "error",
            diagnostic.message,
        )


def log_test_summary(log: logging.Logger, result: TestParseResult) -> None:
    """Log a formatted summary of test counts and failed tests."""
    log.info(
        "%s Tests: %d total, %d passed, %d failed, %d skipped",
        STATUS_SYMBOLS[result.success],
        result.total,
        result.passed,
        result.failed,
        result.skipped,
    )
    for outcome in result.failed_tests:
        log.info("  Failed: %s", outcome.name)
        if outcome.message:
            log.info("    Message: %s", outcome.message)


def read_log(path: str, stdin: TextIO | None = None) -> str:
    """Read a saved log from a file, or from stdin for "-"."""
    if path == "-":
        return (stdin or sys.stdin).read()
    return Path(path).read_text(encoding="utf-8", errors="replace")


def parse_build_log(path: str) -> int:
    """Parse a saved build log, print the result and return exit code."""
    log = logging.getLogger("dotnet_build_test")

    result = parse_build_output(read_log(path))
    log_build_summary(log, result)
    print(json.dumps(format_build_result(result), indent=2))

    return 0 if result.success else 1


def parse_test_log(path: str) -> int:
    """Parse a saved test log, print the result and return exit code."""
    log = logging.getLogger("dotnet_build_test")

    result = parse_test_output(read_log(path))
    log_test_summary(log, result)
    print(json.dumps(format_test_result(result), indent=2))

    return 0 if result.success else 1


async def run(tool_name: str, arguments_json: str, config_json: str) -> int:
    """Call a tool, print its response and return exit code."""
    log = logging.getLogger("dotnet_build_test")

    config = DotnetConfig(**json.loads(config_json))
    arguments: dict[str, Any] = json.loads(arguments_json)

    log.info("Calling tool: %s", tool_name)
    response = await call_tool(tool_name, arguments, config)

    if response.is_error:
        log.error("%s", response.text)
    else:
        log.info("Tool %s finished (success=%s)", tool_name, response.success)

    print(response.text)
    return 0 if response.success else 1


def list_tools() -> int:
    """Print the registered tools and return exit code."""
    tools = [
        {"name": manifest.name, "description": manifest.description}
        for manifest in list_tool_manifests()
    ]
    print(json.dumps(tools, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        description="Structured results for dotnet build and dotnet test"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List available tools")

    call_parser = subparsers.add_parser("call", help="Run a tool")
    call_parser.add_argument(
        "tool",
        help="Tool name (build_structured, run_tests)",
    )
    call_parser.add_argument(
        "--arguments",
        default="{}",
        help='JSON arguments for the tool (e.g., \'{"solution_path": "."}\')',
    )
    call_parser.add_argument(
        "--config",
        default="{}",
        help="JSON configuration (dotnet_path, test_logger, max_raw_chars, timeout)",
    )

    for command, what in (("parse-build", "build"), ("parse-test", "test")):
        parse_parser = subparsers.add_parser(
            command, help=f"Parse a saved dotnet {what} log"
        )
        parse_parser.add_argument(
            "file",
            nargs="?",
            default="-",
            help="Log file to parse (default: read stdin)",
        )

    return parser


def main() -> None:
    """CLI entry point."""
    args = build_parser().parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    match args.command:
        case "list":
            exit_code = list_tools()
        case "call":
            exit_code = asyncio.run(run(args.tool, args.arguments, args.config))
        case "parse-build":
            exit_code = parse_build_log(args.file)
        case _:
            exit_code = parse_test_log(args.file)

    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
