"""Convert parse results into JSON-ready dictionaries."""

from typing import Any

from dotnet_build_test.models.diagnostic import BuildParseResult, Diagnostic
from dotnet_build_test.models.outcome import TestOutcome, TestParseResult

TRUNCATION_SUFFIX = "\n... (output truncated)"


def format_diagnostic(diagnostic: Diagnostic) -> dict[str, Any]:
    """Format a diagnostic, keeping absent fields as None."""
    return {
        "file": diagnostic.file,
        "line": diagnostic.line,
        "column": diagnostic.column,
        "code": diagnostic.code,
        "message": diagnostic.message,
    }


def format_build_result(
    result: BuildParseResult,
    raw_output: str | None = None,
    max_raw_chars: int = 4000,
) -> dict[str, Any]:
    """Format a build parse result, optionally with truncated raw output."""
    output: dict[str, Any] = {
        "success": result.success,
        "exit_code": result.exit_code,
        "errors": [format_diagnostic(d) for d in result.errors],
        "warnings": [format_diagnostic(d) for d in result.warnings],
    }
    if raw_output is not None:
        output["raw_output"] = truncate_output(raw_output, max_raw_chars)
    return output


def format_test_outcome(outcome: TestOutcome) -> dict[str, Any]:
    """Format a failed test, keeping absent fields as None."""
    return {
        "name": outcome.name,
        "message": outcome.message,
        "duration_ms": outcome.duration_ms,
    }


def format_test_result(result: TestParseResult) -> dict[str, Any]:
    """Format a test parse result."""
    return {
        "success": result.success,
        "total": result.total,
        "passed": result.passed,
        "failed": result.failed,
        "skipped": result.skipped,
        "failed_tests": [format_test_outcome(t) for t in result.failed_tests],
    }


def truncate_output(output: str, max_chars: int) -> str:
    """Cut output to max_chars characters, marking the cut."""
    if len(output) <= max_chars:
        return output
    return output[:max_chars] + TRUNCATION_SUFFIX

