"""Tool building a solution and returning structured diagnostics."""

import logging
from collections.abc import Mapping
from typing import Any

from dotnet_build_test.config import DotnetConfig
from dotnet_build_test.parsers.build_output import parse_build_output
from dotnet_build_test.runner import run_dotnet
from dotnet_build_test.serialization import format_build_result
from dotnet_build_test.solution import resolve_solution_path
from dotnet_build_test.tools.base import SolutionArguments, ToolManifest

log = logging.getLogger(__name__)


async def build_structured(
    arguments: SolutionArguments, config: DotnetConfig
) -> Mapping[str, Any]:
    """Build the solution and return its errors and warnings."""
    solution = resolve_solution_path(arguments.solution_path)

    run = await run_dotnet(
        solution.parent,
        ["build", str(solution)],
        dotnet_path=config.dotnet_path,
        timeout=config.timeout,
    )
    result = parse_build_output(run.output)

    log.info(
        "Build of %s: %d error(s), %d warning(s)",
        solution.name,
        len(result.errors),
        len(result.warnings),
    )
    return format_build_result(result, run.output, config.max_raw_chars)


build_structured_manifest = ToolManifest(
    name="build_structured",
    description=(
        "Build a solution with dotnet build. Returns JSON: success, exit_code, "
        "errors[] (file, line, column?, code?, message), warnings[], "
        "raw_output (truncated)."
    ),
    arguments_cls=SolutionArguments,
    handler=build_structured,
)
