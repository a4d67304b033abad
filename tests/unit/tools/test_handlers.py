"""Tests for the build_structured and run_tests handlers."""

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from dotnet_build_test.config import DotnetConfig
from dotnet_build_test.runner import DotnetRun
from dotnet_build_test.solution import SolutionNotFoundError
from dotnet_build_test.tools.base import SolutionArguments
from dotnet_build_test.tools.build_structured import build_structured
from dotnet_build_test.tools.run_tests import run_tests

BUILD_OUTPUT = """\
  Determining projects to restore...
/src/App/Program.cs(3,5): error CS0103: The name 'cfg' does not exist in the current context [/src/App/App.csproj]
/src/App/Program.cs(1,1): warning CS8019: Unnecessary using directive. [/src/App/App.csproj]

Build FAILED.

Exit code: 1"""

TEST_OUTPUT = """\
  Passed App.Tests.A [2 ms]
  Failed App.Tests.B [31 ms]
  Error Message: Assert.True() Failure
Failed!  - Failed:     1, Passed:     1, Skipped:     0, Total:     2, Duration: 40 ms - App.Tests.dll (net8.0)
"""


@pytest.fixture
def solution(tmp_path: Path) -> Path:
    """Create an empty solution file."""
    path = tmp_path / "App.sln"
    path.write_text("")
    return path


class TestBuildStructured:
    """Tests for build_structured handler."""

    async def test_returns_parsed_diagnostics(self, solution: Path) -> None:
        """Builds the solution and returns parsed diagnostics with raw output."""
        with patch(
            "dotnet_build_test.tools.build_structured.run_dotnet",
            new_callable=AsyncMock,
            return_value=DotnetRun(output=BUILD_OUTPUT, exit_code=1),
        ) as mock_run:
            result = await build_structured(
                SolutionArguments(solution_path=str(solution.parent)),
                DotnetConfig(dotnet_path="/opt/dotnet/dotnet", timeout=60),
            )

        mock_run.assert_called_once_with(
            solution.parent,
            ["build", str(solution)],
            dotnet_path="/opt/dotnet/dotnet",
            timeout=60,
        )
        assert result["success"] is False
        assert result["exit_code"] == 1
        assert result["errors"] == [
            {
                "file": "/src/App/Program.cs",
                "line": 3,
                "column": 5,
                "code": "CS0103",
                "message": "The name 'cfg' does not exist in the current context"
                " [/src/App/App.csproj]",
            }
        ]
        assert len(result["warnings"]) == 1
        assert result["raw_output"] == BUILD_OUTPUT

    async def test_truncates_raw_output(self, solution: Path) -> None:
        """Cuts raw output at the configured size."""
        with patch(
            "dotnet_build_test.tools.build_structured.run_dotnet",
            new_callable=AsyncMock,
            return_value=DotnetRun(output="Build succeeded.", exit_code=0),
        ):
            result = await build_structured(
                SolutionArguments(solution_path=str(solution)),
                DotnetConfig(max_raw_chars=5),
            )

        assert result["success"] is True
        assert result["raw_output"] == "Build\n... (output truncated)"

    async def test_raises_for_missing_solution(self, tmp_path: Path) -> None:
        """Does not run dotnet when the solution cannot be resolved."""
        with (
            patch(
                "dotnet_build_test.tools.build_structured.run_dotnet",
                new_callable=AsyncMock,
            ) as mock_run,
            pytest.raises(SolutionNotFoundError),
        ):
            await build_structured(
                SolutionArguments(solution_path=str(tmp_path)), DotnetConfig()
            )

        mock_run.assert_not_called()


class TestRunTests:
    """Tests for run_tests handler."""

    async def test_returns_parsed_outcomes(self, solution: Path) -> None:
        """Runs the tests with the configured logger and returns outcomes."""
        with patch(
            "dotnet_build_test.tools.run_tests.run_dotnet",
            new_callable=AsyncMock,
            return_value=DotnetRun(output=TEST_OUTPUT + "\nExit code: 1", exit_code=1),
        ) as mock_run:
            result = await run_tests(
                SolutionArguments(solution_path=str(solution)),
                DotnetConfig(test_logger="console;verbosity=normal"),
            )

        mock_run.assert_called_once_with(
            solution.parent,
            ["test", str(solution), "--logger", "console;verbosity=normal"],
            dotnet_path="dotnet",
            timeout=None,
        )
        assert result == {
            "success": False,
            "total": 2,
            "passed": 1,
            "failed": 1,
            "skipped": 0,
            "failed_tests": [
                {
                    "name": "App.Tests.B",
                    "message": "Assert.True() Failure",
                    "duration_ms": 31,
                }
            ],
        }

    async def test_uses_detailed_logger_by_default(self, solution: Path) -> None:
        """Passes the detailed console logger unless configured otherwise."""
        with patch(
            "dotnet_build_test.tools.run_tests.run_dotnet",
            new_callable=AsyncMock,
            return_value=DotnetRun(output="", exit_code=0),
        ) as mock_run:
            result = await run_tests(
                SolutionArguments(solution_path=str(solution)), DotnetConfig()
            )

        args = mock_run.call_args.args[1]
        assert args[-2:] == ["--logger", "console;verbosity=detailed"]
        assert result["success"] is True
        assert result["total"] == 0
