"""Run the dotnet executable and capture its console output."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)


class DotnetNotFoundError(RuntimeError):
    """Raised when the dotnet executable cannot be started."""


@dataclass(frozen=True, kw_only=True)
class DotnetRun:
    """Captured output of a dotnet invocation."""

    output: str
    exit_code: int


async def run_dotnet(
    working_dir: Path,
    args: Sequence[str],
    *,
    dotnet_path: str = "dotnet",
    timeout: float | None = None,
) -> DotnetRun:
    """Run dotnet with the given arguments and return its combined output.

    Standard output and standard error are joined with a newline. When the
    process exits with a non-zero status an ``Exit code: N`` line is appended
    so the build output parser can pick it up.

    Args:
        working_dir: Directory to run the command in
        args: Arguments passed to dotnet (e.g., ["build", "App.sln"])
        dotnet_path: Name or path of the dotnet executable
        timeout: Maximum run time in seconds (None waits indefinitely)

    Returns:
        Combined output and the raw process exit status

    Raises:
        DotnetNotFoundError: If the executable cannot be found
        TimeoutError: If the process does not finish within timeout

    """
    log.info("Running: %s %s (cwd=%s)", dotnet_path, " ".join(args), working_dir)

    try:
        process = await asyncio.create_subprocess_exec(
            dotnet_path,
            *args,
            cwd=working_dir,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except FileNotFoundError as e:
        raise DotnetNotFoundError(f"Failed to start {dotnet_path}: {e}") from e

    try:
        stdout, stderr = await asyncio.wait_for(process.communicate(), timeout)
    except TimeoutError:
        process.kill()
        await process.wait()
        raise TimeoutError(
            f"{dotnet_path} did not finish within {timeout} seconds"
        ) from None

    exit_code = process.returncode if process.returncode is not None else -1
    output = (
        stdout.decode(errors="replace") + "\n" + stderr.decode(errors="replace")
    )
    if exit_code != 0:
        output += f"\nExit code: {exit_code}"

    log.info("%s exited with code %d", dotnet_path, exit_code)
    return DotnetRun(output=output, exit_code=exit_code)
