"""Resolve the solution file to build or test."""

from pathlib import Path


class SolutionNotFoundError(ValueError):
    """Raised when a path does not lead to a solution file."""


def resolve_solution_path(path: str) -> Path:
    """Resolve a solution file from a path to a ``.sln`` file or a directory.

    Args:
        path: Path to a ``.sln`` file, or to a directory containing one

    Returns:
        Absolute path to the solution file. For a directory holding several
        solutions the first one in name order is used.

    Raises:
        SolutionNotFoundError: If the path does not exist, is not a solution
            file, or is a directory without one

    """
    full = Path(path.strip()).expanduser().absolute()

    if full.is_file() and full.suffix.lower() == ".sln":
        return full

    if full.is_dir():
        solutions = sorted(
            child
            for child in full.iterdir()
            if child.is_file() and child.suffix.lower() == ".sln"
        )
        if solutions:
            return solutions[0]
        raise SolutionNotFoundError(f"No .sln found in directory: {full}")

    raise SolutionNotFoundError(f"Path not found or not a solution: {path}")
