"""Models for diagnostics reported by a build."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, kw_only=True)
class Diagnostic:
    """A single compiler error or warning with its source location."""

    file: str
    line: int
    column: int | None = None
    code: str | None = None
    message: str


@dataclass(frozen=True, kw_only=True)
class BuildParseResult:
    """Diagnostics and exit code extracted from build output.

    Errors and warnings keep the order in which they appeared in the output.
    """

    exit_code: int = 0
    errors: Sequence[Diagnostic] = ()
    warnings: Sequence[Diagnostic] = ()

    @property
    def success(self) -> bool:
        """Whether the build exited cleanly without reporting errors."""
        return self.exit_code == 0 and not self.errors
