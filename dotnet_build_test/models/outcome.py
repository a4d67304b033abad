"""Models for test run outcomes."""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class TestOutcome:
    """Outcome of a single test.

    Only failed tests are itemized, so ``passed`` is False in practice.
    """

    __test__ = False

    name: str
    passed: bool
    message: str | None = None
    duration_ms: int | None = None


@dataclass(frozen=True, kw_only=True)
class TestParseResult:
    """Counts and failed tests extracted from test runner output."""

    __test__ = False

    total: int = 0
    passed: int = 0
    failed: int = 0
    skipped: int = 0
    failed_tests: Sequence[TestOutcome] = ()

    @property
    def success(self) -> bool:
        """Whether no test failed."""
        return self.failed == 0
