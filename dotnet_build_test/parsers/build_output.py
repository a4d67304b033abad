"""Parse MSBuild-style diagnostics from ``dotnet build`` output."""

import logging
import re

from dotnet_build_test.models.diagnostic import BuildParseResult, Diagnostic, Severity

log = logging.getLogger(__name__)

# path(line[,column]): error|warning [code]: message
DIAGNOSTIC_PATTERN = re.compile(
    r"^(?P<file>.+?)\((?P<line>\d+)(?:,(?P<column>\d+))?\):\s*"
    r"(?P<severity>(?i:error|warning))\s*(?P<code>\S*?):\s*(?P<message>.*)$"
)

EXIT_CODE_PATTERN = re.compile(r"^\s*Exit code:\s*(\d+)\s*$", re.MULTILINE)

QUOTE_CHARS = "\"'"


def parse_build_output(output: str | None) -> BuildParseResult:
    """Extract errors, warnings and the exit code from build output.

    Lines that do not look like a diagnostic are skipped. The exit code comes
    from a standalone ``Exit code: N`` line appended by the runner and
    defaults to 0 when there is none.
    """
    if not output:
        return BuildParseResult()

    errors: list[Diagnostic] = []
    warnings: list[Diagnostic] = []

    for raw_line in output.split("\n"):
        line = raw_line.strip()
        if not line:
            continue

        if (parsed := parse_diagnostic_line(line)) is None:
            continue

        severity, diagnostic = parsed
        if severity == "error":
            errors.append(diagnostic)
        else:
            warnings.append(diagnostic)

    exit_code = find_exit_code(output)
    log.debug(
        "Parsed build output: %d error(s), %d warning(s), exit code %d",
        len(errors),
        len(warnings),
        exit_code,
    )
    return BuildParseResult(
        exit_code=exit_code, errors=tuple(errors), warnings=tuple(warnings)
    )


def parse_diagnostic_line(line: str) -> tuple[Severity, Diagnostic] | None:
    """Parse one stripped output line into a severity and diagnostic."""
    match = DIAGNOSTIC_PATTERN.match(line)
    if match is None:
        return None

    column = match["column"]
    code = match["code"].strip()
    severity: Severity = "error" if match["severity"].lower() == "error" else "warning"

    diagnostic = Diagnostic(
        file=_unquote(match["file"].strip()),
        line=int(match["line"]),
        column=int(column) if column else None,
        code=code or None,
        message=match["message"].strip(),
    )
    return severity, diagnostic


def find_exit_code(output: str) -> int:
    """Return the value of the last ``Exit code: N`` line, or 0."""
    matches = EXIT_CODE_PATTERN.findall(output)
    return int(matches[-1]) if matches else 0


def _unquote(value: str) -> str:
    """Remove one pair of enclosing quotes."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in QUOTE_CHARS:
        return value[1:-1]
    return value
