"""Console cleanliness checker - stray debug output in sources and results."""

import re
from collections.abc import Iterable
from pathlib import Path

from ..models import Violation, ViolationKind, ViolationReport
from .sources import iter_source_files, read_source

STATEMENT_PATTERNS = {
    ".js": re.compile(r"console\.(log|warn|error|info|debug)\s*\("),
    ".ts": re.compile(r"console\.(log|warn|error|info|debug)\s*\("),
    ".py": re.compile(r"^\s*print\s*\("),
}

RESULT_PATTERN = re.compile(r"console\.(log|warn|error|info|debug)")
RESULT_EXTENSIONS = (".json", ".txt")


def find_console_statements(content: str, suffix: str) -> list[tuple[int, str]]:
    """Return ``(line_number, line)`` for every console statement in a source."""
    pattern = STATEMENT_PATTERNS.get(suffix)
    if pattern is None:
        return []
    return [
        (number, line.strip())
        for number, line in enumerate(content.splitlines(), start=1)
        if pattern.search(line)
    ]


def validate_console_clean(
    directories: Iterable[Path],
    results_dir: Path | None = None,
    exclude: Iterable[str] = (),
) -> ViolationReport:
    """Scan sources (and test results, when present) for console output."""
    report = ViolationReport(checker="console")

    for path in iter_source_files(directories, STATEMENT_PATTERNS.keys(), exclude):
        report.scanned += 1
        for number, line in find_console_statements(read_source(path), path.suffix):
            report.violations.append(Violation(
                kind=ViolationKind.CONSOLE,
                locations=(f"{path}:{number}",),
                detail=line,
                recommendation="Remove the statement or route it through the test reporter",
            ))

    if results_dir is not None and Path(results_dir).is_dir():
        for path in iter_source_files([results_dir], RESULT_EXTENSIONS):
            report.scanned += 1
            if RESULT_PATTERN.search(read_source(path)):
                report.violations.append(Violation(
                    kind=ViolationKind.CONSOLE,
                    locations=(str(path),),
                    detail="Console statement found in test result",
                ))

    return report
