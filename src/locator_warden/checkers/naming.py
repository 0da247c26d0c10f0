"""
Naming convention checker.

Validates file, class, callable and test names with regular expressions.
There is no real parsing, so names inside comments or strings can be
picked up; the exclusion lists keep the common false positives out.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from ..models import NamingIssue, Violation, ViolationKind, ViolationReport
from .sources import iter_source_files, read_source

CLASS_PATTERN = re.compile(r"^[A-Z][a-zA-Z0-9]*$")
PAGE_OBJECT_PATTERN = re.compile(r"^[A-Z][a-zA-Z0-9]*Page$")


@dataclass(frozen=True)
class ConventionProfile:
    """Naming rules for one family of source files."""

    name: str
    extensions: tuple[str, ...]
    file_pattern: re.Pattern
    file_rule: str
    class_extract: re.Pattern
    callable_extract: re.Pattern
    callable_pattern: re.Pattern
    callable_rule: str
    test_extract: re.Pattern
    test_pattern: re.Pattern
    test_rule: str
    class_pattern: re.Pattern = CLASS_PATTERN
    page_file_pattern: re.Pattern | None = None
    ignored_classes: frozenset[str] = field(default_factory=frozenset)
    ignored_callables: frozenset[str] = field(default_factory=frozenset)

    def is_test_file(self, file_name: str) -> bool:
        if self.name == "python":
            return file_name.startswith("test_") or file_name.endswith("_test.py")
        return ".spec." in file_name or ".test." in file_name


JAVASCRIPT = ConventionProfile(
    name="javascript",
    extensions=(".js", ".ts"),
    file_pattern=re.compile(r"^[a-z][a-z0-9-]*(_[a-z][a-z0-9-]*)*(\.spec|\.test)?\.(js|ts)$"),
    file_rule="pageName_action.spec.js (e.g. login_success.spec.js)",
    page_file_pattern=re.compile(r"^[A-Z][a-zA-Z0-9]*Page\.(ts|js)$"),
    class_extract=re.compile(r"\bclass\s+(\w+)"),
    callable_extract=re.compile(r"(?:async\s+)?\b(\w+)\s*\("),
    callable_pattern=re.compile(r"^[a-z][a-zA-Z0-9]*$"),
    callable_rule="camelCase",
    test_extract=re.compile(r"\btest\s*\(\s*[\"'`]([^\"'`]+)[\"'`]"),
    test_pattern=re.compile(r"^should "),
    test_rule='start with "should " and be descriptive',
    ignored_classes=frozenset({
        "for", "uses", "names", "with", "from", "into", "over", "under",
        "test", "describe", "beforeEach", "afterEach", "beforeAll", "afterAll",
    }),
    ignored_callables=frozenset({
        "if", "for", "while", "switch", "catch", "function", "const", "let", "var",
        "RegExp", "Date", "String", "Number", "Boolean", "Array", "Object", "Map", "Set",
        "Promise", "Error", "TypeError", "ReferenceError", "SyntaxError",
        "console", "process", "require", "import", "export", "default",
        "test", "describe", "beforeEach", "afterEach", "beforeAll", "afterAll",
        "expect", "page", "browser", "context", "new", "await", "return",
    }),
)

PYTHON = ConventionProfile(
    name="python",
    extensions=(".py",),
    file_pattern=re.compile(r"^[a-z_][a-z0-9_]*\.py$"),
    file_rule="snake_case.py (e.g. test_login_success.py)",
    class_extract=re.compile(r"^\s*class\s+(\w+)", re.MULTILINE),
    class_pattern=re.compile(r"^_?[A-Z][a-zA-Z0-9]*$"),
    callable_extract=re.compile(r"^\s*(?:async\s+)?def\s+(\w+)", re.MULTILINE),
    callable_pattern=re.compile(r"^_{0,2}[a-z][a-z0-9_]*$"),
    callable_rule="snake_case",
    test_extract=re.compile(r"^\s*(?:async\s+)?def\s+(test\w*)", re.MULTILINE),
    test_pattern=re.compile(r"^test_[a-z0-9_]+$"),
    test_rule='start with "test_" and use snake_case',
)

PROFILES = (JAVASCRIPT, PYTHON)


def profile_for(path: Path) -> ConventionProfile | None:
    """Pick the convention profile for a file by extension."""
    for profile in PROFILES:
        if path.name.endswith(profile.extensions):
            return profile
    return None


def _in_page_dir(path: Path, page_dirs: Iterable[str]) -> bool:
    return any(part in page_dirs for part in path.parent.parts)


def check_file(path: Path, page_dirs: Iterable[str] = ("pages",), display: str | None = None) -> list[NamingIssue]:
    """
    Check a single file against its convention profile.

    Every violation in the file is returned; nothing stops at the first one.

    Raises:
        FileReadError: if the file cannot be read
    """
    profile = profile_for(path)
    if profile is None:
        return []

    page_dirs = tuple(page_dirs)
    file_name = path.name
    shown = display or str(path)
    in_pages = _in_page_dir(Path(shown), page_dirs)
    issues: list[NamingIssue] = []

    # File name
    if not profile.file_pattern.match(file_name):
        page_exception = (
            in_pages
            and profile.page_file_pattern is not None
            and profile.page_file_pattern.match(file_name)
        )
        if not page_exception:
            issues.append(NamingIssue(
                file=shown,
                rule="file_name",
                name=file_name,
                message=f'File name "{file_name}" doesn\'t follow pattern: {profile.file_rule}',
            ))

    content = read_source(path)

    # Classes
    for class_name in profile.class_extract.findall(content):
        if class_name in profile.ignored_classes:
            continue
        if not profile.class_pattern.match(class_name):
            issues.append(NamingIssue(
                file=shown,
                rule="class_name",
                name=class_name,
                message=f'Class "{class_name}" doesn\'t follow PascalCase pattern',
            ))
        if in_pages and not PAGE_OBJECT_PATTERN.match(class_name):
            issues.append(NamingIssue(
                file=shown,
                rule="page_object_name",
                name=class_name,
                message=f'Page object class "{class_name}" should end with "Page"',
            ))

    # Callables, each name reported once per file
    seen: set[str] = set()
    class_names = set(profile.class_extract.findall(content))
    for method_name in profile.callable_extract.findall(content):
        if method_name in seen or method_name in profile.ignored_callables:
            continue
        seen.add(method_name)
        # Constructor calls such as new LoginPage(page)
        if method_name in class_names or (profile is JAVASCRIPT and CLASS_PATTERN.match(method_name)):
            continue
        if not profile.callable_pattern.match(method_name):
            issues.append(NamingIssue(
                file=shown,
                rule="method_name",
                name=method_name,
                message=f'Method "{method_name}" doesn\'t follow {profile.callable_rule} pattern',
            ))

    # Test names
    if profile.is_test_file(file_name):
        for test_name in profile.test_extract.findall(content):
            if not profile.test_pattern.match(test_name):
                issues.append(NamingIssue(
                    file=shown,
                    rule="test_name",
                    name=test_name,
                    message=f'Test "{test_name}" should {profile.test_rule}',
                ))

    return issues


def validate_naming(
    directories: Iterable[Path],
    page_dirs: Iterable[str] = ("pages",),
    exclude: Iterable[str] = (),
    root: Path | None = None,
) -> ViolationReport:
    """Check every source file under the given directories."""
    report = ViolationReport(checker="naming")
    extensions = [ext for profile in PROFILES for ext in profile.extensions]
    page_dirs = tuple(page_dirs)

    for path in iter_source_files(directories, extensions, exclude):
        report.scanned += 1
        display = str(path.relative_to(root)) if root and path.is_relative_to(root) else str(path)
        for issue in check_file(path, page_dirs, display):
            report.violations.append(Violation(
                kind=ViolationKind.NAMING,
                locations=(issue.file,),
                detail=issue.message,
            ))

    return report
