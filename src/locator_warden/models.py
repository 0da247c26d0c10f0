"""Core data models for Locator Warden."""

from dataclasses import dataclass, field
from enum import Enum


class ViolationKind(Enum):
    """Kinds of problems a checker can report."""

    DUPLICATE = "duplicate"
    HARDCODED = "hardcoded"
    NAMING = "naming"
    CONSOLE = "console"
    UNCOVERED = "uncovered"


@dataclass(frozen=True)
class DuplicateGroup:
    """A selector value owned by more than one locator key."""

    value: str
    owning_keys: tuple[str, ...]


@dataclass(frozen=True)
class HardcodedSelector:
    """A selector found outside the locator registry."""

    value: str
    file: str
    line: int
    recommendation: str = "Move selector to the locator catalog"


@dataclass(frozen=True)
class NamingIssue:
    """A single naming convention violation."""

    file: str
    rule: str  # file_name, class_name, page_object_name, method_name, test_name
    name: str
    message: str


@dataclass(frozen=True)
class Violation:
    """One entry of a checker report."""

    kind: ViolationKind
    locations: tuple[str, ...]
    detail: str
    recommendation: str | None = None


@dataclass
class ViolationReport:
    """Everything a checker found in one pass."""

    checker: str
    scanned: int = 0
    violations: list[Violation] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations

    def of_kind(self, kind: ViolationKind) -> list[Violation]:
        return [v for v in self.violations if v.kind is kind]
