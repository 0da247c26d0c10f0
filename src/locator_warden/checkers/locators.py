"""
Locator consistency checker.

Reads the locator catalog as plain text, renders every declared descriptor
to its selector string and reports values owned by more than one key. A
second pass scans a data file for selectors that bypass the catalog.

Parsing is regex based on purpose. Group bodies are delimited by counting
braces outside string literals; entries inside them are matched against
the shapes the catalog is written in and nothing more. Unusual entries are
skipped and the hardcoded-selector scan can report false positives.
"""

import logging
import re
from collections import defaultdict
from collections.abc import Mapping
from pathlib import Path

from ..locators.descriptors import DESCRIPTOR_KINDS, Css, Descriptor, TestId, Text, XPath, render
from ..locators.registry import Registry
from ..models import DuplicateGroup, HardcodedSelector, Violation, ViolationKind, ViolationReport
from .sources import read_source

logger = logging.getLogger(__name__)

# NAME = {  /  export const NAME = {  (the body is found by brace counting)
GROUP_PATTERN = re.compile(
    r"^(?:export\s+const\s+)?(?P<name>[A-Z][A-Z0-9_]*)\s*(?::[^=\n]+)?=\s*\{",
    re.MULTILINE,
)

QUOTES = "\"'`"

ENTRY_PATTERN = re.compile(
    r"(?<!\w)(?P<kq>[\"']?)(?P<key>[A-Z][A-Z0-9_]*)(?P=kq)\s*:\s*"
    r"(?:"
    # TestId("email-input")
    r"(?P<call>TestId|Text|Css|XPath)\(\s*(?P<cq>[\"'`])(?P<call_value>.*?)(?P=cq)\s*\)"
    # { type: 'testid', value: 'email-input' }
    r"|\{\s*[\"']?type[\"']?\s*:\s*(?P<tq>[\"'])(?P<type>\w+)(?P=tq)\s*,"
    r"\s*[\"']?value[\"']?\s*:\s*(?P<oq>[\"'`])(?P<object_value>.*?)(?P=oq)\s*,?\s*\}"
    # '[data-testid="email-input"]'
    r"|(?P<sq>[\"'`])(?P<string_value>.*?)(?P=sq)"
    r")"
)

COMMENT_LINE = re.compile(r"^\s*(?:#|//).*$", re.MULTILINE)

CALL_KINDS: dict[str, type] = {"TestId": TestId, "Text": Text, "Css": Css, "XPath": XPath}

HARDCODED_PATTERNS = [
    re.compile(r"data-testid=[\"'`][^\"'`]+[\"'`]"),
    re.compile(r"getByTestId\([\"'`][^\"'`]+[\"'`]\)"),
    re.compile(r"get_by_test_id\([\"'`][^\"'`]+[\"'`]\)"),
    re.compile(r"locator\([\"'`][^\"'`]+[\"'`]\)"),
    re.compile(r"[\"']?selector[\"']?\s*:\s*[\"'`][^\"'`]+[\"'`]"),
]


def _skip_string(text: str, start: int) -> int:
    """Index just past the string literal opening at ``start``."""
    quote = text[start]
    i = start + 1
    while i < len(text):
        char = text[i]
        if char == "\\":
            i += 2
            continue
        if char == quote:
            return i + 1
        # Only template literals span lines
        if char == "\n" and quote != "`":
            return i + 1
        i += 1
    return len(text)


def _group_body(text: str, start: int) -> tuple[str, int]:
    """
    Body of a group whose opening brace ends just before ``start``.

    Braces inside string literals and line comments do not count. An
    unterminated group runs to the end of the text.

    Returns:
        The body text and the index just past the closing brace
    """
    depth = 1
    i = start
    while i < len(text):
        char = text[i]
        if char in QUOTES:
            i = _skip_string(text, i)
            continue
        if char == "#" or text.startswith("//", i):
            newline = text.find("\n", i)
            i = len(text) if newline == -1 else newline
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start:i], i + 1
        i += 1
    return text[start:], len(text)


def _entry_descriptor(match: re.Match) -> Descriptor | None:
    """Build the descriptor an entry match declares, or None if unusable."""
    try:
        if match.group("call"):
            return CALL_KINDS[match.group("call")](match.group("call_value"))
        if match.group("type") is not None:
            cls = DESCRIPTOR_KINDS.get(match.group("type").lower())
            if cls is None:
                logger.warning("Unknown locator type %r for %s", match.group("type"), match.group("key"))
                return None
            return cls(match.group("object_value"))
        return Css(match.group("string_value"))
    except ValueError as e:
        logger.warning("Skipping %s: %s", match.group("key"), e)
        return None


def extract_descriptors(source_text: str) -> dict[str, str]:
    """
    Extract declared locators from catalog source text.

    Returns:
        Mapping of ``GROUP.KEY`` to the rendered selector string. Entries
        that reference another entry (aliases) are not included.
    """
    locators: dict[str, str] = {}
    position = 0

    for group in GROUP_PATTERN.finditer(source_text):
        if group.start() < position:
            continue
        body, position = _group_body(source_text, group.end())
        body = COMMENT_LINE.sub("", body)
        for entry in ENTRY_PATTERN.finditer(body):
            descriptor = _entry_descriptor(entry)
            if descriptor is not None:
                locators[f"{group.group('name')}.{entry.group('key')}"] = render(descriptor)

    return locators


def descriptors_from_registry(registry: Registry) -> dict[str, str]:
    """Same mapping as ``extract_descriptors`` but read from a live registry."""
    return {name: render(descriptor) for name, descriptor in registry.declared().items()}


def find_duplicates(descriptors: Mapping[str, str]) -> list[DuplicateGroup]:
    """
    Find selector values owned by more than one key.

    Output is sorted by value and owning keys are sorted, so the result
    does not depend on input order.
    """
    value_to_names: dict[str, list[str]] = defaultdict(list)
    for name, value in descriptors.items():
        value_to_names[value].append(name)

    return [
        DuplicateGroup(value=value, owning_keys=tuple(sorted(names)))
        for value, names in sorted(value_to_names.items())
        if len(names) > 1
    ]


def find_hardcoded_selectors(data_source_text: str, file: str = "") -> list[HardcodedSelector]:
    """Find selector-like literals in a non-catalog source file."""
    matches = sorted(
        (m for pattern in HARDCODED_PATTERNS for m in pattern.finditer(data_source_text)),
        key=lambda m: (m.start(), -m.end()),
    )

    found = []
    covered_until = -1
    for match in matches:
        # Skip hits nested inside a wider one, e.g. data-testid= inside locator(...)
        if match.end() <= covered_until:
            continue
        covered_until = match.end()
        found.append(HardcodedSelector(
            value=match.group(0),
            file=file,
            line=data_source_text.count("\n", 0, match.start()) + 1,
        ))

    return found


def validate_locators(
    registry_path: Path,
    data_path: Path | None = None,
    registry: Registry | None = None,
) -> ViolationReport:
    """
    Check the catalog for duplicates and the data file for hardcoded selectors.

    Args:
        registry_path: catalog source file (required)
        data_path: data file to scan; skipped when it does not exist
        registry: when given, read descriptors from it instead of parsing source

    Raises:
        FileReadError: if a required file cannot be read
    """
    report = ViolationReport(checker="locators")

    if registry is not None:
        descriptors = descriptors_from_registry(registry)
    else:
        descriptors = extract_descriptors(read_source(registry_path))
    report.scanned = len(descriptors)

    for duplicate in find_duplicates(descriptors):
        report.violations.append(Violation(
            kind=ViolationKind.DUPLICATE,
            locations=duplicate.owning_keys,
            detail=duplicate.value,
            recommendation="Keep one canonical entry and alias it from the other groups",
        ))

    if data_path is not None:
        if Path(data_path).exists():
            for selector in find_hardcoded_selectors(read_source(data_path), str(data_path)):
                report.violations.append(Violation(
                    kind=ViolationKind.HARDCODED,
                    locations=(f"{selector.file}:{selector.line}",),
                    detail=selector.value,
                    recommendation=selector.recommendation,
                ))
        else:
            report.notes.append(f"Data file {data_path} not found, hardcoded selector scan skipped")

    return report
