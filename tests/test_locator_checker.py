"""Tests for the duplicate and hardcoded selector checker."""

import random

import pytest

from locator_warden.checkers.locators import (
    descriptors_from_registry,
    extract_descriptors,
    find_duplicates,
    find_hardcoded_selectors,
    validate_locators,
)
from locator_warden.config import DEFAULT_REGISTRY_PATH, DEFAULT_TEST_DATA_PATH
from locator_warden.errors import FileReadError
from locator_warden.locators import Registry, TestId, default_registry
from locator_warden.models import DuplicateGroup, ViolationKind

PYTHON_CATALOG = '''
from .descriptors import TestId, Text

LOGIN_LOCATORS = {
    "EMAIL_INPUT": TestId("email-input"),
    "WELCOME": Text("Welcome back"),
    # "OLD_BUTTON": TestId("login-button"),
    "LOGIN_BUTTON": TestId("login-button"),
}

REGISTRATION_LOCATORS = {
    "EMAIL_INPUT": LOGIN_LOCATORS["EMAIL_INPUT"],
    "REGISTER_BUTTON": TestId("register-button"),
}
'''

JS_CATALOG = """
export const LOGIN_LOCATORS = {
  EMAIL_INPUT: { type: 'testid', value: 'email-input' },
  FIRST_ATTEMPT_LABEL: { type: 'text', value: 'Intentos: 1/' },
  LOGIN_BUTTON: '[data-testid="login-button"]',
} as const;

export const REGISTRATION_LOCATORS = {
  EMAIL_INPUT: LOGIN_LOCATORS.EMAIL_INPUT,
  SUBMIT: '[data-testid="login-button"]',
} as const;
"""


class TestExtractDescriptors:
    def test_python_catalog(self):
        assert extract_descriptors(PYTHON_CATALOG) == {
            "LOGIN_LOCATORS.EMAIL_INPUT": '[data-testid="email-input"]',
            "LOGIN_LOCATORS.WELCOME": "text=Welcome back",
            "LOGIN_LOCATORS.LOGIN_BUTTON": '[data-testid="login-button"]',
            "REGISTRATION_LOCATORS.REGISTER_BUTTON": '[data-testid="register-button"]',
        }

    def test_js_object_literals_and_plain_strings(self):
        assert extract_descriptors(JS_CATALOG) == {
            "LOGIN_LOCATORS.EMAIL_INPUT": '[data-testid="email-input"]',
            "LOGIN_LOCATORS.FIRST_ATTEMPT_LABEL": "text=Intentos: 1/",
            "LOGIN_LOCATORS.LOGIN_BUTTON": '[data-testid="login-button"]',
            "REGISTRATION_LOCATORS.SUBMIT": '[data-testid="login-button"]',
        }

    def test_unknown_object_literal_type_is_skipped(self):
        source = "export const A = {\n  X: { type: 'role', value: 'button' },\n};\n"
        assert extract_descriptors(source) == {}

    def test_single_line_group(self):
        assert extract_descriptors('COMMON = {"SPINNER": TestId("spinner")}\n') == {
            "COMMON.SPINNER": '[data-testid="spinner"]',
        }

    def test_group_closing_on_a_continuation_line(self):
        source = (
            'A = {"X": TestId("x"),\n'
            '     "Y": TestId("y")}\n'
            "\n"
            "B = {\n"
            '    "Z": TestId("z"),\n'
            '    "W": TestId("x"),\n'
            "}\n"
        )

        descriptors = extract_descriptors(source)

        assert sorted(descriptors) == ["A.X", "A.Y", "B.W", "B.Z"]
        assert [d.owning_keys for d in find_duplicates(descriptors)] == [("A.X", "B.W")]

    def test_first_entry_closing_on_opening_line(self):
        source = (
            "export const A = { X: { type: 'testid', value: 'x' },\n"
            "  Y: { type: 'testid', value: 'x' },\n"
            "};\n"
        )

        descriptors = extract_descriptors(source)

        assert descriptors == {"A.X": '[data-testid="x"]', "A.Y": '[data-testid="x"]'}
        assert [d.owning_keys for d in find_duplicates(descriptors)] == [("A.X", "A.Y")]

    def test_indented_closing_brace_does_not_swallow_next_group(self):
        source = (
            "export const A = {\n"
            "  X: '#x',\n"
            "  };\n"
            "export const B = {\n"
            "  Y: '#y',\n"
            "};\n"
        )

        assert extract_descriptors(source) == {"A.X": "#x", "B.Y": "#y"}

    def test_braces_inside_strings_and_comments_are_ignored(self):
        source = (
            "A = {\n"
            '    "X": Css("div:not({)"),  # closes } early?\n'
            '    "Y": TestId("y"),\n'
            "}\n"
        )

        assert extract_descriptors(source) == {"A.X": "div:not({)", "A.Y": '[data-testid="y"]'}

    def test_packaged_catalog_matches_live_registry(self):
        parsed = extract_descriptors(DEFAULT_REGISTRY_PATH.read_text(encoding="utf-8"))
        live = descriptors_from_registry(default_registry())

        assert len(parsed) == len(live)
        assert sorted(parsed.values()) == sorted(live.values())


class TestFindDuplicates:
    def test_same_testid_in_two_groups(self):
        descriptors = descriptors_from_registry(Registry.from_mapping({
            "A": {"X": TestId("email-input")},
            "B": {"Y": TestId("email-input")},
        }))

        assert find_duplicates(descriptors) == [
            DuplicateGroup(value='[data-testid="email-input"]', owning_keys=("A.X", "B.Y")),
        ]

    def test_aliases_are_not_duplicates(self, small_registry):
        assert find_duplicates(descriptors_from_registry(small_registry)) == []

    def test_plain_string_duplicates_testid(self):
        duplicates = find_duplicates(extract_descriptors(JS_CATALOG))
        assert [d.owning_keys for d in duplicates] == [
            ("LOGIN_LOCATORS.LOGIN_BUTTON", "REGISTRATION_LOCATORS.SUBMIT"),
        ]

    def test_no_duplicates(self):
        assert find_duplicates({"A.X": "a", "A.Y": "b"}) == []

    def test_idempotent_and_order_independent(self):
        descriptors = {
            "A.X": "text=Save",
            "B.Y": "#save",
            "C.Z": "text=Save",
            "D.W": "#save",
            "E.V": "#other",
        }
        expected = find_duplicates(descriptors)

        items = list(descriptors.items())
        random.Random(7).shuffle(items)

        assert find_duplicates(descriptors) == expected
        assert find_duplicates(dict(items)) == expected
        assert [d.value for d in expected] == ["#save", "text=Save"]


class TestFindHardcodedSelectors:
    def test_reports_each_pattern_with_line(self):
        source = "\n".join([
            "const a = page.locator('#submit');",
            "const b = page.getByTestId('email-input');",
            "b = page.get_by_test_id('email-input')",
            "html = '<div data-testid=\"toast\">'",
            "FIELD = {'selector': '.error'}",
            "const note = 'all good';",
        ])

        found = find_hardcoded_selectors(source, "data.js")

        assert [(s.line, s.value) for s in found] == [
            (1, "locator('#submit')"),
            (2, "getByTestId('email-input')"),
            (3, "get_by_test_id('email-input')"),
            (4, 'data-testid="toast"'),
            (5, "'selector': '.error'"),
        ]
        assert all(s.file == "data.js" for s in found)

    def test_attribute_inside_locator_call_reported_once(self):
        found = find_hardcoded_selectors("page.locator('[data-testid=\"x\"]')")
        assert [s.value for s in found] == ['data-testid="x"']

    def test_clean_data(self):
        assert find_hardcoded_selectors('LOGIN = {"VALID_EMAIL": "admin@test.com"}') == []


class TestValidateLocators:
    def test_packaged_catalog_and_data_are_clean(self):
        report = validate_locators(DEFAULT_REGISTRY_PATH, DEFAULT_TEST_DATA_PATH)

        assert report.ok
        assert report.notes == []
        assert report.scanned > 0

    def test_live_registry_is_clean(self):
        report = validate_locators(DEFAULT_REGISTRY_PATH, registry=default_registry())
        assert report.ok

    def test_reports_duplicates_and_hardcoded(self, tmp_path):
        catalog = tmp_path / "locators.js"
        catalog.write_text(JS_CATALOG)
        data = tmp_path / "test-data.js"
        data.write_text("export const DATA = {\n  button: page.locator('#go'),\n};\n")

        report = validate_locators(catalog, data)

        assert not report.ok
        [duplicate] = report.of_kind(ViolationKind.DUPLICATE)
        assert duplicate.detail == '[data-testid="login-button"]'
        [hardcoded] = report.of_kind(ViolationKind.HARDCODED)
        assert hardcoded.locations == (f"{data}:2",)

    def test_missing_registry_raises(self, tmp_path):
        with pytest.raises(FileReadError) as exc_info:
            validate_locators(tmp_path / "missing.js")
        assert exc_info.value.path == tmp_path / "missing.js"

    def test_missing_data_file_is_a_note(self, tmp_path):
        catalog = tmp_path / "catalog.py"
        catalog.write_text(PYTHON_CATALOG)

        report = validate_locators(catalog, tmp_path / "test_data.py")

        assert report.ok
        assert report.scanned == 4
        assert len(report.notes) == 1
        assert "not found" in report.notes[0]
