"""Tests for the locator registry."""

import logging

import pytest

from locator_warden.errors import UnknownLocator
from locator_warden.locators import Css, LocatorGroup, Registry, TestId, default_registry


class TestLookup:
    def test_get_returns_descriptor(self, small_registry):
        assert small_registry.get("LOGIN", "EMAIL_INPUT") == TestId("email-input")

    def test_unknown_group(self, small_registry):
        with pytest.raises(UnknownLocator, match="Unknown locator group: PROFILE"):
            small_registry.get("PROFILE", "AVATAR")

    def test_unknown_key(self, small_registry):
        with pytest.raises(UnknownLocator, match=r"Unknown locator: LOGIN\.NOPE"):
            small_registry.get("LOGIN", "NOPE")

    def test_legacy_string_entries_become_css(self):
        registry = Registry.from_mapping({"LEGACY": {"SUBMIT": "button[type=submit]"}})
        assert registry.get("LEGACY", "SUBMIT") == Css("button[type=submit]")

    def test_len_matches_iteration(self, small_registry):
        assert len(small_registry) == len(list(small_registry)) == 2
        assert len(small_registry.qualified()) == 5


class TestImmutability:
    def test_group_entries_are_read_only(self, small_registry):
        with pytest.raises(TypeError):
            small_registry.group("LOGIN").entries["EMAIL_INPUT"] = TestId("hacked")

    def test_groups_mapping_is_read_only(self, small_registry):
        with pytest.raises(TypeError):
            small_registry.groups["NEW"] = LocatorGroup("NEW")

    def test_source_mapping_changes_do_not_leak(self):
        source = {"A": {"X": TestId("x")}}
        registry = Registry.from_mapping(source)
        source["A"]["X"] = TestId("changed")
        assert registry.get("A", "X") == TestId("x")

    def test_duplicate_group_names_rejected(self):
        with pytest.raises(ValueError, match="LOGIN"):
            Registry([LocatorGroup("LOGIN"), LocatorGroup("LOGIN")])


class TestAliases:
    def test_alias_resolves_to_same_descriptor(self, small_registry):
        assert small_registry.get("REGISTRATION", "EMAIL_INPUT") is small_registry.get("LOGIN", "EMAIL_INPUT")

    def test_aliases_point_at_canonical_entry(self, small_registry):
        assert small_registry.aliases() == [("REGISTRATION.EMAIL_INPUT", "LOGIN.EMAIL_INPUT")]

    def test_declared_excludes_aliases(self, small_registry):
        declared = small_registry.declared()
        assert "LOGIN.EMAIL_INPUT" in declared
        assert "REGISTRATION.EMAIL_INPUT" not in declared
        assert len(declared) == 4

    def test_equal_but_separate_values_are_not_aliases(self):
        registry = Registry.from_mapping({
            "A": {"EMAIL": TestId("email-input")},
            "B": {"EMAIL": TestId("email-input")},
        })
        assert registry.aliases() == []


class TestFlatten:
    def test_last_group_wins(self, caplog):
        registry = Registry.from_mapping({
            "LOGIN": {"SUBMIT": TestId("login-button")},
            "FORM": {"SUBMIT": TestId("submit-button")},
        })

        with caplog.at_level(logging.WARNING):
            flat = registry.flatten()

        assert flat["SUBMIT"] == TestId("submit-button")
        assert "shadowed" in caplog.text

    def test_shadowed_reports_differing_collisions(self):
        registry = Registry.from_mapping({
            "LOGIN": {"SUBMIT": TestId("login-button")},
            "FORM": {"SUBMIT": TestId("submit-button")},
        })
        [shadow] = registry.shadowed()
        assert (shadow.key, shadow.hidden, shadow.winner) == ("SUBMIT", "LOGIN.SUBMIT", "FORM.SUBMIT")

    def test_alias_collision_is_not_shadowing(self, small_registry):
        assert small_registry.shadowed() == []
        assert small_registry.flatten()["EMAIL_INPUT"] == TestId("email-input")


class TestDefaultRegistry:
    def test_built_once(self):
        assert default_registry() is default_registry()

    def test_catalog_groups_in_merge_order(self):
        assert list(default_registry().groups) == [
            "LOGIN", "DASHBOARD", "COMMON", "FORM", "NAVIGATION", "REGISTRATION", "PROFILE", "SETTINGS",
        ]

    def test_registration_aliases_login_fields(self):
        aliases = dict(default_registry().aliases())
        assert aliases["REGISTRATION.EMAIL_INPUT"] == "LOGIN.EMAIL_INPUT"
        assert aliases["REGISTRATION.PASSWORD_INPUT"] == "LOGIN.PASSWORD_INPUT"

    def test_catalog_has_no_shadowing(self):
        assert default_registry().shadowed() == []
