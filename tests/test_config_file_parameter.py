"""
Tests for ConfigFileChoiceParameter.

Tests:
- construction defaults (choice type, filter length)
- late binding of the config file reference
- choice resolution contract
- persistence round trip through the host handshake
"""

import logging

import pytest

from CFCutils.backends import set_default_store
from CFCutils.parameters import ChoiceType, ConfigFileChoiceParameter


# =============================================================================
# Construction Tests
# =============================================================================

class TestConstruction:
    """Test defaulting done at construction."""

    @pytest.mark.parametrize("choice_type", [None, "", "   "])
    def test_blank_choice_type_defaults_to_single_select(self, choice_type):
        param = ConfigFileChoiceParameter("P", "", choice_type, False, "x")
        assert param.get_choice_type() is ChoiceType.SINGLE_SELECT

    @pytest.mark.parametrize("choice_type,expected", [
        ("PT_MULTI_SELECT", ChoiceType.MULTI_SELECT),
        ("PT_CHECKBOX", ChoiceType.CHECKBOX),
        ("pt_radio", ChoiceType.RADIO),
        ("MULTI_SELECT", ChoiceType.MULTI_SELECT),
        (ChoiceType.CHECKBOX, ChoiceType.CHECKBOX),
    ])
    def test_known_choice_types(self, choice_type, expected):
        param = ConfigFileChoiceParameter("P", "", choice_type, False, "x")
        assert param.get_choice_type() is expected

    def test_unknown_choice_type_falls_back_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="CFCutils"):
            param = ConfigFileChoiceParameter("P", "", "PT_DROPDOWN_DELUXE", False, "x")
        assert param.get_choice_type() is ChoiceType.SINGLE_SELECT
        assert "PT_DROPDOWN_DELUXE" in caplog.text

    def test_construction_does_not_touch_store(self, memory_store):
        set_default_store(memory_store)
        ConfigFileChoiceParameter("P", "", None, False, "shells")
        assert memory_store.lookups == []

    def test_description_defaults_to_empty(self):
        param = ConfigFileChoiceParameter("P")
        assert param.get_description() == ""
        assert param.get_name() == "P"

    def test_filterable_returned_as_stored(self):
        assert ConfigFileChoiceParameter("P", filterable=True).get_filterable() is True
        assert ConfigFileChoiceParameter("P", filterable=None).get_filterable() is None


# =============================================================================
# Filter Length Tests
# =============================================================================

class TestFilterLength:
    """Test the filter length accessor never returns None."""

    def test_unset_is_one(self):
        assert ConfigFileChoiceParameter("P").get_filter_length() == 1

    def test_explicit_value(self):
        param = ConfigFileChoiceParameter("P", filter_length=3)
        assert param.get_filter_length() == 3

    def test_setter(self):
        param = ConfigFileChoiceParameter("P")
        param.set_filter_length(4)
        assert param.get_filter_length() == 4
        param.set_filter_length(None)
        assert param.get_filter_length() == 1

    @pytest.mark.parametrize("value", [0, -2])
    def test_non_positive_is_one(self, value):
        assert ConfigFileChoiceParameter("P", filter_length=value).get_filter_length() == 1

    def test_visible_item_count(self):
        param = ConfigFileChoiceParameter("P")
        assert param.get_visible_item_count() is None
        param.set_visible_item_count(7)
        assert param.get_visible_item_count() == 7


# =============================================================================
# Resolution Tests
# =============================================================================

class TestGetChoices:
    """Test the parameter provider contract."""

    def test_shells(self, shell_param, memory_store):
        choices = shell_param.get_choices(store=memory_store)
        assert list(choices.items()) == [("bash", "bash"), ("zsh", "zsh"), ("fish", "fish")]

    def test_no_argument_form_equals_empty_mapping(self, shell_param, memory_store):
        set_default_store(memory_store)
        assert shell_param.get_choices() == shell_param.get_choices({})

    def test_context_parameters_are_ignored(self, shell_param, memory_store):
        plain = shell_param.get_choices({}, store=memory_store)
        with_context = shell_param.get_choices({"ENV": "prod", "SHELL": "zsh"}, store=memory_store)
        assert plain == with_context

    def test_setter_rebinds_for_next_resolution(self, shell_param, memory_store):
        shell_param.set_config_file_id("regions")
        assert shell_param.get_config_file_id() == "regions"
        assert list(shell_param.get_choices(store=memory_store)) == ["eu-west-1", "us-east-1", "ap-south-1"]
        assert memory_store.lookups == ["regions"]

    def test_rebind_after_previous_resolution(self, shell_param, memory_store):
        assert "bash" in shell_param.get_choices(store=memory_store)
        shell_param.set_config_file_id("empty-doc")
        assert shell_param.get_choices(store=memory_store) == {}

    def test_missing_source_returns_empty(self, memory_store, caplog):
        param = ConfigFileChoiceParameter("P", "", None, False, "missing")
        with caplog.at_level(logging.ERROR, logger="CFCutils"):
            assert param.get_choices(store=memory_store) == {}
        assert "missing" in caplog.text

    def test_unset_source_returns_empty(self, memory_store):
        param = ConfigFileChoiceParameter("P")
        assert param.get_choices(store=memory_store) == {}

    def test_broken_store_returns_empty(self, shell_param, broken_store):
        assert shell_param.get_choices(store=broken_store) == {}


# =============================================================================
# Persistence Tests
# =============================================================================

class TestPersistence:
    """Test serialization to and from parameter set entries."""

    def test_to_dict(self, shell_param):
        shell_param.set_filter_length(2)
        assert shell_param.to_dict() == {
            "type": "configFileChoiceParameter",
            "name": "SHELL",
            "description": "Login shell",
            "choice_type": "PT_SINGLE_SELECT",
            "filterable": True,
            "config_file_id": "shells",
            "filter_length": 2,
            "visible_item_count": None,
        }

    def test_round_trip(self, shell_param):
        shell_param.set_visible_item_count(5)
        restored = ConfigFileChoiceParameter.from_dict(shell_param.to_dict())
        assert restored == shell_param

    def test_legacy_entry_without_config_file_id(self):
        param = ConfigFileChoiceParameter.from_dict({"name": "OLD", "choice_type": ""})
        assert param.get_config_file_id() is None
        assert param.get_choice_type() is ChoiceType.SINGLE_SELECT
        assert param.get_filter_length() == 1
