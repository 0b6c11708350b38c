"""
Tests for the parameter type registry.
"""

import pytest

from CFCutils.exceptions import UnknownParameterTypeError, ValidationError
from CFCutils.parameters import (
    ChoiceType,
    ConfigFileChoiceParameter,
    ParameterDescriptor,
    create_parameter,
    get_descriptor,
    list_parameter_types,
    register_parameter_type,
    unregister_parameter_type,
)


class TestRegistry:
    """Test registration metadata and lookup."""

    def test_config_file_parameter_registered(self):
        descriptor = get_descriptor("configFileChoiceParameter")
        assert descriptor.display_name == "Config File Choices Parameter"
        assert descriptor.parameter_class is ConfigFileChoiceParameter

    def test_listed_for_add_parameter_menu(self):
        symbols = [d.symbol for d in list_parameter_types()]
        assert "configFileChoiceParameter" in symbols

    def test_unknown_symbol(self):
        with pytest.raises(UnknownParameterTypeError) as exc_info:
            get_descriptor("groovyScriptParameter")
        assert "groovyScriptParameter" in str(exc_info.value)
        # Also usable where a KeyError is expected
        assert isinstance(exc_info.value, KeyError)

    def test_register_and_unregister(self):
        descriptor = ParameterDescriptor(
            symbol="testChoiceParameter",
            display_name="Test Choices",
            parameter_class=ConfigFileChoiceParameter,
            factory=ConfigFileChoiceParameter.from_dict,
        )
        register_parameter_type(descriptor)
        try:
            assert get_descriptor("testChoiceParameter") is descriptor
            # Same descriptor again is harmless
            register_parameter_type(descriptor)
        finally:
            unregister_parameter_type("testChoiceParameter")
        with pytest.raises(UnknownParameterTypeError):
            get_descriptor("testChoiceParameter")

    def test_conflicting_registration_rejected(self):
        clash = ParameterDescriptor(
            symbol="configFileChoiceParameter",
            display_name="Something else",
            parameter_class=ConfigFileChoiceParameter,
            factory=ConfigFileChoiceParameter.from_dict,
        )
        with pytest.raises(ValidationError):
            register_parameter_type(clash)

    def test_unregister_unknown(self):
        with pytest.raises(UnknownParameterTypeError):
            unregister_parameter_type("nope")


class TestCreateParameter:
    """Test building parameters from persisted entries."""

    def test_create(self):
        param = create_parameter({
            "type": "configFileChoiceParameter",
            "name": "SHELL",
            "choice_type": "PT_CHECKBOX",
            "config_file_id": "shells",
            "filter_length": 3,
        })
        assert isinstance(param, ConfigFileChoiceParameter)
        assert param.get_choice_type() is ChoiceType.CHECKBOX
        assert param.get_config_file_id() == "shells"
        assert param.get_filter_length() == 3

    def test_extra_keys_ignored(self):
        param = create_parameter({
            "type": "configFileChoiceParameter",
            "name": "SHELL",
            "randomName": "choice-parameter-123",
        })
        assert param.name == "SHELL"

    @pytest.mark.parametrize("entry", [
        {"type": "configFileChoiceParameter"},
        {"type": "configFileChoiceParameter", "name": ""},
        {"type": "configFileChoiceParameter", "name": "   "},
        {"name": "SHELL"},
    ])
    def test_invalid_entries(self, entry):
        with pytest.raises(ValidationError):
            create_parameter(entry)

    def test_unknown_type(self):
        with pytest.raises(UnknownParameterTypeError):
            create_parameter({"type": "activeChoiceParameter", "name": "X"})
