"""Tests for configuration enums and SelectorConfig."""

import pytest

from dazzletreeselect import SelectionMode, SelectorConfig, SelectorConfigError, TraversalStrategy


class TestSelectionMode:

    @pytest.mark.parametrize("value, expected", [
        (SelectionMode.CASCADE, SelectionMode.CASCADE),
        ("cascade", SelectionMode.CASCADE),
        ("CASCADE", SelectionMode.CASCADE),
        ("top_level_only", SelectionMode.TOP_LEVEL_ONLY),
        ("top-level-only", SelectionMode.TOP_LEVEL_ONLY),
        (" TOP_LEVEL_ONLY ", SelectionMode.TOP_LEVEL_ONLY),
    ])
    def test_parse(self, value, expected):
        assert SelectionMode.parse(value) is expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Choose from: cascade, top_level_only"):
            SelectionMode.parse("children")

    @pytest.mark.parametrize("kwargs, expected", [
        ({}, SelectionMode.CASCADE),
        ({"top_level_only": True}, SelectionMode.TOP_LEVEL_ONLY),
        ({"top_level_only": False}, SelectionMode.CASCADE),
        ({"include_children": True}, SelectionMode.CASCADE),
        ({"include_children": False}, SelectionMode.TOP_LEVEL_ONLY),
        ({"top_level_only": True, "include_children": False}, SelectionMode.TOP_LEVEL_ONLY),
        ({"top_level_only": False, "include_children": True}, SelectionMode.CASCADE),
    ])
    def test_from_flags(self, kwargs, expected):
        assert SelectionMode.from_flags(**kwargs) is expected

    @pytest.mark.parametrize("flag", [True, False])
    def test_contradictory_flags(self, flag):
        """Both legacy flags set to the same value disagree about the mode."""
        with pytest.raises(SelectorConfigError, match="Contradictory mode flags"):
            SelectionMode.from_flags(top_level_only=flag, include_children=flag)

    def test_config_error_is_value_error(self):
        assert issubclass(SelectorConfigError, ValueError)


class TestSelectorConfig:

    def test_defaults(self):
        config = SelectorConfig()
        assert config.mode is SelectionMode.CASCADE
        assert config.warn_on_duplicates
        assert config.expand_on_external_change
        assert config.index_strategy is TraversalStrategy.DEPTH_FIRST_PRE
        assert config.validate() == []

    def test_from_flags(self):
        config = SelectorConfig.from_flags(top_level_only=True, warn_on_duplicates=False)
        assert config.mode is SelectionMode.TOP_LEVEL_ONLY
        assert not config.warn_on_duplicates

    def test_validate_reports_bad_types(self):
        config = SelectorConfig(mode="cascade", index_strategy="bfs")
        errors = config.validate()
        assert len(errors) == 2
        assert "mode must be a SelectionMode" in errors[0]
        assert "index_strategy must be a TraversalStrategy" in errors[1]
