"""Tests for the graph options model and settings files."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from schemagraph.formats.options import (
    GraphOptions,
    HideRule,
    load_options,
    parse_hide_rule,
)


class TestGraphOptions:
    def test_defaults(self):
        options = GraphOptions()
        assert not options.sort_by_alphabet
        assert not options.skip_deprecated
        assert not options.show_hidden
        assert options.hide_rules == []
        assert options.root_type is None
        assert not options.hide_root
        assert not options.show_leaf_fields

    def test_camel_case_aliases(self):
        options = GraphOptions.model_validate(
            {
                "sortByAlphabet": True,
                "hideRules": [{"pattern": "^Hidden", "proxyField": "value"}],
                "rootType": "Mutation",
                "showLeafFields": True,
            }
        )
        assert options.sort_by_alphabet
        assert options.hide_rules == [HideRule(pattern="^Hidden", proxy_field="value")]
        assert options.root_type == "Mutation"
        assert options.show_leaf_fields

    def test_field_names_accepted(self):
        options = GraphOptions(skip_deprecated=True)
        assert options.skip_deprecated

    def test_rule_requires_pattern(self):
        with pytest.raises(ValidationError):
            HideRule.model_validate({"proxyField": "value"})


class TestLoadOptions:
    def test_yaml_file(self, tmp_path: Path):
        path = tmp_path / "settings.yaml"
        path.write_text(
            "skipDeprecated: true\n"
            "hideRules:\n"
            "  - pattern: ^Connection$\n"
            "    proxyField: edges\n"
        )
        options = load_options(path)
        assert options.skip_deprecated
        assert options.hide_rules[0].pattern == "^Connection$"
        assert options.hide_rules[0].proxy_field == "edges"

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "settings.yaml"
        path.write_text("")
        assert load_options(path) == GraphOptions()


class TestParseHideRule:
    def test_pattern_only(self):
        assert parse_hide_rule("^Hidden") == HideRule(pattern="^Hidden")

    def test_pattern_with_proxy(self):
        assert parse_hide_rule("^Hidden=value") == HideRule(pattern="^Hidden", proxy_field="value")

    def test_empty_proxy(self):
        assert parse_hide_rule("^Hidden=").proxy_field is None

    def test_lookahead_pattern_kept_whole(self):
        assert parse_hide_rule("^(?=Hidden)") == HideRule(pattern="^(?=Hidden)")

    def test_proxy_after_pattern_with_equals(self):
        rule = parse_hide_rule("^(?=Hidden)=value")
        assert rule == HideRule(pattern="^(?=Hidden)", proxy_field="value")

    def test_non_name_suffix_is_pattern(self):
        assert parse_hide_rule("a=b.c").proxy_field is None
        assert parse_hide_rule("a=b.c").pattern == "a=b.c"
