import logging
import re

import pytest

from validatable import CheckKind, Rule, RuleSet, RuleSetBuilder
from validatable.utils import attribute_accessor


class TestRuleSetBuilder:
    def test_rules_keep_declaration_order(self):
        rule_set = (
            RuleSetBuilder()
            .declare("age", {"presence": True})
            .declare("number", {"format": r"\d*"})
            .declare("age", {"type": int})
            .build()
        )
        assert [(rule.attribute, rule.kind) for rule in rule_set] == [
            ("age", "presence"),
            ("number", "format"),
            ("age", "type"),
        ]
        assert rule_set.attributes == ("age", "number")

    def test_options_order_within_one_declaration(self):
        rule_set = RuleSetBuilder().declare("name", {"type": str, "presence": True, "format": "[A-Z].*"}).build()
        assert [rule.kind for rule in rule_set] == ["type", "presence", "format"]

    @pytest.mark.parametrize("falsy", [False, None, 0, ""])
    def test_falsy_arguments_register_nothing(self, falsy):
        rule_set = RuleSetBuilder().declare("first_name", {"presence": falsy}).build()
        assert len(rule_set) == 0
        assert rule_set == RuleSet()

    def test_string_patterns_get_compiled(self):
        rule_set = RuleSetBuilder().declare("number", {"format": r"\d*"}).build()
        assert rule_set.rules[0].argument == re.compile(r"\d*")

    def test_invalid_pattern_fails_on_declaration(self):
        with pytest.raises(re.error):
            RuleSetBuilder().declare("number", {"format": "(unclosed"})

    def test_enum_keys_are_stored_by_name(self):
        rule_set = RuleSetBuilder().declare("age", {CheckKind.TYPE: int}).build()
        assert rule_set.rules == (Rule("age", "type", int),)

    def test_unknown_kind_gets_registered(self, caplog):
        with caplog.at_level(logging.WARNING, logger="validatable.rules"):
            rule_set = RuleSetBuilder().declare("age", {"positive": True}).build()
        assert rule_set.rules == (Rule("age", "positive", True),)
        assert "unknown check kind 'positive'" in caplog.text

    @pytest.mark.parametrize("attribute", ["", None, 42])
    def test_invalid_attribute(self, attribute):
        with pytest.raises(TypeError):
            RuleSetBuilder().declare(attribute, {"presence": True})

    def test_options_must_be_a_mapping(self):
        with pytest.raises(TypeError, match="options must be a mapping"):
            RuleSetBuilder().declare("age", [("presence", True)])  # type:ignore[arg-type]

    def test_extending_does_not_change_the_base(self):
        base = RuleSetBuilder().declare("age", {"presence": True}).build()
        extended = RuleSetBuilder(base).declare("age", {"type": int}).build()
        assert len(base) == 1
        assert len(extended) == 2
        assert extended.rules[0] is base.rules[0]


class TestRuleSet:
    def test_default_accessor_reads_attribute(self):
        class Host:
            age = 3

        rule_set = RuleSetBuilder().declare("age", {"presence": True}).build()
        assert rule_set.accessor_for("age") == attribute_accessor("age")
        assert rule_set.accessor_for("age")(Host()) == 3

    def test_default_accessor_reports_missing_attribute(self):
        with pytest.raises(AttributeError, match="age: Not found"):
            attribute_accessor("age")(object())

    def test_declared_accessor(self):
        def read_age(instance):
            return instance["age"]

        rule_set = RuleSetBuilder().declare("age", {"type": int}, accessor=read_age).build()
        assert rule_set.accessor_for("age") is read_age
        assert rule_set.accessor_for("age")({"age": 20}) == 20

    def test_accessors_are_immutable(self):
        rule_set = RuleSetBuilder().declare("age", {"type": int}, accessor=len).build()
        with pytest.raises(TypeError):
            rule_set.accessors["age"] = abs  # type:ignore[index]
