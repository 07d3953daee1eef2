"""Tests for the rule registry."""

import pytest

from fitch.core.errors import UnknownRuleError
from fitch.rules import ALL_RULES, AndI, ImplyE, ModusTollens, Rule, RuleRegistry, get_rule, get_rule_class, list_rules


def all_subclasses(cls):
    result = set()
    for subclass in cls.__subclasses__():
        result.add(subclass)
        result |= all_subclasses(subclass)
    return result


class TestRuleRegistry:

    def test_sixteen_rules(self):
        assert len(ALL_RULES) == 16
        assert len(list_rules()) == 16
        assert len({rule.name for rule in ALL_RULES}) == 16

    def test_every_rule_class_is_registered(self):
        defined = {cls for cls in all_subclasses(Rule) if cls.__module__.startswith("fitch.rules")}
        assert defined == set(ALL_RULES)

    def test_lookup_by_name_and_alias(self):
        assert get_rule_class("and_i") is AndI
        assert get_rule_class("&i") is AndI
        assert get_rule_class("AND_I") is AndI
        assert get_rule_class("->e") is ImplyE
        assert get_rule_class("mt") is ModusTollens

    def test_create_rule(self):
        assert get_rule("∧i", 1, 2) == AndI(1, 2)

    def test_unknown_rule(self):
        with pytest.raises(UnknownRuleError) as excinfo:
            get_rule_class("and_x")
        assert excinfo.value.name == "and_x"

    def test_register_custom_rule(self):
        registry = RuleRegistry()

        class Custom(AndI):
            name = "custom"
            aliases = ("cu",)

        registry.register(Custom)
        assert registry.get_rule_class("cu") is Custom
        assert "custom" in registry.list_rules()
        # the module-level registry is unaffected
        with pytest.raises(UnknownRuleError):
            get_rule_class("custom")
