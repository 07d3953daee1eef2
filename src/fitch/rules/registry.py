"""Registry of the inference rules, by name and alias."""

from typing import Any, Dict, List, Type

from fitch.core.errors import UnknownRuleError
from .base import Rule
from .conjunction import AndI, AndELhs, AndERhs
from .disjunction import OrILhs, OrIRhs, OrE
from .implication import ImplyI, ImplyE, ModusTollens
from .negation import (
    NegI, NegE, BottomE, DoubleNegE, DoubleNegI,
    ProofByContradiction, LawOfExcludedMiddle
)

ALL_RULES = (
    AndI, AndELhs, AndERhs,
    OrILhs, OrIRhs, OrE,
    NegI, NegE,
    ImplyI, ImplyE,
    BottomE,
    DoubleNegE,
    ModusTollens,
    DoubleNegI,
    ProofByContradiction,
    LawOfExcludedMiddle,
)


class RuleRegistry:
    """Registry for managing inference rules."""

    def __init__(self):
        self._rules: Dict[str, Type[Rule]] = {}
        self._aliases: Dict[str, str] = {}
        self._register_default_rules()

    def _register_default_rules(self):
        """Register the natural deduction rules."""
        for rule_class in ALL_RULES:
            self.register(rule_class)

    def register(self, rule_class: Type[Rule]):
        """Register a rule under its name and aliases."""
        name = rule_class.name.lower()
        self._rules[name] = rule_class
        for alias in rule_class.aliases:
            self._aliases[alias.lower()] = name

    def get_rule_class(self, name: str) -> Type[Rule]:
        """Resolve a rule name or alias."""
        key = name.lower()
        key = self._aliases.get(key, key)
        if key not in self._rules:
            raise UnknownRuleError(name)
        return self._rules[key]

    def create_rule(self, name: str, *args: Any) -> Rule:
        """Create a rule instance from positional arguments."""
        return self.get_rule_class(name).from_arguments(args)

    def list_rules(self) -> List[str]:
        """List canonical rule names."""
        return list(self._rules.keys())


_registry = RuleRegistry()


def get_rule_class(name: str) -> Type[Rule]:
    return _registry.get_rule_class(name)


def get_rule(name: str, *args: Any) -> Rule:
    """Get a rule instance by name or alias."""
    return _registry.create_rule(name, *args)


def list_rules() -> List[str]:
    return _registry.list_rules()
