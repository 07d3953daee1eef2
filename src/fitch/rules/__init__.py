"""
Natural deduction inference rules.
"""

from .base import Rule, INDEX, PROP
from .conjunction import AndI, AndELhs, AndERhs
from .disjunction import OrILhs, OrIRhs, OrE
from .implication import ImplyI, ImplyE, ModusTollens
from .negation import (
    NegI, NegE, BottomE, DoubleNegE, DoubleNegI,
    ProofByContradiction, LawOfExcludedMiddle
)
from .registry import ALL_RULES, RuleRegistry, get_rule, get_rule_class, list_rules

__all__ = [
    'Rule', 'INDEX', 'PROP',
    'AndI', 'AndELhs', 'AndERhs',
    'OrILhs', 'OrIRhs', 'OrE',
    'NegI', 'NegE', 'BottomE', 'DoubleNegE', 'DoubleNegI',
    'ImplyI', 'ImplyE', 'ModusTollens',
    'ProofByContradiction', 'LawOfExcludedMiddle',
    'ALL_RULES', 'RuleRegistry', 'get_rule', 'get_rule_class', 'list_rules'
]
