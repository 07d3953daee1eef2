"""
Fitch: an interactive natural deduction proof assistant for propositional logic.

A proof is built one step at a time: premises, assumptions that open proof
boxes, applications of inference rules and discharges that close boxes.
Every step is checked against the proof before it is added. It includes:

- Propositional formulas (negation is represented as ``φ → ⊥``)
- Proofs as stacks of scopes with a shared step counter
- Sixteen natural deduction rules
- A command language with a lark parser
- ASCII and LaTeX (logicproof) rendering
- An interactive command-line editor

Basic usage:
    >>> from fitch import *
    >>> proof = Proof()
    >>> q = proof.add_premise(Symbol("q"))
    >>> p = proof.add_assumption(Symbol("p"))
    >>> proof.copy(q)
    3
    >>> proof.close_scope()
    >>> print(proof.get_prop(proof.apply_rule(ImplyI(p))))
    p → q
"""

__version__ = "0.1.0"

# Propositions and errors
from fitch.core import (
    Proposition, Bottom, Symbol, And, Or, Imply, ProofBox, SubProof,
    PropVariant, negated, format_prop,
    FitchError, InvalidStepIndex, ExpectedPropVariant, PropMismatch,
    CannotCloseGlobalScope, UnclosedScopeError, CommandSyntaxError,
    UnknownRuleError, RuleArgumentError
)

# Proof engine
from fitch.proofs import (
    StepIndex, StepType, Premise, Assumption, Copy, RuleStep, Step,
    Scope, Proof, to_graph, unused_premises
)

# Inference rules
from fitch.rules import (
    Rule, AndI, AndELhs, AndERhs, OrILhs, OrIRhs, OrE, NegI, NegE,
    ImplyI, ImplyE, BottomE, DoubleNegE, ModusTollens, DoubleNegI,
    ProofByContradiction, LawOfExcludedMiddle,
    get_rule, list_rules
)

# Parsing and rendering
from fitch.syntax import parse_command, parse_prop
from fitch.fileformats import get_format_handler

# Configuration
from fitch.utils.config import get_config


__all__ = [
    # Version
    "__version__",

    # Propositions
    "Proposition", "Bottom", "Symbol", "And", "Or", "Imply", "ProofBox", "SubProof",
    "PropVariant", "negated", "format_prop",

    # Errors
    "FitchError", "InvalidStepIndex", "ExpectedPropVariant", "PropMismatch",
    "CannotCloseGlobalScope", "UnclosedScopeError", "CommandSyntaxError",
    "UnknownRuleError", "RuleArgumentError",

    # Proofs
    "StepIndex", "StepType", "Premise", "Assumption", "Copy", "RuleStep", "Step",
    "Scope", "Proof", "to_graph", "unused_premises",

    # Rules
    "Rule", "AndI", "AndELhs", "AndERhs", "OrILhs", "OrIRhs", "OrE", "NegI", "NegE",
    "ImplyI", "ImplyE", "BottomE", "DoubleNegE", "ModusTollens", "DoubleNegI",
    "ProofByContradiction", "LawOfExcludedMiddle",
    "get_rule", "list_rules",

    # Parsing and rendering
    "parse_command", "parse_prop", "get_format_handler",

    # Configuration
    "get_config",
]
