"""Core data structures: propositions and errors."""

from .logic import (
    Proposition, Bottom, Symbol, And, Or, Imply, ProofBox, SubProof,
    PropVariant, negated, format_prop, UNICODE, ASCII, LATEX
)
from .errors import (
    FitchError, InvalidStepIndex, ExpectedPropVariant, PropMismatch,
    CannotCloseGlobalScope, UnclosedScopeError, CommandSyntaxError,
    UnknownRuleError, RuleArgumentError
)

__all__ = [
    # Logic
    'Proposition', 'Bottom', 'Symbol', 'And', 'Or', 'Imply', 'ProofBox', 'SubProof',
    'PropVariant', 'negated', 'format_prop', 'UNICODE', 'ASCII', 'LATEX',
    # Errors
    'FitchError', 'InvalidStepIndex', 'ExpectedPropVariant', 'PropMismatch',
    'CannotCloseGlobalScope', 'UnclosedScopeError', 'CommandSyntaxError',
    'UnknownRuleError', 'RuleArgumentError'
]
