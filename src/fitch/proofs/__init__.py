"""
Proof representation and management.
"""

from .step import StepIndex, StepType, Premise, Assumption, Copy, RuleStep, Step
from .scope import Scope
from .proof import Proof
from .graph import to_graph, unused_premises

__all__ = [
    'StepIndex', 'StepType', 'Premise', 'Assumption', 'Copy', 'RuleStep', 'Step',
    'Scope', 'Proof',
    'to_graph', 'unused_premises'
]
