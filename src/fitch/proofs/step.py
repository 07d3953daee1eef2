"""Proof steps and the tags describing how each step was justified."""

from dataclasses import dataclass
from typing import Dict, NewType, Tuple

from fitch.core.logic import Proposition, ProofBox, UNICODE


StepIndex = NewType("StepIndex", int)


class StepType:
    """How a step was derived."""

    @property
    def cited(self) -> Tuple[int, ...]:
        """Indices of the steps this justification refers to."""
        return ()

    def format(self, connectives: Dict[str, str] = UNICODE) -> str:
        raise NotImplementedError

    def __str__(self):
        return self.format()


@dataclass(frozen=True)
class Premise(StepType):
    def format(self, connectives=UNICODE):
        return "premise"


@dataclass(frozen=True)
class Assumption(StepType):
    def format(self, connectives=UNICODE):
        return "assumption"


@dataclass(frozen=True)
class Copy(StepType):
    source: int

    @property
    def cited(self):
        return (self.source,)

    def format(self, connectives=UNICODE):
        return f"copy {self.source}"


@dataclass(frozen=True)
class RuleStep(StepType):
    rule: "Rule"

    @property
    def cited(self):
        return self.rule.cited

    def format(self, connectives=UNICODE):
        return self.rule.format(connectives)


@dataclass(frozen=True)
class Step:
    """One line of a proof: a proposition and its justification."""
    prop: Proposition
    step_type: StepType

    @property
    def is_discharged_box(self) -> bool:
        """True for the step a closed scope was folded into."""
        return isinstance(self.step_type, Assumption) and isinstance(self.prop, ProofBox)
