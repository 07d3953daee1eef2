"""Base interface for natural deduction rules."""

from abc import ABC, abstractmethod
from dataclasses import fields
from typing import ClassVar, Dict, Sequence, Tuple, Type

from fitch.core.errors import ExpectedPropVariant, PropMismatch, RuleArgumentError
from fitch.core.logic import Proposition, ProofBox, SubProof, UNICODE, format_prop

INDEX = "index"
PROP = "prop"


class Rule(ABC):
    """Abstract base class for inference rules.

    Concrete rules are frozen dataclasses whose fields are the rule's inputs,
    in the order given by ``arguments``.
    """
    name: ClassVar[str]
    label: ClassVar[str]
    arguments: ClassVar[Tuple[str, ...]]
    aliases: ClassVar[Tuple[str, ...]] = ()
    schema: ClassVar[str] = ""

    @abstractmethod
    def conclusion(self, proof) -> Proposition:
        """
        Check the rule's preconditions against the proof.

        Args:
            proof: The proof the rule is applied to; it is only read

        Returns:
            The proposition the rule derives

        Raises:
            InvalidStepIndex: If a cited step is not visible
            ExpectedPropVariant: If a cited proposition has the wrong shape
            PropMismatch: If two propositions that must be equal differ
        """
        pass

    @property
    def values(self) -> tuple:
        return tuple(getattr(self, f.name) for f in fields(self))

    @property
    def cited(self) -> Tuple[int, ...]:
        """Step indices the rule refers to."""
        return tuple(value for kind, value in zip(self.arguments, self.values) if kind == INDEX)

    @classmethod
    def from_arguments(cls, args: Sequence) -> "Rule":
        """Build the rule from positional arguments, checking their kinds."""
        if len(args) != len(cls.arguments):
            raise RuleArgumentError(cls.name, f"expected {len(cls.arguments)} argument(s) "
                                              f"({cls.usage()}), got {len(args)}")
        for position, (kind, arg) in enumerate(zip(cls.arguments, args), start=1):
            if kind == INDEX and not isinstance(arg, int):
                raise RuleArgumentError(cls.name, f"argument {position} must be a step index")
            if kind == PROP and not isinstance(arg, Proposition):
                raise RuleArgumentError(cls.name, f"argument {position} must be a proposition")
        return cls(*args)

    @classmethod
    def usage(cls) -> str:
        return " ".join([cls.name] + [f"<{kind}>" for kind in cls.arguments])

    def format(self, connectives: Dict[str, str] = UNICODE) -> str:
        args = ", ".join(format_prop(value, connectives) if kind == PROP else str(value)
                         for kind, value in zip(self.arguments, self.values))
        return f"{self.label} {args}"

    def __str__(self):
        return self.format()


def expect_variant(prop: Proposition, prop_class: Type[Proposition]):
    """Return ``prop`` if it is a ``prop_class``, raise ExpectedPropVariant otherwise."""
    if not isinstance(prop, prop_class):
        raise ExpectedPropVariant(prop_class.variant, prop)
    return prop


def check_eq(expected: Proposition, got: Proposition):
    if expected != got:
        raise PropMismatch(expected, got)


def get_subproof(proof, index: int) -> SubProof:
    """Look up a step that has to be a discharged proof box."""
    return expect_variant(proof.get_prop(index), ProofBox).subproof
