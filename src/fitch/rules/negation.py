"""Rules for negation and absurdity.

Negation is not a connective of its own: ``¬φ`` is ``φ → ⊥``, so these
rules destructure implications whose right-hand side is ``⊥``.
"""

from dataclasses import dataclass

from fitch.core.logic import Bottom, Imply, Or, Proposition, negated
from .base import INDEX, PROP, Rule, check_eq, expect_variant, get_subproof


@dataclass(frozen=True)
class NegI(Rule):
    name = "neg_i"
    label = "¬i"
    arguments = (INDEX,)
    aliases = ("¬i", "-i", "~i")
    schema = "[φ]…⊥ ⊢ ¬φ"

    box: int

    def conclusion(self, proof):
        subproof = get_subproof(proof, self.box)
        check_eq(Bottom(), subproof.derived_prop)
        return negated(subproof.assumption)


@dataclass(frozen=True)
class NegE(Rule):
    name = "neg_e"
    label = "¬e"
    arguments = (INDEX, INDEX)
    aliases = ("¬e", "-e", "~e")
    schema = "φ, ¬φ ⊢ ⊥"

    prop: int
    neg_prop: int

    def conclusion(self, proof):
        prop = proof.get_prop(self.prop)
        negation = expect_variant(proof.get_prop(self.neg_prop), Imply)
        check_eq(negation.lhs, prop)
        check_eq(Bottom(), negation.rhs)
        return Bottom()


@dataclass(frozen=True)
class BottomE(Rule):
    name = "bottom_e"
    label = "⊥e"
    arguments = (INDEX, PROP)
    aliases = ("⊥e", "false_e")
    schema = "⊥ ⊢ φ"

    bottom: int
    prop: Proposition

    def conclusion(self, proof):
        check_eq(Bottom(), proof.get_prop(self.bottom))
        return self.prop


@dataclass(frozen=True)
class DoubleNegE(Rule):
    name = "neg_neg_e"
    label = "¬¬e"
    arguments = (INDEX,)
    aliases = ("¬¬e", "--e", "~~e")
    schema = "¬¬φ ⊢ φ"

    double_negation: int

    def conclusion(self, proof):
        outer = expect_variant(proof.get_prop(self.double_negation), Imply)
        check_eq(Bottom(), outer.rhs)
        inner = expect_variant(outer.lhs, Imply)
        check_eq(Bottom(), inner.rhs)
        return inner.lhs


@dataclass(frozen=True)
class DoubleNegI(Rule):
    name = "neg_neg_i"
    label = "¬¬i"
    arguments = (INDEX,)
    aliases = ("¬¬i", "--i", "~~i")
    schema = "φ ⊢ ¬¬φ"

    prop: int

    def conclusion(self, proof):
        return negated(negated(proof.get_prop(self.prop)))


@dataclass(frozen=True)
class ProofByContradiction(Rule):
    name = "proof_by_contradiction"
    label = "PBC"
    arguments = (INDEX,)
    aliases = ("pbc",)
    schema = "[¬φ]…⊥ ⊢ φ"

    box: int

    def conclusion(self, proof):
        subproof = get_subproof(proof, self.box)
        assumption = expect_variant(subproof.assumption, Imply)
        check_eq(Bottom(), assumption.rhs)
        check_eq(Bottom(), subproof.derived_prop)
        return assumption.lhs


@dataclass(frozen=True)
class LawOfExcludedMiddle(Rule):
    name = "law_of_excluded_middle"
    label = "LEM"
    arguments = (PROP,)
    aliases = ("lem",)
    schema = "⊢ φ ∨ ¬φ"

    prop: Proposition

    def conclusion(self, proof):
        return Or(self.prop, negated(self.prop))
