"""Introduction and elimination rules for disjunction."""

from dataclasses import dataclass

from fitch.core.logic import Or, Proposition
from .base import INDEX, PROP, Rule, check_eq, expect_variant, get_subproof


@dataclass(frozen=True)
class OrILhs(Rule):
    name = "or_i_lhs"
    label = "∨i₁"
    arguments = (INDEX, PROP)
    aliases = ("∨i_lhs", "|i_lhs", "∨i1", "|i1")
    schema = "φ ⊢ φ ∨ ψ"

    disjunct: int
    other: Proposition

    def conclusion(self, proof):
        return Or(proof.get_prop(self.disjunct), self.other)


@dataclass(frozen=True)
class OrIRhs(Rule):
    name = "or_i_rhs"
    label = "∨i₂"
    arguments = (PROP, INDEX)
    aliases = ("∨i_rhs", "|i_rhs", "∨i2", "|i2")
    schema = "ψ ⊢ φ ∨ ψ"

    other: Proposition
    disjunct: int

    def conclusion(self, proof):
        return Or(self.other, proof.get_prop(self.disjunct))


@dataclass(frozen=True)
class OrE(Rule):
    """Case analysis: both cases of the disjunction lead to the same proposition."""
    name = "or_e"
    label = "∨e"
    arguments = (INDEX, INDEX, INDEX)
    aliases = ("∨e", "|e")
    schema = "φ ∨ ψ, [φ]…χ, [ψ]…χ ⊢ χ"

    or_prop: int
    lhs_box: int
    rhs_box: int

    def conclusion(self, proof):
        disjunction = expect_variant(proof.get_prop(self.or_prop), Or)
        lhs_case = get_subproof(proof, self.lhs_box)
        rhs_case = get_subproof(proof, self.rhs_box)

        check_eq(disjunction.lhs, lhs_case.assumption)
        check_eq(disjunction.rhs, rhs_case.assumption)
        check_eq(lhs_case.derived_prop, rhs_case.derived_prop)
        return lhs_case.derived_prop
