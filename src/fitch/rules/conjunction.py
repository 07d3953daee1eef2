"""Introduction and elimination rules for conjunction."""

from dataclasses import dataclass

from fitch.core.logic import And
from .base import INDEX, Rule, expect_variant


@dataclass(frozen=True)
class AndI(Rule):
    name = "and_i"
    label = "∧i"
    arguments = (INDEX, INDEX)
    aliases = ("∧i", "&i", "^i")
    schema = "φ, ψ ⊢ φ ∧ ψ"

    lhs: int
    rhs: int

    def conclusion(self, proof):
        return And(proof.get_prop(self.lhs), proof.get_prop(self.rhs))


@dataclass(frozen=True)
class AndELhs(Rule):
    name = "and_e_lhs"
    label = "∧e₁"
    arguments = (INDEX,)
    aliases = ("∧e_lhs", "&e_lhs", "^e_lhs", "∧e1", "&e1")
    schema = "φ ∧ ψ ⊢ φ"

    conjunction: int

    def conclusion(self, proof):
        return expect_variant(proof.get_prop(self.conjunction), And).lhs


@dataclass(frozen=True)
class AndERhs(Rule):
    name = "and_e_rhs"
    label = "∧e₂"
    arguments = (INDEX,)
    aliases = ("∧e_rhs", "&e_rhs", "^e_rhs", "∧e2", "&e2")
    schema = "φ ∧ ψ ⊢ ψ"

    conjunction: int

    def conclusion(self, proof):
        return expect_variant(proof.get_prop(self.conjunction), And).rhs
