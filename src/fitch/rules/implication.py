"""Rules for implication, including modus tollens."""

from dataclasses import dataclass

from fitch.core.logic import Imply, negated
from .base import INDEX, Rule, check_eq, expect_variant, get_subproof


@dataclass(frozen=True)
class ImplyI(Rule):
    name = "imply_i"
    label = "→i"
    arguments = (INDEX,)
    aliases = ("->i", "→i", "⇒i")
    schema = "[φ]…ψ ⊢ φ → ψ"

    box: int

    def conclusion(self, proof):
        subproof = get_subproof(proof, self.box)
        return Imply(subproof.assumption, subproof.derived_prop)


@dataclass(frozen=True)
class ImplyE(Rule):
    """Modus ponens."""
    name = "imply_e"
    label = "→e"
    arguments = (INDEX, INDEX)
    aliases = ("->e", "→e", "⇒e", "mp")
    schema = "φ → ψ, φ ⊢ ψ"

    implication: int
    lhs_proof: int

    def conclusion(self, proof):
        implication = expect_variant(proof.get_prop(self.implication), Imply)
        check_eq(implication.lhs, proof.get_prop(self.lhs_proof))
        return implication.rhs


@dataclass(frozen=True)
class ModusTollens(Rule):
    name = "modus_tollens"
    label = "MT"
    arguments = (INDEX, INDEX)
    aliases = ("mt",)
    schema = "φ → ψ, ¬ψ ⊢ ¬φ"

    implication: int
    negated_rhs: int

    def conclusion(self, proof):
        implication = expect_variant(proof.get_prop(self.implication), Imply)
        check_eq(negated(implication.rhs), proof.get_prop(self.negated_rhs))
        return negated(implication.lhs)
