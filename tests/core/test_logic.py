"""Tests for core.logic module."""

import unittest
from fitch.core.logic import (
    Bottom, Symbol, And, Or, Imply, ProofBox, SubProof,
    PropVariant, negated, format_prop, ASCII, LATEX
)
from fitch.proofs.step import Step, Assumption, Copy


class TestPropositions(unittest.TestCase):
    """Test construction and structural equality."""

    def setUp(self):
        self.p = Symbol("p")
        self.q = Symbol("q")
        self.r = Symbol("r")

    def test_symbol_equality(self):
        self.assertEqual(Symbol("p"), self.p)
        self.assertNotEqual(self.p, self.q)
        self.assertEqual(hash(Symbol("p")), hash(self.p))

    def test_bottom_equality(self):
        self.assertEqual(Bottom(), Bottom())
        self.assertNotEqual(Bottom(), Symbol("bottom"))

    def test_deep_equality(self):
        left = Imply(And(self.p, self.q), Or(self.r, Bottom()))
        right = Imply(And(Symbol("p"), Symbol("q")), Or(Symbol("r"), Bottom()))
        self.assertEqual(left, right)
        self.assertEqual(hash(left), hash(right))

        # Same children, different connective
        self.assertNotEqual(And(self.p, self.q), Or(self.p, self.q))
        # Order matters
        self.assertNotEqual(And(self.p, self.q), And(self.q, self.p))

    def test_usable_in_sets(self):
        props = {And(self.p, self.q), And(Symbol("p"), Symbol("q")), Or(self.p, self.q)}
        self.assertEqual(len(props), 2)

    def test_variants(self):
        self.assertEqual(Bottom().variant, PropVariant.BOTTOM)
        self.assertEqual(self.p.variant, PropVariant.SYMBOL)
        self.assertEqual(And(self.p, self.q).variant, PropVariant.AND)
        self.assertEqual(Or(self.p, self.q).variant, PropVariant.OR)
        self.assertEqual(Imply(self.p, self.q).variant, PropVariant.IMPLY)
        self.assertEqual(str(PropVariant.IMPLY), "Imply")


class TestNegation(unittest.TestCase):
    """Negation is an implication into bottom."""

    def test_negated(self):
        p = Symbol("p")
        self.assertEqual(negated(p), Imply(p, Bottom()))
        self.assertTrue(negated(p).is_negation)
        self.assertFalse(Imply(p, p).is_negation)
        self.assertFalse(p.is_negation)

    def test_double_negation(self):
        p = And(Symbol("p"), Symbol("q"))
        self.assertEqual(negated(negated(p)), Imply(Imply(p, Bottom()), Bottom()))


class TestFormatting(unittest.TestCase):
    """Test rendering with precedence."""

    def setUp(self):
        self.p = Symbol("p")
        self.q = Symbol("q")
        self.r = Symbol("r")

    def test_atoms(self):
        self.assertEqual(str(self.p), "p")
        self.assertEqual(str(Bottom()), "⊥")

    def test_and_binds_tighter_than_or(self):
        self.assertEqual(str(Or(And(self.p, self.q), self.r)), "p ∧ q ∨ r")
        self.assertEqual(str(And(Or(self.p, self.q), self.r)), "(p ∨ q) ∧ r")

    def test_or_binds_tighter_than_imply(self):
        self.assertEqual(str(Imply(Or(self.p, self.q), self.r)), "p ∨ q → r")
        self.assertEqual(str(Or(Imply(self.p, self.q), self.r)), "(p → q) ∨ r")

    def test_imply_is_right_associative(self):
        self.assertEqual(str(Imply(self.p, Imply(self.q, self.r))), "p → q → r")
        self.assertEqual(str(Imply(Imply(self.p, self.q), self.r)), "(p → q) → r")

    def test_left_associative_conjunction(self):
        self.assertEqual(str(And(And(self.p, self.q), self.r)), "p ∧ q ∧ r")
        self.assertEqual(str(And(self.p, And(self.q, self.r))), "p ∧ (q ∧ r)")

    def test_negation(self):
        self.assertEqual(str(negated(self.p)), "¬p")
        self.assertEqual(str(negated(negated(self.p))), "¬¬p")
        self.assertEqual(str(negated(And(self.p, self.q))), "¬(p ∧ q)")
        self.assertEqual(str(Imply(negated(self.p), self.q)), "¬p → q")
        self.assertEqual(str(negated(Imply(self.p, self.q))), "¬(p → q)")

    def test_ascii_connectives(self):
        prop = Imply(And(self.p, negated(self.q)), Or(self.r, Bottom()))
        self.assertEqual(format_prop(prop, ASCII), "p & -q -> r | bottom")

    def test_latex_connectives(self):
        prop = Imply(self.p, And(self.q, Bottom()))
        self.assertEqual(format_prop(prop, LATEX), r"\text{p} \to \text{q} \land \bot")


class TestSubProof(unittest.TestCase):
    """Test the sub-proof of a discharged scope."""

    def setUp(self):
        self.steps = [
            (2, Step(Symbol("p"), Assumption())),
            (3, Step(Symbol("q"), Copy(1))),
        ]

    def test_assumption_and_derived(self):
        subproof = SubProof(self.steps)
        self.assertEqual(subproof.starting_index, 2)
        self.assertEqual(subproof.assumption, Symbol("p"))
        self.assertEqual(subproof.derived_prop, Symbol("q"))
        self.assertEqual(len(subproof), 2)
        self.assertEqual(list(subproof), self.steps)

    def test_single_step(self):
        subproof = SubProof(self.steps[:1])
        self.assertEqual(subproof.assumption, subproof.derived_prop)

    def test_empty_subproof_rejected(self):
        with self.assertRaises(ValueError):
            SubProof([])

    def test_proof_box_equality(self):
        box1 = ProofBox(SubProof(self.steps))
        box2 = ProofBox(SubProof(list(self.steps)))
        self.assertEqual(box1, box2)
        self.assertEqual(hash(box1), hash(box2))
        self.assertEqual(box1.variant, PropVariant.PROOF_BOX)
        self.assertNotEqual(box1, ProofBox(SubProof(self.steps[:1])))

    def test_proof_box_rendering(self):
        box = ProofBox(SubProof(self.steps))
        self.assertEqual(str(box), "[p … q]")


if __name__ == '__main__':
    unittest.main()
