"""End-to-end tests: complete textbook proofs typed as commands."""

import unittest

from fitch.cli import Session
from fitch.syntax import parse_prop
from fitch.utils.config import Config
from fitch.fileformats import LatexFormat


def prove(config, lines):
    session = Session(config)
    for line in lines.strip().splitlines():
        response = session.run_line(line)
        if response.error:
            raise AssertionError(f"{line!r}: {response.output}")
    return session


class TestTextbookProofs(unittest.TestCase):

    def setUp(self):
        self.config = Config()
        self.config.update({"repl": {"show_after_command": False}})

    def assertConcludes(self, session, text):
        proof = session.proof
        self.assertFalse(proof.has_open_scopes)
        _, step = proof.scopes[0].last()
        self.assertEqual(step.prop, parse_prop(text))
        # every finished proof can be typeset
        self.assertTrue(LatexFormat().format_proof(proof).startswith("\\begin{logicproof}"))

    def test_commutativity_of_disjunction(self):
        session = prove(self.config, """
            premise p | q
            assume p
            rule or_i_rhs q 2
            discharge
            assume q
            rule or_i_lhs 4 p
            discharge
            rule or_e 1 2 4
        """)
        self.assertConcludes(session, "q | p")

    def test_contraposition(self):
        session = prove(self.config, """
            premise p -> q
            assume -q
            rule mt 1 2
            discharge
            rule imply_i 2
        """)
        self.assertConcludes(session, "-q -> -p")

    def test_contraposition_without_modus_tollens(self):
        session = prove(self.config, """
            premise p -> q
            assume -q
            assume p
            rule ->e 1 3
            rule neg_e 4 2
            discharge
            rule neg_i 3
            discharge
            rule ->i 2
        """)
        self.assertConcludes(session, "-q -> -p")

    def test_excluded_middle_by_contradiction(self):
        session = prove(self.config, """
            assume -(p | -p)
            assume p
            rule or_i_lhs 2 -p
            rule neg_e 3 1
            discharge
            rule neg_i 2
            rule or_i_rhs p 5
            rule neg_e 6 1
            discharge
            rule pbc 1
        """)
        self.assertConcludes(session, "p | -p")
        self.assertEqual(session.run_line("unused").output, "Every premise is used")

    def test_double_negation_round_trip(self):
        session = prove(self.config, """
            premise p
            rule --i 1
            rule --e 2
        """)
        self.assertConcludes(session, "p")

    def test_explosion(self):
        session = prove(self.config, """
            premise p
            premise -p
            rule neg_e 1 2
            rule bottom_e 3 q & r
        """)
        self.assertConcludes(session, "q & r")

    def test_currying(self):
        session = prove(self.config, """
            premise p & q -> r
            assume p
            assume q
            rule and_i 2 3
            rule mp 1 4
            discharge
            rule ->i 3
            discharge
            rule ->i 2
        """)
        self.assertConcludes(session, "p -> q -> r")

    def test_undo_and_retry(self):
        session = prove(self.config, """
            premise p
            premise q
            assume r
            copy 1
            discharge
            undo
            undo
            rule and_i 1 2
        """)
        self.assertEqual(session.proof.next_index, 4)
        self.assertConcludes(session, "p & q")
