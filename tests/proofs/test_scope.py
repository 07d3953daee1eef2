"""Tests for proofs.scope module."""

import pytest

from fitch.core.logic import Symbol
from fitch.proofs import Assumption, Premise, Scope, Step


def make_step(name, step_type=None):
    return Step(Symbol(name), step_type or Premise())


class TestScope:
    """Test the insertion-ordered step store."""

    def test_insertion_order_is_kept(self):
        scope = Scope()
        scope.insert(5, make_step("a", Assumption()))
        scope.insert(2, make_step("b"))
        scope.insert(9, make_step("c"))

        assert [index for index, _ in scope.items()] == [5, 2, 9]
        assert scope.first()[0] == 5
        assert scope.last()[0] == 9
        assert [index for index, _ in scope.sorted_items()] == [2, 5, 9]

    def test_subproof_uses_insertion_order(self):
        scope = Scope()
        scope.insert(4, make_step("a", Assumption()))
        scope.insert(3, make_step("b"))
        subproof = scope.to_subproof()
        assert subproof.starting_index == 4
        assert subproof.assumption == Symbol("a")
        assert subproof.derived_prop == Symbol("b")

    def test_round_trip_through_subproof(self):
        scope = Scope([(1, make_step("a", Assumption())), (2, make_step("b"))])
        copy = Scope.from_subproof(scope.to_subproof())
        assert copy.items() == scope.items()

    def test_duplicate_index_rejected(self):
        scope = Scope()
        scope.insert(1, make_step("a"))
        with pytest.raises(RuntimeError):
            scope.insert(1, make_step("b"))

    def test_remove_and_lookup(self):
        scope = Scope()
        scope.insert(1, make_step("a"))
        assert 1 in scope
        assert scope.get(1).prop == Symbol("a")
        assert scope.remove(1).prop == Symbol("a")
        assert 1 not in scope
        assert scope.get(1) is None
        assert len(scope) == 0
