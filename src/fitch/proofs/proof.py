"""The proof engine: a stack of scopes and a shared index counter."""

import logging
from typing import List, Optional, Tuple

from fitch.core.errors import CannotCloseGlobalScope, InvalidStepIndex
from fitch.core.logic import Proposition, ProofBox
from .scope import Scope
from .step import Assumption, Copy, Premise, RuleStep, Step, StepIndex

logger = logging.getLogger(__name__)


class Proof:
    """A natural deduction proof under construction.

    ``scopes[0]`` is the global scope; every open assumption adds one scope
    on top of it. Step indices come from a single counter shared by all
    scopes, so an index identifies a step for the whole lifetime of the
    proof. Every mutating method validates before it changes anything: a
    method that raises leaves the proof as it was.
    """

    def __init__(self):
        self._scopes: List[Scope] = [Scope()]
        self._next_index = 1

    @property
    def scopes(self) -> Tuple[Scope, ...]:
        """Scopes from the outermost (global) to the innermost."""
        return tuple(self._scopes)

    @property
    def current_scope(self) -> Scope:
        return self._scopes[-1]

    @property
    def depth(self) -> int:
        return len(self._scopes)

    @property
    def next_index(self) -> int:
        return self._next_index

    @property
    def has_open_scopes(self) -> bool:
        return len(self._scopes) > 1

    def _allocate(self) -> StepIndex:
        index = StepIndex(self._next_index)
        self._next_index += 1
        return index

    def _add_step(self, step: Step) -> StepIndex:
        index = self._allocate()
        self.current_scope.insert(index, step)
        logger.debug("step %d: %s (%s)", index, step.prop, step.step_type)
        return index

    def add_premise(self, premise: Proposition) -> StepIndex:
        """Add a premise to the current scope.

        Premises are accepted at any point of the proof, also after
        assumptions and rule applications.
        """
        return self._add_step(Step(premise, Premise()))

    def add_assumption(self, assumption: Proposition) -> StepIndex:
        """Open a new scope whose first step is ``assumption``.

        The returned index is also the index the scope's proof box gets
        when the scope is closed.
        """
        self._scopes.append(Scope())
        logger.debug("opened scope %d", self.depth - 1)
        return self._add_step(Step(assumption, Assumption()))

    def copy(self, index: int) -> StepIndex:
        prop = self.get_prop(index)
        return self._add_step(Step(prop, Copy(index)))

    def close_scope(self):
        """Discharge the innermost assumption.

        The innermost scope is replaced by a single proof box step in its
        parent, keyed by the index of the scope's assumption.
        """
        if len(self._scopes) == 1:
            raise CannotCloseGlobalScope()
        scope = self.current_scope
        if not len(scope):
            raise RuntimeError("Open scope without an assumption")

        subproof = scope.to_subproof()
        self._scopes.pop()
        self.current_scope.insert(subproof.starting_index, Step(ProofBox(subproof), Assumption()))
        logger.debug("closed scope into proof box %d: %s", subproof.starting_index, ProofBox(subproof))

    discharge = close_scope

    def apply_rule(self, rule) -> StepIndex:
        """Check ``rule`` against the proof and add its conclusion."""
        conclusion = rule.conclusion(self)
        return self._add_step(Step(conclusion, RuleStep(rule)))

    def undo(self) -> Optional[StepIndex]:
        """Reverse the most recent index allocation.

        Undoing an assumption removes its whole scope, together with every
        step derived inside it. If the latest step has already been folded
        into a proof box, that box is opened again first. Returns the index
        that was released, or None on an empty proof.
        """
        if self._next_index == 1:
            return None

        latest = self._next_index - 1
        step = self.current_scope.get(latest)
        while step is None or step.is_discharged_box:
            self._reopen_last_box(latest)
            step = self.current_scope.get(latest)

        if isinstance(step.step_type, Assumption):
            if len(self._scopes) == 1 or len(self.current_scope) != 1:
                raise RuntimeError(f"Assumption {latest} does not open the current scope")
            self._scopes.pop()
        else:
            self.current_scope.remove(latest)
        self._next_index = latest
        logger.debug("undid step %d", latest)
        return StepIndex(latest)

    def _reopen_last_box(self, index: int):
        if not len(self.current_scope):
            raise RuntimeError(f"Step {index} is not in the current scope")
        box_index, box_step = self.current_scope.last()
        if not box_step.is_discharged_box:
            raise RuntimeError(f"Step {index} is not in the current scope")
        self.current_scope.remove(box_index)
        self._scopes.append(Scope.from_subproof(box_step.prop.subproof))
        logger.debug("reopened proof box %d", box_index)

    def get_step(self, index: int) -> Step:
        """Look up a step, searching from the innermost scope outwards."""
        for scope in reversed(self._scopes):
            step = scope.get(index)
            if step is not None:
                return step
        raise InvalidStepIndex(index)

    def get_prop(self, index: int) -> Proposition:
        return self.get_step(index).prop

    def __repr__(self) -> str:
        steps = sum(len(scope) for scope in self._scopes)
        return f"Proof(depth={self.depth}, steps={steps}, next_index={self._next_index})"
