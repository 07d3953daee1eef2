"""Propositional formulas and the sub-proofs that closed scopes fold into."""

from enum import Enum
from typing import Dict, Iterator, Tuple


class PropVariant(Enum):
    """Top-level shape of a proposition, used when reporting rule failures."""
    BOTTOM = "Bottom"
    SYMBOL = "Symbol"
    AND = "And"
    OR = "Or"
    IMPLY = "Imply"
    PROOF_BOX = "ProofBox"

    def __str__(self):
        return self.value


# Connective tables for format_prop
UNICODE = {"bottom": "⊥", "not": "¬", "and": " ∧ ", "or": " ∨ ", "imply": " → ", "symbol": "{}"}
ASCII = {"bottom": "bottom", "not": "-", "and": " & ", "or": " | ", "imply": " -> ", "symbol": "{}"}
LATEX = {"bottom": r"\bot", "not": r"\lnot ", "and": r" \land ", "or": r" \lor ", "imply": r" \to ",
         "symbol": r"\text{{{}}}"}

_IMPLY_LEVEL = 1
_OR_LEVEL = 2
_AND_LEVEL = 3
_ATOM_LEVEL = 4


class Proposition:
    """Base class of the formula tree.

    Propositions are values: they are built bottom-up, never modified after
    construction and compared by structure.
    """
    variant: PropVariant = None

    def __ne__(self, other):
        return not self == other

    def __str__(self):
        return format_prop(self)

    @property
    def is_negation(self) -> bool:
        """True for ``φ → ⊥``, the representation of ``¬φ``."""
        return False


class Bottom(Proposition):
    variant = PropVariant.BOTTOM

    def __eq__(self, other):
        return isinstance(other, Bottom)

    def __hash__(self):
        return hash(PropVariant.BOTTOM)

    def __repr__(self):
        return "Bottom()"


class Symbol(Proposition):
    variant = PropVariant.SYMBOL

    def __init__(self, name: str):
        self.name = name

    def __eq__(self, other):
        if not isinstance(other, Symbol):
            return False
        return self.name == other.name

    def __hash__(self):
        if not hasattr(self, '_hash'):
            self._hash = hash((PropVariant.SYMBOL, self.name))
        return self._hash

    def __repr__(self):
        return f"Symbol({self.name!r})"


class _Binary(Proposition):
    def __init__(self, lhs: Proposition, rhs: Proposition):
        self.lhs = lhs
        self.rhs = rhs

    def __eq__(self, other):
        if type(self) is not type(other):
            return False
        return self.lhs == other.lhs and self.rhs == other.rhs

    def __hash__(self):
        if not hasattr(self, '_hash'):
            self._hash = hash((self.variant, self.lhs, self.rhs))
        return self._hash

    def __repr__(self):
        return f"{type(self).__name__}({self.lhs!r}, {self.rhs!r})"


class And(_Binary):
    variant = PropVariant.AND


class Or(_Binary):
    variant = PropVariant.OR


class Imply(_Binary):
    variant = PropVariant.IMPLY

    @property
    def is_negation(self) -> bool:
        return isinstance(self.rhs, Bottom)


class SubProof:
    """The ordered (index, step) pairs of a discharged scope.

    The first pair is the assumption that opened the scope, the last one is
    the proposition derived under it.
    """

    def __init__(self, steps):
        self.steps = tuple(steps)
        if not self.steps:
            raise ValueError("A sub-proof needs at least its assumption")

    @property
    def starting_index(self) -> int:
        return self.steps[0][0]

    @property
    def assumption(self) -> Proposition:
        return self.steps[0][1].prop

    @property
    def derived_prop(self) -> Proposition:
        return self.steps[-1][1].prop

    def __iter__(self) -> Iterator[Tuple[int, "Step"]]:
        return iter(self.steps)

    def __len__(self):
        return len(self.steps)

    def __eq__(self, other):
        if not isinstance(other, SubProof):
            return False
        return self.steps == other.steps

    def __hash__(self):
        return hash(self.steps)

    def __repr__(self):
        return f"SubProof({list(self.steps)!r})"


class ProofBox(Proposition):
    variant = PropVariant.PROOF_BOX

    def __init__(self, subproof: SubProof):
        self.subproof = subproof

    @property
    def assumption(self) -> Proposition:
        return self.subproof.assumption

    @property
    def derived_prop(self) -> Proposition:
        return self.subproof.derived_prop

    def __eq__(self, other):
        if not isinstance(other, ProofBox):
            return False
        return self.subproof == other.subproof

    def __hash__(self):
        return hash((PropVariant.PROOF_BOX, self.subproof))

    def __repr__(self):
        return f"ProofBox({self.subproof!r})"


def negated(prop: Proposition) -> Imply:
    """Return ``¬prop``, i.e. ``prop → ⊥``."""
    return Imply(prop, Bottom())


def _level(prop: Proposition) -> int:
    if isinstance(prop, Imply):
        return _ATOM_LEVEL if prop.is_negation else _IMPLY_LEVEL
    if isinstance(prop, Or):
        return _OR_LEVEL
    if isinstance(prop, And):
        return _AND_LEVEL
    return _ATOM_LEVEL


def format_prop(prop: Proposition, connectives: Dict[str, str] = UNICODE) -> str:
    """Render a proposition with the fewest parentheses the precedence allows.

    ``¬`` binds tightest, then ``∧``, then ``∨``, then ``→``. Conjunction
    and disjunction group to the left, implication to the right.
    """
    def wrap(child, parenthesize):
        text = format_prop(child, connectives)
        return f"({text})" if parenthesize else text

    if isinstance(prop, Bottom):
        return connectives["bottom"]
    if isinstance(prop, Symbol):
        return connectives["symbol"].format(prop.name)
    if isinstance(prop, ProofBox):
        assumption = format_prop(prop.assumption, connectives)
        derived = format_prop(prop.derived_prop, connectives)
        return f"[{assumption} … {derived}]"
    if isinstance(prop, Imply) and prop.is_negation:
        return connectives["not"] + wrap(prop.lhs, _level(prop.lhs) < _ATOM_LEVEL)

    level = _level(prop)
    if isinstance(prop, Imply):
        lhs = wrap(prop.lhs, _level(prop.lhs) <= level)
        rhs = wrap(prop.rhs, _level(prop.rhs) < level)
        return lhs + connectives["imply"] + rhs

    op = connectives["and"] if isinstance(prop, And) else connectives["or"]
    lhs = wrap(prop.lhs, _level(prop.lhs) < level)
    rhs = wrap(prop.rhs, _level(prop.rhs) <= level)
    return lhs + op + rhs
