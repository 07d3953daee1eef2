"""LaTeX export using the ``logicproof`` package."""

from typing import List

from fitch.core.errors import UnclosedScopeError
from fitch.core.logic import LATEX, format_prop
from fitch.proofs.step import Assumption, Copy, Premise, RuleStep
from fitch.rules.base import PROP
from .base import ProofFormat

PREAMBLE = "% Remember to also include these packages:\n" \
           "% \\usepackage{amsmath}\n% \\usepackage{logicproof}\n\n"

_RULE_MACROS = {
    "and_i": r"$\land_{I}$",
    "and_e_lhs": r"$\land_{E_{1}}$",
    "and_e_rhs": r"$\land_{E_{2}}$",
    "or_i_lhs": r"$\lor_{I_{1}}$",
    "or_i_rhs": r"$\lor_{I_{2}}$",
    "or_e": r"$\lor_{E}$",
    "neg_i": r"$\lnot_{I}$",
    "neg_e": r"$\lnot_{E}$",
    "imply_i": r"$\to_{I}$",
    "imply_e": r"$\to_{E}$",
    "bottom_e": r"$\bot_{E}$",
    "neg_neg_e": r"$\lnot\lnot_{E}$",
    "modus_tollens": "MT",
    "neg_neg_i": r"$\lnot\lnot_{I}$",
    "proof_by_contradiction": "PBC",
    "law_of_excluded_middle": "LEM",
}


def latex_prop(prop) -> str:
    return format_prop(prop, LATEX)


def latex_rule(rule) -> str:
    args = ", ".join(f"${latex_prop(value)}$" if kind == PROP else str(value)
                     for kind, value in zip(rule.arguments, rule.values))
    return f"{_RULE_MACROS[rule.name]} {args}"


def latex_step_type(step_type) -> str:
    if isinstance(step_type, RuleStep):
        return latex_rule(step_type.rule)
    if isinstance(step_type, Copy):
        return f"copy {step_type.source}"
    if isinstance(step_type, Premise):
        return "premise"
    if isinstance(step_type, Assumption):
        return "assumption"
    raise TypeError(f"Unknown step type: {step_type!r}")


def max_depth(steps) -> int:
    """Deepest nesting of proof boxes among ``steps``."""
    return max((1 + max_depth(step.prop.subproof) for _, step in steps if step.is_discharged_box),
               default=0)


class LatexFormat(ProofFormat):
    """Typeset a finished proof as a ``logicproof`` environment.

    Only proofs without open scopes can be typeset.
    """

    @property
    def name(self) -> str:
        return "latex"

    @property
    def extensions(self) -> List[str]:
        return [".tex"]

    def format_proof(self, proof, preamble: bool = False, **kwargs) -> str:
        if proof.has_open_scopes:
            raise UnclosedScopeError(proof.depth)

        steps = proof.scopes[0].sorted_items()
        lines = []
        if preamble:
            lines.append(PREAMBLE)
        lines.append(f"\\begin{{logicproof}}{{{max_depth(steps)}}}\n")
        self._steps_to_string(lines, steps, 0)
        lines.append("\\end{logicproof}\n")
        return "".join(lines)

    def _steps_to_string(self, lines, steps, indent_level: int):
        steps = list(steps)
        if indent_level > 0:
            lines.append("\\begin{subproof}\n")

        for i, (_, step) in enumerate(steps):
            if step.is_discharged_box:
                self._steps_to_string(lines, step.prop.subproof, indent_level + 1)
                continue
            newline = "" if i == len(steps) - 1 else " \\\\"
            lines.append(f"{latex_prop(step.prop)} & {latex_step_type(step.step_type)}{newline}\n")

        if indent_level > 0:
            lines.append("\\end{subproof}\n")
