"""Plain-text rendering of a proof with box-drawing frames."""

from typing import List

from fitch.core.logic import ASCII, UNICODE, format_prop
from .base import ProofFormat

_INDEX_WIDTH = 3
_ANNOTATION_WIDTH = 20
# step rows and frames are both ``width - 3`` columns wide
_ROW_PADDING = 7


class AsciiFormat(ProofFormat):
    """Render every scope of a proof, open ones included.

    Closed proof boxes are framed by ``┌─┐`` and ``└─┘``; a scope that is
    still open only has its opening frame.
    """

    def __init__(self, width: int = 70, unicode: bool = True):
        self.width = width
        self.connectives = UNICODE if unicode else ASCII

    @property
    def name(self) -> str:
        return "ascii"

    @property
    def extensions(self) -> List[str]:
        return [".txt"]

    def format_proof(self, proof, **kwargs) -> str:
        result = ""
        for level, scope in enumerate(proof.scopes):
            result += self._steps_to_string(scope.sorted_items(), level, closed=False)
        return result

    def _prop_width(self, indent_level: int) -> int:
        """Width of the proposition column, chosen so rows line up with the frames."""
        return max(self.width - indent_level * 2 - _INDEX_WIDTH - _ANNOTATION_WIDTH - _ROW_PADDING, 0)

    def _frame(self, corner_left, corner_right, indent_level):
        bars = "│" * (indent_level - 1)
        hline = "─" * max(self.width - indent_level * 2 - _ROW_PADDING, 1)
        return f"    {bars}{corner_left}{hline}{corner_right}{bars}\n"

    def _steps_to_string(self, steps, indent_level: int, closed: bool) -> str:
        lines = []
        if indent_level > 0:
            lines.append(self._frame("┌", "┐", indent_level))

        bars = "│" * indent_level
        prop_width = self._prop_width(indent_level)
        for index, step in steps:
            if step.is_discharged_box:
                lines.append(self._steps_to_string(step.prop.subproof, indent_level + 1, closed=True))
                continue
            prop = format_prop(step.prop, self.connectives)
            annotation = step.step_type.format(self.connectives)
            lines.append(f"{index:>{_INDEX_WIDTH}} {bars} {prop:<{prop_width}} "
                         f"{annotation:>{_ANNOTATION_WIDTH}} {bars}\n")

        if closed and indent_level > 0:
            lines.append(self._frame("└", "┘", indent_level))
        return "".join(lines)
