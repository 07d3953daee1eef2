"""Commands understood by an interactive proof session."""

from dataclasses import dataclass
from typing import ClassVar, Optional

from fitch.core.logic import Proposition


class Command:
    """A parsed command line. ``mutates`` is set on commands that change the proof."""
    mutates: ClassVar[bool] = False


@dataclass(frozen=True)
class PremiseCommand(Command):
    mutates = True
    prop: Proposition


@dataclass(frozen=True)
class AssumeCommand(Command):
    mutates = True
    prop: Proposition


@dataclass(frozen=True)
class CopyCommand(Command):
    mutates = True
    index: int


@dataclass(frozen=True)
class DischargeCommand(Command):
    mutates = True


@dataclass(frozen=True)
class UndoCommand(Command):
    mutates = True


@dataclass(frozen=True)
class RuleCommand(Command):
    mutates = True
    rule: "Rule"


@dataclass(frozen=True)
class ShowCommand(Command):
    pass


@dataclass(frozen=True)
class LatexCommand(Command):
    pass


@dataclass(frozen=True)
class UnusedCommand(Command):
    pass


@dataclass(frozen=True)
class HelpCommand(Command):
    topic: Optional[str] = None


@dataclass(frozen=True)
class QuitCommand(Command):
    pass
