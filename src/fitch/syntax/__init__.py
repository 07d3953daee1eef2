"""Parsing of command lines and propositions."""

from .commands import (
    Command, PremiseCommand, AssumeCommand, CopyCommand, DischargeCommand,
    UndoCommand, RuleCommand, ShowCommand, LatexCommand, UnusedCommand,
    HelpCommand, QuitCommand
)
from .parser import parse_command, parse_prop

__all__ = [
    'Command', 'PremiseCommand', 'AssumeCommand', 'CopyCommand', 'DischargeCommand',
    'UndoCommand', 'RuleCommand', 'ShowCommand', 'LatexCommand', 'UnusedCommand',
    'HelpCommand', 'QuitCommand',
    'parse_command', 'parse_prop'
]
