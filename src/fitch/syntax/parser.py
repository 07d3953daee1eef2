from lark import Transformer
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, VisitError

from fitch.core.errors import CommandSyntaxError, FitchError
from fitch.core.logic import And, Bottom, Imply, Or, Proposition, Symbol, negated
from fitch.rules.registry import get_rule
from fitch.syntax.commands import (
    AssumeCommand, Command, CopyCommand, DischargeCommand, HelpCommand,
    LatexCommand, PremiseCommand, QuitCommand, RuleCommand, ShowCommand,
    UndoCommand, UnusedCommand
)
from fitch.syntax.lexer import fitchlexer


def parse_command(string: str) -> Command:
    """Parse one command line."""
    return _parse(string, "command")


def parse_prop(string: str) -> Proposition:
    """Parse a proposition such as ``p & q -> -r``."""
    return _parse(string, "prop")


# Terminals the grammar names itself; literal keywords and punctuation are shown quoted
_TERMINAL_NAMES = {
    "$END": "end of line",
    "NAME": "symbol",
    "INDEX": "step index",
    "RULE_NAME": "rule name",
    "_NEG": "'-'",
    "_AND": "'&'",
    "_OR": "'|'",
    "_IMPLY": "'->'",
}
_TERMINALS = {terminal.name: terminal for terminal in fitchlexer.terminals}


def _readable(terminal_names):
    """Translate lark terminal names into the tokens a user would type."""
    readable = set()
    for name in terminal_names or ():
        if name in _TERMINAL_NAMES:
            readable.add(_TERMINAL_NAMES[name])
        elif name in _TERMINALS and _TERMINALS[name].pattern.type == "str":
            readable.add(f"'{_TERMINALS[name].pattern.value}'")
    return readable


def _parse(string, start):
    try:
        tree = fitchlexer.parse(string, start=start)
    except UnexpectedEOF as e:
        raise CommandSyntaxError(string.strip(), None, _readable(e.expected)) from e
    except UnexpectedCharacters as e:
        raise CommandSyntaxError(string.strip(), e.column, _readable(e.allowed)) from e
    except UnexpectedInput as e:
        raise CommandSyntaxError(string.strip(), getattr(e, "column", None),
                                 _readable(getattr(e, "expected", None))) from e
    try:
        return CommandBuilder().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, FitchError):
            raise e.orig_exc from None
        raise


# Build propositions and commands bottom-up
class CommandBuilder(Transformer):
    def INDEX(self, token):
        return int(token)

    def symbol(self, children):
        # "bottom" is a keyword, every other name is a propositional symbol
        if children[0].value == "bottom":
            return Bottom()
        return Symbol(children[0].value)

    def bottom(self, children):
        return Bottom()

    def negation(self, children):
        return negated(children[0])

    def conjunction(self, children):
        return And(children[0], children[1])

    def disjunction(self, children):
        return Or(children[0], children[1])

    def implication(self, children):
        return Imply(children[0], children[1])

    def premise(self, children):
        return PremiseCommand(children[0])

    def assume(self, children):
        return AssumeCommand(children[0])

    def copy(self, children):
        return CopyCommand(children[0])

    def discharge(self, children):
        return DischargeCommand()

    def undo(self, children):
        return UndoCommand()

    def rule(self, children):
        name, *args = children
        return RuleCommand(get_rule(str(name), *args))

    def show(self, children):
        return ShowCommand()

    def latex(self, children):
        return LatexCommand()

    def unused(self, children):
        return UnusedCommand()

    def help(self, children):
        return HelpCommand(str(children[0]) if children else None)

    def quit(self, children):
        return QuitCommand()
