"""An interactive proof session: one proof, driven by command lines."""

import logging
from dataclasses import dataclass
from typing import Optional

from fitch.core.errors import FitchError
from fitch.fileformats import AsciiFormat, get_format_handler
from fitch.proofs import Proof, unused_premises
from fitch.rules import get_rule_class, list_rules
from fitch.syntax import (
    AssumeCommand, Command, CopyCommand, DischargeCommand, HelpCommand,
    LatexCommand, PremiseCommand, QuitCommand, RuleCommand, ShowCommand,
    UndoCommand, UnusedCommand, parse_command
)
from fitch.utils.config import Config, get_config

logger = logging.getLogger(__name__)

COMMANDS_HELP = """Commands:
  premise <prop>        add a premise
  assume <prop>         open a proof box with an assumption
  copy <index>          copy a visible step into the current box
  discharge             close the current proof box (alias: close)
  rule <name> <args>    apply an inference rule
  undo                  remove the latest step (undoing an assumption removes its whole box)
  show                  print the proof
  latex                 typeset the finished proof with the logicproof package
  unused                list premises the last step does not depend on
  help [<rule>]         show this help, or the details of one rule
  quit                  leave (alias: exit)

Propositions: p, q, bottom (⊥), -p (¬p), p & q, p | q, p -> q

Rules:"""


@dataclass
class Response:
    """Text produced by one command line."""
    output: str = ""
    error: bool = False


class Session:
    """Execute commands against a single proof.

    Errors raised by the proof engine are turned into error responses; the
    proof is unchanged by a command that fails.
    """

    def __init__(self, config: Optional[Config] = None, proof: Optional[Proof] = None):
        self.config = config if config is not None else get_config()
        self.proof = proof if proof is not None else Proof()
        self.finished = False
        self.ascii = AsciiFormat(width=int(self.config.get("display.width", 70)),
                                 unicode=bool(self.config.get("display.unicode", True)))
        self.latex = get_format_handler("latex")

    def run_line(self, line: str) -> Response:
        """Parse and execute one command line. Blank lines and ``#`` comments do nothing."""
        line = line.strip()
        if not line or line.startswith("#"):
            return Response()
        try:
            command = parse_command(line)
            return Response(self.execute(command))
        except FitchError as e:
            logger.debug("command %r failed: %s", line, e)
            return Response(f"Error: {e}", error=True)

    def execute(self, command: Command) -> str:
        """Run a parsed command and return the text to display."""
        if isinstance(command, PremiseCommand):
            self.proof.add_premise(command.prop)
        elif isinstance(command, AssumeCommand):
            self.proof.add_assumption(command.prop)
        elif isinstance(command, CopyCommand):
            self.proof.copy(command.index)
        elif isinstance(command, DischargeCommand):
            self.proof.close_scope()
        elif isinstance(command, RuleCommand):
            self.proof.apply_rule(command.rule)
        elif isinstance(command, UndoCommand):
            if self.proof.undo() is None:
                return "Nothing to undo"
        elif isinstance(command, ShowCommand):
            return self.show()
        elif isinstance(command, LatexCommand):
            return self.export_latex()
        elif isinstance(command, UnusedCommand):
            return self.report_unused()
        elif isinstance(command, HelpCommand):
            return self.help(command.topic)
        elif isinstance(command, QuitCommand):
            self.finished = True
            return ""
        else:
            raise TypeError(f"Unknown command: {command!r}")

        if self.config.get("repl.show_after_command", True):
            return self.show()
        return ""

    def show(self) -> str:
        text = self.ascii.format_proof(self.proof)
        return text.rstrip("\n") if text else "The proof is empty"

    def export_latex(self) -> str:
        text = self.latex.format_proof(self.proof, preamble=bool(self.config.get("latex.preamble", True)))
        return text.rstrip("\n")

    def report_unused(self) -> str:
        unused = unused_premises(self.proof)
        if not unused:
            return "Every premise is used"
        return "Unused premises: " + ", ".join(str(index) for index in unused)

    def help(self, topic: Optional[str] = None) -> str:
        if topic is not None:
            rule_class = get_rule_class(topic)
            aliases = ", ".join(rule_class.aliases) or "none"
            return (f"rule {rule_class.usage()}\n"
                    f"  {rule_class.label}: {rule_class.schema}\n"
                    f"  aliases: {aliases}")

        lines = [COMMANDS_HELP]
        for name in list_rules():
            rule_class = get_rule_class(name)
            lines.append(f"  {rule_class.usage():<45} {rule_class.schema}")
        return "\n".join(lines)
