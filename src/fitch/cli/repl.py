#!/usr/bin/env python3
"""
Interactive natural deduction proof editor.

USAGE:
    fitch
    fitch --config my_config.yaml
    fitch --script proof.txt
"""

import argparse
import logging
import random
import sys
from pathlib import Path

from fitch.cli.session import Session
from fitch.utils.config import Config, get_config

GOODBYES = [
    "Bye!",
    "See you later!",
    "Have a nice day!",
    "See you soon!",
    "See you next time!",
]

GREETING = """Hi! I'm Fitch.
A command-line editor for natural deduction
proofs (for propositional logic).

Get started by typing a command, for example:
premise p & q
rule and_e_lhs 1
assume (p | q) -> -q
discharge
latex
help
quit
"""


def say_goodbye():
    print(random.choice(GOODBYES))


def run_script(session: Session, path: Path) -> int:
    """Run every line of a command file, stopping at the first error."""
    with open(path, encoding="utf-8") as f:
        for number, line in enumerate(f, start=1):
            response = session.run_line(line)
            if response.error:
                print(f"{path}:{number}: {response.output}", file=sys.stderr)
                return 1
            if session.finished:
                break
    print(session.show())
    return 0


def interact(session: Session):
    prompt = session.config.get("repl.prompt", "fitch> ")
    clear_screen = session.config.get("display.clear_screen", False)

    while not session.finished:
        try:
            line = input(prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            say_goodbye()
            return

        response = session.run_line(line)
        if response.error:
            print(response.output, file=sys.stderr)
            continue
        if clear_screen and response.output:
            print("\033[2J\033[H", end="")
        if response.output:
            print(response.output)

    say_goodbye()


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Build natural deduction proofs step by step",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", type=Path, help="Path to a YAML configuration file")
    parser.add_argument("--script", type=Path, help="Run the commands in this file and print the proof")
    parser.add_argument("--no-greeting", action="store_true", help="Do not print the greeting")
    parser.add_argument("--verbose", action="store_true", help="Log every proof step")

    args = parser.parse_args(argv)

    if args.config is not None and not args.config.exists():
        print(f"Error: Config not found: {args.config}", file=sys.stderr)
        return 1
    config = Config(args.config) if args.config else get_config()

    level = "DEBUG" if args.verbose else str(config.get("logging.level", "WARNING")).upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    session = Session(config)

    if args.script is not None:
        if not args.script.exists():
            print(f"Error: File not found: {args.script}", file=sys.stderr)
            return 1
        return run_script(session, args.script)

    if config.get("repl.greeting", True) and not args.no_greeting:
        print(GREETING)
    interact(session)
    return 0


if __name__ == "__main__":
    sys.exit(main())
