"""Errors raised while building a proof.

Every error here is a validation failure caused by user input. The proof is
left unchanged whenever one of them is raised.
"""


class FitchError(Exception):
    """Base class for all user-facing errors."""


class InvalidStepIndex(FitchError):
    def __init__(self, index):
        self.index = index
        super().__init__(f"Step {index} does not exist or is not visible from the current scope")


class ExpectedPropVariant(FitchError):
    def __init__(self, expected, got):
        self.expected = expected
        self.got = got
        super().__init__(f"Expected a proposition of the form {expected} but got '{got}'")


class PropMismatch(FitchError):
    def __init__(self, expected, got):
        self.expected = expected
        self.got = got
        super().__init__(f"Expected '{expected}' but got '{got}'")


class CannotCloseGlobalScope(FitchError):
    def __init__(self):
        super().__init__("There is no open assumption to discharge")


class UnclosedScopeError(FitchError):
    def __init__(self, depth):
        self.depth = depth
        super().__init__(
            f"The proof still has {depth - 1} open proof box(es); discharge them before exporting")


class CommandSyntaxError(FitchError):
    def __init__(self, text, column=None, expected=None):
        self.text = text
        self.column = column
        self.expected = sorted(expected) if expected else []
        message = f"Could not parse '{text}'"
        if column is not None:
            message += f" at column {column}"
        if self.expected:
            message += f" (expected one of: {', '.join(self.expected)})"
        super().__init__(message)


class UnknownRuleError(FitchError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown rule '{name}' (type 'help' for the list of rules)")


class RuleArgumentError(FitchError):
    def __init__(self, rule, message):
        self.rule = rule
        super().__init__(f"{rule}: {message}")
