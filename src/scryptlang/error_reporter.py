# src/scryptlang/error_reporter.py
"""Error taxonomy and diagnostic rendering.

Lexical and parse problems are ``ScryptSyntaxError`` and always carry the
offending token's position. Runtime problems are ``ScryptRuntimeError`` with a
``kind`` drawn from the fixed catalogue below.
"""
from rich.console import Console
from rich.text import Text

# Runtime error catalogue
UNKNOWN_IDENTIFIER = "unknown_identifier"
TYPE_MISMATCH = "type_mismatch"
DIVISION_BY_ZERO = "division_by_zero"
NOT_INTEGER_INDEX = "not_integer_index"
INDEX_OUT_OF_BOUNDS = "index_out_of_bounds"
NOT_AN_ARRAY = "not_an_array"
NOT_A_FUNCTION = "not_a_function"
ARGUMENT_COUNT = "argument_count"
EMPTY_POP = "empty_pop"
INVALID_ASSIGNMENT = "invalid_assignment"
CONDITION_NOT_BOOL = "condition_not_bool"
UNEXPECTED_RETURN = "unexpected_return"
UNCOMPARABLE = "uncomparable"
UNPRINTABLE = "unprintable"


class ScryptError(Exception):
    """Base class for every error the interpreter reports."""

    def __init__(self, message, line=None, column=None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def format(self):
        return self.message

    def __str__(self):
        return self.format()


class ScryptSyntaxError(ScryptError):
    """Unrecognized character or token out of place."""

    def __init__(self, message, line=None, column=None, token=None):
        if token is not None:
            line = token.line if line is None else line
            column = token.column if column is None else column
        super().__init__(message, line, column)
        self.token = token

    @classmethod
    def unexpected(cls, token, detail=None):
        text = token.literal if token.literal else token.type
        message = f"Unexpected token at line {token.line} column {token.column}: {text}"
        if detail:
            message = f"{message} ({detail})"
        return cls(message, token=token)

    @classmethod
    def illegal(cls, token):
        return cls(f"Syntax error on line {token.line} column {token.column}.", token=token)


class ScryptRuntimeError(ScryptError):
    """A fatal condition raised while evaluating a program."""

    def __init__(self, message, kind=None):
        super().__init__(message)
        self.kind = kind

    def format(self):
        return f"Runtime error: {self.message}."


def print_error(error, console=None):
    """Render ``error`` as a single diagnostic line (stderr unless ``console`` is given)."""
    console = console or Console(stderr=True)
    if isinstance(error, ScryptError):
        text = Text(error.format(), style="bold red")
    else:
        text = Text(f"Error: {error}", style="bold red")
    console.print(text, soft_wrap=True)
