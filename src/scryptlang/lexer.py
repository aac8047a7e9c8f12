# src/scryptlang/lexer.py
from .scrypt_token import *
from .error_reporter import ScryptSyntaxError

# Operators that may be followed by '=' to form a two-character token
_COMPARISONS = {
    "=": (ASSIGN, EQ),
    "!": (BANG, NOT_EQ),
    "<": (LT, LTE),
    ">": (GT, GTE),
}

# Doubled characters; a single one is not part of the language
_DOUBLED = {
    "&": AND,
    "|": OR,
    "^": XOR,
}

_SINGLE = {
    "+": PLUS,
    "-": MINUS,
    "*": STAR,
    "/": SLASH,
    "%": MOD,
    ",": COMMA,
    ";": SEMICOLON,
    "(": LPAREN,
    ")": RPAREN,
    "{": LBRACE,
    "}": RBRACE,
    "[": LBRACKET,
    "]": RBRACKET,
}


class Lexer:
    def __init__(self, source_code):
        self.input = source_code
        self.position = 0
        self.read_position = 0
        self.ch = ""
        # Position of self.ch
        self.line = 1
        self.column = 0
        # Newlines inside () and [] are not statement separators
        self.paren_depth = 0
        self.bracket_depth = 0
        # Set once an ILLEGAL token has been produced; lexing stops there
        self.halted = False
        self.read_char()

    def read_char(self):
        if self.ch == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        if self.read_position >= len(self.input):
            self.ch = ""
        else:
            self.ch = self.input[self.read_position]
        self.position = self.read_position
        self.read_position += 1

    def peek_char(self):
        if self.read_position >= len(self.input):
            return ""
        return self.input[self.read_position]

    def next_token(self):
        if self.halted:
            return Token(EOF, "", self.line, self.column)

        self.skip_whitespace()
        line, column = self.line, self.column
        ch = self.ch

        if ch == "":
            return Token(EOF, "", line, column)

        if ch == "\n":
            self.read_char()
            return Token(NEWLINE, "\\n", line, column)

        if ch in _COMPARISONS:
            single, double = _COMPARISONS[ch]
            if self.peek_char() == "=":
                self.read_char()
                self.read_char()
                return Token(double, ch + "=", line, column)
            self.read_char()
            return Token(single, ch, line, column)

        if ch in _DOUBLED:
            if self.peek_char() == ch:
                self.read_char()
                self.read_char()
                return Token(_DOUBLED[ch], ch + ch, line, column)
            return self._illegal(ch, line, column)

        if ch in _SINGLE:
            tok = Token(_SINGLE[ch], ch, line, column)
            self.read_char()
            self._track_nesting(tok.type)
            return tok

        if self.is_letter(ch):
            literal = self.read_identifier()
            return Token(lookup_ident(literal), literal, line, column)

        if self.is_digit(ch) or ch == ".":
            return self.read_number()

        return self._illegal(ch, line, column)

    def tokenize(self):
        """Collect every token up to and including EOF."""
        tokens = []
        while True:
            tok = self.next_token()
            tokens.append(tok)
            if tok.type == EOF:
                return tokens

    def _illegal(self, literal, line, column):
        self.read_char()
        self.halted = True
        return Token(ILLEGAL, literal, line, column)

    def _track_nesting(self, token_type):
        if token_type == LPAREN:
            self.paren_depth += 1
        elif token_type == RPAREN and self.paren_depth > 0:
            self.paren_depth -= 1
        elif token_type == LBRACKET:
            self.bracket_depth += 1
        elif token_type == RBRACKET and self.bracket_depth > 0:
            self.bracket_depth -= 1

    def skip_whitespace(self):
        while True:
            if self.ch in (" ", "\t", "\r"):
                self.read_char()
            elif self.ch == "\n" and (self.paren_depth or self.bracket_depth):
                self.read_char()
            elif self.ch == "#":
                self.skip_comment()
            else:
                return

    def skip_comment(self):
        """Skip # style comments, leaving the newline in place"""
        while self.ch != "\n" and self.ch != "":
            self.read_char()

    def read_identifier(self):
        start_position = self.position
        while self.is_letter(self.ch) or self.is_digit(self.ch):
            self.read_char()
        return self.input[start_position:self.position]

    def read_number(self):
        """Read a decimal literal with at most one '.'.

        Malformed literals (``.5``, ``5.``, ``1.2.3``) come back as ILLEGAL
        tokens rather than raising, so the caller can report the position.
        """
        start_position = self.position
        line, column = self.line, self.column
        seen_dot = False

        while self.is_digit(self.ch) or self.ch == ".":
            if self.ch == ".":
                if seen_dot or not self.is_digit(self.peek_char()):
                    literal = self.input[start_position:self.position + 1]
                    return self._illegal(literal, line, column)
                seen_dot = True
            self.read_char()

        literal = self.input[start_position:self.position]
        if literal.startswith("."):
            self.halted = True
            return Token(ILLEGAL, literal, line, column)
        return Token(NUMBER, literal, line, column)

    @staticmethod
    def is_letter(char):
        return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"

    @staticmethod
    def is_digit(char):
        return "0" <= char <= "9" and char != ""


def find_illegal(tokens):
    """Return the first ILLEGAL token in ``tokens``, or None."""
    for tok in tokens:
        if tok.type == ILLEGAL:
            return tok
    return None


def check_tokens(tokens):
    """Raise ScryptSyntaxError if the token stream holds an unknown token."""
    bad = find_illegal(tokens)
    if bad is not None:
        raise ScryptSyntaxError.illegal(bad)
    return tokens


def tokenize(source_code):
    return Lexer(source_code).tokenize()
