# src/scryptlang/scrypt_token.py
from typing import NamedTuple

# Special
ILLEGAL = "ILLEGAL"
EOF = "EOF"
NEWLINE = "NEWLINE"

# Identifiers + literals
IDENT = "IDENT"
NUMBER = "NUMBER"
TRUE = "TRUE"
FALSE = "FALSE"
NULL = "NULL"

# Operators
ASSIGN = "="
PLUS = "+"
MINUS = "-"
STAR = "*"
SLASH = "/"
MOD = "%"
BANG = "!"
LT = "<"
GT = ">"
LTE = "<="
GTE = ">="
EQ = "=="
NOT_EQ = "!="
AND = "&&"
OR = "||"
XOR = "^^"

# Delimiters
COMMA = ","
SEMICOLON = ";"
LPAREN = "("
RPAREN = ")"
LBRACE = "{"
RBRACE = "}"
LBRACKET = "["
RBRACKET = "]"

# Keywords
IF = "IF"
ELSE = "ELSE"
WHILE = "WHILE"
PRINT = "PRINT"
DEF = "DEF"
RETURN = "RETURN"

KEYWORDS = {
    "if": IF,
    "else": ELSE,
    "while": WHILE,
    "print": PRINT,
    "def": DEF,
    "define": DEF,
    "return": RETURN,
    "true": TRUE,
    "false": FALSE,
    "null": NULL,
}

# Tokens that begin a statement; the parser resynchronizes on them
STATEMENT_KEYWORDS = frozenset({IF, WHILE, PRINT, DEF, RETURN})


class Token(NamedTuple):
    type: str
    literal: str
    line: int = 1
    column: int = 1

    def __repr__(self):
        return f"Token({self.type}, {self.literal!r}, {self.line}:{self.column})"


def lookup_ident(ident):
    return KEYWORDS.get(ident, IDENT)
