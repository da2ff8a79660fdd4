"""Token model for the TiEL language: the closed set of token types and the immutable token record that the scanner
produces and the parser consumes.
"""

import enum
from dataclasses import dataclass


class TokenType(enum.Enum):
    """Every kind of token the scanner can emit."""

    # keywords
    FUN = enum.auto()
    VAR = enum.auto()
    IF = enum.auto()
    THEN = enum.auto()
    ELSE = enum.auto()
    WHILE = enum.auto()
    DO = enum.auto()
    RETURN = enum.auto()
    AND = enum.auto()
    OR = enum.auto()
    NOT = enum.auto()
    TRUE = enum.auto()
    FALSE = enum.auto()
    NIL = enum.auto()

    # symbols and operators
    LEFT_PAREN = enum.auto()
    RIGHT_PAREN = enum.auto()
    LEFT_BRACE = enum.auto()
    RIGHT_BRACE = enum.auto()
    LEFT_BRACKET = enum.auto()   # scanned, but no grammar rule consumes brackets
    RIGHT_BRACKET = enum.auto()
    COMMA = enum.auto()
    MINUS = enum.auto()
    PLUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    SEMICOLON = enum.auto()
    EQUAL = enum.auto()
    EQUAL_EQUAL = enum.auto()
    NOT_EQUAL = enum.auto()      # reserved, never produced
    LESS = enum.auto()
    MORE = enum.auto()           # reserved, never produced
    LESS_THAN = enum.auto()      # reserved, never produced
    MORE_THAN = enum.auto()      # reserved, never produced

    # identifiers and literals
    IDENTIFIER = enum.auto()
    NUMBER = enum.auto()
    STRING = enum.auto()

    EOF = enum.auto()

    def __str__(self):
        return self.name


KEYWORDS = {
    "and": TokenType.AND,
    "do": TokenType.DO,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "not": TokenType.NOT,
    "or": TokenType.OR,
    "return": TokenType.RETURN,
    "then": TokenType.THEN,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}


@dataclass(frozen=True)
class Token:
    """A lexical token. value holds the decoded payload of NUMBER (float) and STRING (str) tokens, otherwise None."""
    type: TokenType
    lexeme: str
    value: object
    line: int

    def __str__(self):
        value = "nil" if self.value is None else self.value
        return f"TOKEN({self.type}, {self.lexeme}, {value}) on line {self.line}"
