"""Lexical analysis for the TiEL language: a single left-to-right pass that turns source text into tokens.

Token grammar, loosely:

```
<number>     ::= <digit>+ ["." <digit>+]     ; always decoded as a float
               | "0x" <hexdigit>+            ; base-16 integer, stored as a float
<string>     ::= '"' <char>* '"'             ; may span lines, no escape sequences
<identifier> ::= (<letter> | "_") (<letter> | <digit> | "_")*
<comment>    ::= "//" <char>*                ; runs to end of line
```

The first malformed character aborts the scan with a ScanError.
"""

from tiel.lang.error import ScanError
from tiel.syntax.tokens import KEYWORDS, Token, TokenType


class Scanner:
    """Scans one source text. Use scan_tokens once per instance."""
    SINGLE_CHARS = {
        "(": TokenType.LEFT_PAREN,
        ")": TokenType.RIGHT_PAREN,
        "{": TokenType.LEFT_BRACE,
        "}": TokenType.RIGHT_BRACE,
        "[": TokenType.LEFT_BRACKET,
        "]": TokenType.RIGHT_BRACKET,
        ";": TokenType.SEMICOLON,
        ",": TokenType.COMMA,
        "-": TokenType.MINUS,
        "+": TokenType.PLUS,
        "*": TokenType.STAR,
        "<": TokenType.LESS,
    }
    WHITESPACE = " \r\t"
    HEX_DIGITS = "0123456789abcdefABCDEF"

    def __init__(self, source):
        self.source = source
        self.tokens = []

        self.start = 0    # start of the token being scanned
        self.current = 0  # position of the next unread character
        self.line = 1

    def scan_tokens(self):
        """Returns the list of tokens in self.source, terminated by exactly one EOF token."""
        while not self.is_at_end():
            self.start = self.current
            self.scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        return self.tokens

    def scan_token(self):
        char = self.advance()

        if char in Scanner.SINGLE_CHARS:
            self.add_token(Scanner.SINGLE_CHARS[char])
        elif char == "=":
            self.add_token(TokenType.EQUAL_EQUAL if self.match("=") else TokenType.EQUAL)
        elif char == "/":
            if self.match("/"):
                while self.peek() != "\n" and not self.is_at_end():
                    self.advance()
            else:
                self.add_token(TokenType.SLASH)
        elif char in Scanner.WHITESPACE:
            pass
        elif char == "\n":
            self.line += 1
        elif char == "\"":
            self.string()
        elif self.is_digit(char):
            if char == "0" and self.peek() == "x":
                self.hex_number()
            else:
                self.number()
        elif self.is_alpha(char):
            self.identifier()
        else:
            raise ScanError("Unexpected character.", self.line)

    def identifier(self):
        while self.is_alpha_numeric(self.peek()):
            self.advance()

        text = self.source[self.start:self.current]
        self.add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def number(self):
        while self.is_digit(self.peek()):
            self.advance()

        if self.peek() == "." and self.is_digit(self.peek_next()):
            self.advance()  # consume "."
            while self.is_digit(self.peek()):
                self.advance()

        self.add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def hex_number(self):
        self.advance()  # consume "x"
        while self.peek() and self.peek() in Scanner.HEX_DIGITS:
            self.advance()

        digits = self.source[self.start + 2:self.current]
        if not digits:
            raise ScanError("Expect hexadecimal digits after '0x'.", self.line)

        self.add_token(TokenType.NUMBER, float(int(digits, 16)))

    def string(self):
        while self.peek() != "\"" and not self.is_at_end():
            if self.peek() == "\n":
                self.line += 1
            self.advance()

        if self.is_at_end():
            raise ScanError("Unterminated string.", self.line)

        self.advance()  # closing quote
        self.add_token(TokenType.STRING, self.source[self.start + 1:self.current - 1])

    def match(self, expected):
        """Consumes the next character only if it is expected."""
        if self.is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def peek(self):
        """Returns the next unread character, or "" at end of input."""
        return "" if self.is_at_end() else self.source[self.current]

    def peek_next(self):
        return "" if self.current + 1 >= len(self.source) else self.source[self.current + 1]

    def advance(self):
        char = self.source[self.current]
        self.current += 1
        return char

    def is_at_end(self):
        return self.current >= len(self.source)

    def add_token(self, token_type, value=None):
        self.tokens.append(Token(token_type, self.source[self.start:self.current], value, self.line))

    @staticmethod
    def is_digit(char):
        return "0" <= char <= "9"

    @staticmethod
    def is_alpha(char):
        return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"

    @staticmethod
    def is_alpha_numeric(char):
        return Scanner.is_alpha(char) or Scanner.is_digit(char)
