"""Recursive-descent parser for the TiEL language, with a single token of lookahead.

Grammar, from top-level down (binary chains are left-associative, assignment is right-associative):

```
<program>     ::= <global>* EOF
<global>      ::= <fun_decl> | <declaration>            ; functions may only be declared at the top level
<declaration> ::= <var_decl> | <statement>
<fun_decl>    ::= "fun" IDENTIFIER "(" [IDENTIFIER ("," IDENTIFIER)*] ")" "{" <declaration>* "}"
<var_decl>    ::= "var" IDENTIFIER "=" <expr> ";"
<statement>   ::= "if" <expr> "then" <statement> ["else" <statement>]
                | "return" [<expr>] ";"
                | "while" <expr> "do" <statement>
                | "{" <declaration>* "}"
                | <expr> ";"

<expr>        ::= <assignment>
<assignment>  ::= IDENTIFIER "=" <assignment> | <or>
<or>          ::= <and> ("or" <and>)*
<and>         ::= <equality> ("and" <equality>)*
<equality>    ::= <comparison> ("==" <comparison>)*
<comparison>  ::= <term> ("<" <term>)*
<term>        ::= <factor> (("-" | "+") <factor>)*
<factor>      ::= <unary> (("/" | "*") <unary>)*
<unary>       ::= ("not" | "-") <unary> | <call>
<call>        ::= <primary> ("(" [<expr> ("," <expr>)*] ")")*
<primary>     ::= "true" | "false" | "nil" | NUMBER | STRING | IDENTIFIER | "(" <expr> ")"
```

There is no error recovery: the first ParseError aborts parsing and no partial tree is returned.
"""

from tiel.lang.error import ParseError
from tiel.syntax import nodes
from tiel.syntax.tokens import TokenType


class Parser:
    """Parses one token list (as produced by Scanner.scan_tokens) into top-level statements."""

    def __init__(self, tokens):
        self.tokens = tokens
        self.current = 0

    def parse(self):
        """Returns the list of top-level statements."""
        statements = []
        while not self.is_at_end():
            statements.append(self.global_declaration())
        return statements

    # ---------- statements ----------

    def global_declaration(self):
        """Like declaration, but function declarations are allowed."""
        if self.match(TokenType.FUN):
            return self.function()
        return self.declaration()

    def declaration(self):
        if self.match(TokenType.VAR):
            return self.var_declaration()
        return self.statement()

    def statement(self):
        if self.match(TokenType.IF):
            return self.if_statement()
        if self.match(TokenType.RETURN):
            return self.return_statement()
        if self.match(TokenType.WHILE):
            return self.while_statement()
        if self.match(TokenType.LEFT_BRACE):
            return nodes.Block(self.block())
        return self.expression_statement()

    def if_statement(self):
        condition = self.expression()
        self.consume(TokenType.THEN, "Expect 'then' after if condition.")
        then_branch = self.statement()

        else_branch = None
        if self.match(TokenType.ELSE):
            else_branch = self.statement()

        return nodes.If(condition, then_branch, else_branch)

    def return_statement(self):
        keyword = self.previous()
        value = None
        if not self.check(TokenType.SEMICOLON):
            value = self.expression()

        self.consume(TokenType.SEMICOLON, "Expect ';' after return value.")
        return nodes.Return(keyword, value)

    def var_declaration(self):
        name = self.consume(TokenType.IDENTIFIER, "Expect variable name.")
        self.consume(TokenType.EQUAL, "Expect '=' after variable name.")
        initializer = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after variable declaration.")
        return nodes.VarDecl(name, initializer)

    def while_statement(self):
        condition = self.expression()
        self.consume(TokenType.DO, "Expect 'do' after condition.")
        return nodes.While(condition, self.statement())

    def expression_statement(self):
        expr = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after expression.")
        return nodes.Expression(expr)

    def function(self):
        name = self.consume(TokenType.IDENTIFIER, "Expect function name.")
        self.consume(TokenType.LEFT_PAREN, "Expect '(' after function name.")

        params = []
        if not self.check(TokenType.RIGHT_PAREN):
            params.append(self.consume(TokenType.IDENTIFIER, "Expect parameter name."))
            while self.match(TokenType.COMMA):
                params.append(self.consume(TokenType.IDENTIFIER, "Expect parameter name."))

        self.consume(TokenType.RIGHT_PAREN, "Expect ')' after parameters.")
        self.consume(TokenType.LEFT_BRACE, "Expect '{' before function body.")
        return nodes.FunctionDecl(name, tuple(params), self.block())

    def block(self):
        """Parses declarations up to and including the closing brace. The opening brace must already be consumed."""
        statements = []
        while not self.check(TokenType.RIGHT_BRACE) and not self.is_at_end():
            statements.append(self.declaration())

        self.consume(TokenType.RIGHT_BRACE, "Expect '}' after block.")
        return tuple(statements)

    # ---------- expressions ----------

    def expression(self):
        return self.assignment()

    def assignment(self):
        expr = self.logical_or()

        if self.match(TokenType.EQUAL):
            equals = self.previous()
            value = self.assignment()

            if isinstance(expr, nodes.Variable):
                return nodes.Assign(expr.name, value)
            raise ParseError("Invalid assignment target.", equals.line)

        return expr

    def logical_or(self):
        expr = self.logical_and()
        while self.match(TokenType.OR):
            operator = self.previous()
            expr = nodes.Logical(expr, operator, self.logical_and())
        return expr

    def logical_and(self):
        expr = self.equality()
        while self.match(TokenType.AND):
            operator = self.previous()
            expr = nodes.Logical(expr, operator, self.equality())
        return expr

    def equality(self):
        return self.binary_chain(self.comparison, TokenType.EQUAL_EQUAL)

    def comparison(self):
        return self.binary_chain(self.term, TokenType.LESS)

    def term(self):
        return self.binary_chain(self.factor, TokenType.MINUS, TokenType.PLUS)

    def factor(self):
        return self.binary_chain(self.unary, TokenType.SLASH, TokenType.STAR)

    def binary_chain(self, operand, *operators):
        """Folds operand (operator operand)* to the left into Binary nodes."""
        expr = operand()
        while self.match(*operators):
            operator = self.previous()
            expr = nodes.Binary(expr, operator, operand())
        return expr

    def unary(self):
        if self.match(TokenType.NOT, TokenType.MINUS):
            operator = self.previous()
            return nodes.Unary(operator, self.unary())
        return self.call()

    def call(self):
        expr = self.primary()
        while self.match(TokenType.LEFT_PAREN):
            expr = self.finish_call(expr)
        return expr

    def finish_call(self, callee):
        arguments = []
        if not self.check(TokenType.RIGHT_PAREN):
            arguments.append(self.expression())
            while self.match(TokenType.COMMA):
                arguments.append(self.expression())

        paren = self.consume(TokenType.RIGHT_PAREN, "Expect ')' after arguments.")
        return nodes.Call(callee, paren, tuple(arguments))

    def primary(self):
        if self.match(TokenType.FALSE):
            return nodes.Literal(False)
        if self.match(TokenType.TRUE):
            return nodes.Literal(True)
        if self.match(TokenType.NIL):
            return nodes.Literal(None)

        if self.match(TokenType.NUMBER, TokenType.STRING):
            return nodes.Literal(self.previous().value)

        if self.match(TokenType.IDENTIFIER):
            return nodes.Variable(self.previous())

        if self.match(TokenType.LEFT_PAREN):
            expr = self.expression()
            self.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return expr

        raise ParseError("Expect expression.", self.peek().line)

    # ---------- token helpers ----------

    def consume(self, token_type, msg):
        """Consumes and returns the next token if it is of token_type, otherwise raises a ParseError with msg."""
        if self.check(token_type):
            return self.advance()
        raise ParseError(msg, self.peek().line)

    def match(self, *token_types):
        """Consumes the next token if it is of any of token_types."""
        for token_type in token_types:
            if self.check(token_type):
                self.advance()
                return True
        return False

    def check(self, token_type):
        if self.is_at_end():
            return False
        return self.peek().type is token_type

    def advance(self):
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def is_at_end(self):
        return self.peek().type is TokenType.EOF

    def peek(self):
        return self.tokens[self.current]

    def previous(self):
        return self.tokens[self.current - 1]
