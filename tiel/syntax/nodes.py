"""Abstract syntax tree for the TiEL language.

There are two closed sets of nodes, expressions and statements. Nodes are immutable and never shared between parents,
so the tree has no cycles. Consumers (the evaluator and the AST printer) dispatch on the concrete node class.

```
<expr> ::= Assign(name, value) | Binary(left, operator, right) | Call(callee, paren, arguments)
         | Literal(value) | Logical(left, operator, right) | Unary(operator, right) | Variable(name)

<stmt> ::= Block(statements) | Expression(expression) | FunctionDecl(name, params, body)
         | If(condition, then_branch, else_branch) | Return(keyword, value) | VarDecl(name, initializer)
         | While(condition, body)
```
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from tiel.syntax.tokens import Token


class Expr:
    """Superclass of every expression node."""


class Stmt:
    """Superclass of every statement node."""


@dataclass(frozen=True)
class Assign(Expr):
    name: Token
    value: Expr


@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Call(Expr):
    callee: Expr
    paren: Token  # closing parenthesis, kept for diagnostics
    arguments: Tuple[Expr, ...]


@dataclass(frozen=True)
class Literal(Expr):
    value: object  # float, str, bool or None


@dataclass(frozen=True)
class Logical(Expr):
    left: Expr
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Unary(Expr):
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Variable(Expr):
    name: Token


@dataclass(frozen=True)
class Block(Stmt):
    statements: Tuple[Stmt, ...]


@dataclass(frozen=True)
class Expression(Stmt):
    expression: Expr


@dataclass(frozen=True)
class FunctionDecl(Stmt):
    name: Token
    params: Tuple[Token, ...]
    body: Tuple[Stmt, ...]


@dataclass(frozen=True)
class If(Stmt):
    condition: Expr
    then_branch: Stmt
    else_branch: Optional[Stmt] = None


@dataclass(frozen=True)
class Return(Stmt):
    keyword: Token
    value: Optional[Expr] = None


@dataclass(frozen=True)
class VarDecl(Stmt):
    name: Token
    initializer: Expr


@dataclass(frozen=True)
class While(Stmt):
    condition: Expr
    body: Stmt
