"""Debug printer that renders AST nodes as parenthesized S-expressions, e.g. `(BinaryExpr + (LiteralExpr 1.0)
(VariableExpr x))`. Used by the --ast mode of the command-line front end.
"""

from tiel.syntax import nodes
from tiel.syntax.tokens import Token


class AstPrinter:
    """Renders expressions, statements, or lists of statements (one per line)."""

    def __init__(self):
        self._render = {
            nodes.Assign: lambda expr: self.s_expr("AssignExpr", expr.name, expr.value),
            nodes.Binary: lambda expr: self.s_expr("BinaryExpr", expr.operator, expr.left, expr.right),
            nodes.Call: lambda expr: self.s_expr("CallExpr", expr.callee, *expr.arguments),
            nodes.Literal: lambda expr: self.s_expr("LiteralExpr", self.literal(expr.value)),
            nodes.Logical: lambda expr: self.s_expr("LogicalExpr", expr.operator, expr.left, expr.right),
            nodes.Unary: lambda expr: self.s_expr("UnaryExpr", expr.operator, expr.right),
            nodes.Variable: lambda expr: self.s_expr("VariableExpr", expr.name),
            nodes.Block: lambda stmt: self.s_expr("BlockStmt", *stmt.statements),
            nodes.Expression: lambda stmt: self.s_expr("ExpressionStmt", stmt.expression),
            nodes.FunctionDecl: self.function_decl,
            nodes.If: self.if_stmt,
            nodes.Return: lambda stmt: self.s_expr("ReturnStmt", *([stmt.value] if stmt.value is not None else [])),
            nodes.VarDecl: lambda stmt: self.s_expr("VarDeclStmt", stmt.name, stmt.initializer),
            nodes.While: lambda stmt: self.s_expr("WhileStmt", stmt.condition, stmt.body),
        }

    def print(self, tree):
        """tree is a node or a list of statements."""
        if isinstance(tree, (list, tuple)):
            return "".join(self.print(stmt) + "\n" for stmt in tree)
        return self._render[type(tree)](tree)

    def function_decl(self, stmt):
        params = self.s_expr("Params", *stmt.params)
        body = self.s_expr("Body", *stmt.body)
        return self.s_expr("FunctionDeclStmt", stmt.name, params, body)

    def if_stmt(self, stmt):
        if stmt.else_branch is None:
            return self.s_expr("IfStmt", stmt.condition, stmt.then_branch)
        return self.s_expr("IfStmt", stmt.condition, stmt.then_branch, stmt.else_branch)

    def s_expr(self, name, *parts):
        joined = " ".join(self.stringify(part) for part in parts)
        return f"({name}{' ' + joined if joined else ''})"

    def stringify(self, part):
        if isinstance(part, (nodes.Expr, nodes.Stmt)):
            return self.print(part)
        if isinstance(part, Token):
            return part.lexeme
        return str(part)

    @staticmethod
    def literal(value):
        if value is None:
            return "nil"
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)
