"""Tree-walking evaluator for the TiEL language.

Values are represented by Python objects: float (number), str, bool, None (nil) and Callable. Expressions are evaluated
recursively to values, statements are executed for their effect. Errors raise ExecutionError and are never reported
here.
"""

import math

from tiel.lang.callable import Callable, Function, NativeFunction, ReturnSignal
from tiel.lang.environment import Environment
from tiel.lang.error import ExecutionError
from tiel.syntax import nodes
from tiel.syntax.tokens import TokenType


def is_truthy(value):
    """nil and false are falsy, every other value (including 0 and "") is truthy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(left, right):
    """Value equality. nil only equals nil and values of different types are never equal (so true != 1)."""
    if left is None or right is None:
        return left is None and right is None
    return type(left) is type(right) and left == right


def stringify(value):
    """Textual form of value, as written by print."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        text = repr(value)
        if text.endswith(".0"):
            text = text[:-2]
        return text
    return str(value)


def divide(left, right):
    """IEEE 754 division: dividing by zero gives a signed infinity, or NaN for 0/0."""
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


class Evaluator:
    """Executes statement lists against one global environment. output is a text stream that print writes to."""
    ARITHMETIC = {
        TokenType.LESS: lambda left, right: left < right,
        TokenType.MINUS: lambda left, right: left - right,
        TokenType.PLUS: lambda left, right: left + right,
        TokenType.SLASH: divide,
        TokenType.STAR: lambda left, right: left * right,
    }

    def __init__(self, output):
        self.output = output

        self.globals = Environment()
        self.environment = self.globals
        self.globals.define("print", NativeFunction("print", 1, self._print))

        self._evaluate = {
            nodes.Assign: self.evaluate_assign,
            nodes.Binary: self.evaluate_binary,
            nodes.Call: self.evaluate_call,
            nodes.Literal: lambda expr: expr.value,
            nodes.Logical: self.evaluate_logical,
            nodes.Unary: self.evaluate_unary,
            nodes.Variable: lambda expr: self.environment.get(expr.name.lexeme),
        }
        self._execute = {
            nodes.Block: lambda stmt: self.execute_block(stmt.statements, Environment(self.environment)),
            nodes.Expression: lambda stmt: self.evaluate(stmt.expression),
            nodes.FunctionDecl: self.execute_function_decl,
            nodes.If: self.execute_if,
            nodes.Return: self.execute_return,
            nodes.VarDecl: self.execute_var_decl,
            nodes.While: self.execute_while,
        }

    def _print(self, evaluator, arguments):
        self.output.write(stringify(arguments[0]) + "\n")

    def interpret(self, statements):
        """Executes top-level statements in order. A `return` outside of any function is an ExecutionError, and so is
        running out of Python stack.
        """
        try:
            for stmt in statements:
                self.execute(stmt)
        except ReturnSignal:
            raise ExecutionError("Cannot return from top-level code.") from None
        except RecursionError:
            raise ExecutionError("Stack overflow.") from None

    def evaluate(self, expr):
        return self._evaluate[type(expr)](expr)

    def execute(self, stmt):
        self._execute[type(stmt)](stmt)

    def execute_block(self, statements, environment):
        """Executes statements in environment, restoring the current environment however the block is left."""
        previous = self.environment
        try:
            self.environment = environment
            for stmt in statements:
                self.execute(stmt)
        finally:
            self.environment = previous

    # ---------- expressions ----------

    def evaluate_assign(self, expr):
        value = self.evaluate(expr.value)
        self.environment.assign(expr.name.lexeme, value)
        return value

    def evaluate_binary(self, expr):
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)

        if expr.operator.type is TokenType.EQUAL_EQUAL:
            return is_equal(left, right)

        if not (self.is_number(left) and self.is_number(right)):
            raise ExecutionError(f"Operands to '{expr.operator.lexeme}' must be numbers.")
        return Evaluator.ARITHMETIC[expr.operator.type](left, right)

    def evaluate_call(self, expr):
        callee = self.evaluate(expr.callee)
        arguments = [self.evaluate(argument) for argument in expr.arguments]

        if not isinstance(callee, Callable):
            raise ExecutionError("Can only call functions.")
        if len(arguments) != callee.arity:
            raise ExecutionError(f"Expected {callee.arity} arguments but got {len(arguments)}.")

        return callee.call(self, arguments)

    def evaluate_logical(self, expr):
        """Short-circuits, and always yields a boolean rather than one of the operands."""
        left = self.evaluate(expr.left)

        if expr.operator.type is TokenType.OR:
            if is_truthy(left):
                return True
        elif not is_truthy(left):
            return False

        return is_truthy(self.evaluate(expr.right))

    def evaluate_unary(self, expr):
        right = self.evaluate(expr.right)

        if expr.operator.type is TokenType.NOT:
            return not is_truthy(right)

        if not self.is_number(right):
            raise ExecutionError(f"Operand to '{expr.operator.lexeme}' must be a number.")
        return -right

    @staticmethod
    def is_number(value):
        return isinstance(value, float)

    # ---------- statements ----------

    def execute_function_decl(self, stmt):
        self.environment.define(stmt.name.lexeme, Function(stmt, self.environment))

    def execute_if(self, stmt):
        if is_truthy(self.evaluate(stmt.condition)):
            self.execute(stmt.then_branch)
        elif stmt.else_branch is not None:
            self.execute(stmt.else_branch)

    def execute_return(self, stmt):
        value = None
        if stmt.value is not None:
            value = self.evaluate(stmt.value)
        raise ReturnSignal(value)

    def execute_var_decl(self, stmt):
        value = self.evaluate(stmt.initializer)
        self.environment.define(stmt.name.lexeme, value)

    def execute_while(self, stmt):
        while is_truthy(self.evaluate(stmt.condition)):
            self.execute(stmt.body)
