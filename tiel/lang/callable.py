"""Callable values of the TiEL language: host-provided native functions and user-defined functions (closures)."""

from abc import ABC, abstractmethod

from tiel.lang.environment import Environment


class ReturnSignal(Exception):
    """Unwinds a function body on `return`. Caught only by Function.call, so it never escapes a call boundary."""

    def __init__(self, value):
        super().__init__()
        self.value = value


class Callable(ABC):
    """Anything that can appear as the callee of a call expression."""

    @property
    @abstractmethod
    def arity(self):
        """Exact number of arguments this callable accepts."""

    @abstractmethod
    def call(self, evaluator, arguments):
        """Invokes the callable. arguments have already been evaluated and match arity."""


class NativeFunction(Callable):
    """Function implemented by the host. function is called as function(evaluator, arguments)."""

    def __init__(self, name, arity, function):
        self.name = name
        self._arity = arity
        self.function = function

    @property
    def arity(self):
        return self._arity

    def call(self, evaluator, arguments):
        return self.function(evaluator, arguments)

    def __str__(self):
        return "<native fn>"


class Function(Callable):
    """User-defined function. closure is the environment active at the declaration site, shared with every other
    function declared there.
    """

    def __init__(self, declaration, closure):
        self.declaration = declaration
        self.closure = closure

    @property
    def arity(self):
        return len(self.declaration.params)

    def call(self, evaluator, arguments):
        environment = Environment(self.closure)
        for param, argument in zip(self.declaration.params, arguments):
            environment.define(param.lexeme, argument)

        try:
            evaluator.execute_block(self.declaration.body, environment)
        except ReturnSignal as signal:
            return signal.value
        return None

    def __str__(self):
        return f"<fn {self.declaration.name.lexeme}>"
