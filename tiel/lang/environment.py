"""Lexical scopes for the TiEL evaluator."""

from tiel.lang.error import ExecutionError


class Environment:
    """Mutable name -> value mapping with an optional (non-owning) link to the enclosing scope. A name may be defined
    at most once per environment; inner environments may shadow outer definitions.
    """

    def __init__(self, enclosing=None):
        self.enclosing = enclosing
        self.values = {}

    def define(self, name, value):
        if name in self.values:
            raise ExecutionError(f"Identifier already declared '{name}'.")
        self.values[name] = value

    def get(self, name):
        """Looks name up in this environment, then outwards through the enclosing ones."""
        env = self
        while env is not None:
            if name in env.values:
                return env.values[name]
            env = env.enclosing
        raise ExecutionError(f"Undefined variable '{name}'.")

    def assign(self, name, value):
        """Rebinds name in the innermost environment that defines it."""
        env = self
        while env is not None:
            if name in env.values:
                env.values[name] = value
                return
            env = env.enclosing
        raise ExecutionError(f"Identifier not declared '{name}'.")

    def __repr__(self):
        result = repr(self.values)
        if self.enclosing is not None:
            result += f" -> {self.enclosing!r}"
        return result
