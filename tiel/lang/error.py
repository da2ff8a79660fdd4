"""Error handling for the TiEL language. Only GenericExceptions should be encountered during running: if another type of
error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

The scanner, parser and evaluator only ever raise these exceptions; reporting them (and terminating the process) is
left to ErrorHandler, which is used by the command-line front end and the interactive shell.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Base of every TiEL error. line is the 1-based source line, or None when no line is known."""

    def __init__(self, msg, line=None, internal=False):
        super().__init__(msg)
        self.msg = msg
        self.line = line
        self.internal = internal

    def __str__(self):
        return self.msg


class ScanError(GenericException):
    """Malformed input at the character level."""

    def __init__(self, msg, line):
        super().__init__(msg, line)


class ParseError(GenericException):
    """A grammar expectation was not met, or an assignment target was invalid."""

    def __init__(self, msg, line):
        super().__init__(msg, line)


class ExecutionError(GenericException):
    """A contract violation found while evaluating. No line number is threaded through evaluation."""

    def __init__(self, msg):
        super().__init__(msg)


class ErrorHandler:
    """Context manager that reports TiEL errors (and turns stray Python errors into internal ones)."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True, trace=False):
        self.fatal = fatal
        self.trace = trace
        self.sources = {}  # dict of path: source lines, used to echo the offending line
        self.path = None

    def register_file(self, path, source=None):
        """Registers path as the file currently being run. source is kept so that errors can quote it."""
        self.path = path
        self.sources[path] = source.splitlines() if source is not None else []

    def register_step(self, phase, detail):
        """Reports a finished pipeline phase. Only printed when tracing is enabled."""
        if self.trace:
            print(colored(f"[{phase}] {detail}", attrs=["dark"]))

    def diagnose(self, error):
        """Returns the registered source line error.line refers to, or None if it is unknown."""
        lines = self.sources.get(self.path)
        if error.line is None or not lines or not 0 < error.line <= len(lines):
            return None

        return f"  File '{self.path}', line {error.line}:\n    {lines[error.line - 1].strip()}"

    def warn(self, msg):
        """Prints a non-fatal warning."""
        print(colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + msg)

    def throw(self, error):
        """Reports error, which must be a GenericException. Exits the process if this handler is fatal."""
        header = "Error: " if error.line is None else f"Error on line {error.line}: "

        error_msg = ""
        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])
        error_msg += colored(header, ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg)

        diagnosis = self.diagnose(error)
        if diagnosis:
            print(diagnosis)

        if self.fatal:
            sys.exit(1)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("maximum recursion depth exceeded"))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))
            do_exit = True

        return not do_exit
