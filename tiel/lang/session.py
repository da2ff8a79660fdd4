"""Session control for the TiEL language: the scan -> parse -> evaluate pipeline, either for one source file or for the
lines typed into the interactive shell.

The module-level scan, parse and run functions are the pipeline's entry points. Each raises the first ScanError,
ParseError or ExecutionError it meets, unmodified.
"""

import sys

from tiel.lang.evaluator import Evaluator
from tiel.syntax.parser import Parser
from tiel.syntax.scanner import Scanner


def scan(source):
    """Returns the token list of source."""
    return Scanner(source).scan_tokens()


def parse(source):
    """Returns the top-level statements of source."""
    return Parser(scan(source)).parse()


def run(source, output=None):
    """Runs source as a complete program, writing print output to output (stdout by default)."""
    Session(output).run(source)


class Session:
    """Governs a TiEL session: one evaluator, and so one global environment, shared by every run call."""
    SH_FILE = "<in>"  # command-line interpreter filename
    RECURSION_LIMIT = 10000  # each TiEL call takes about 15 Python frames

    def __init__(self, output=None, error_handler=None):
        self.output = output if output is not None else sys.stdout
        self.error_handler = error_handler  # only used to report finished phases
        self.evaluator = Evaluator(self.output)

    def run(self, source):
        """Scans, parses and executes source. Nothing is executed if scanning or parsing fails."""
        limit = sys.getrecursionlimit()
        sys.setrecursionlimit(max(limit, self.RECURSION_LIMIT))
        try:
            tokens = scan(source)
            self._step("scan", f"{len(tokens)} tokens")

            statements = Parser(tokens).parse()
            self._step("parse", f"{len(statements)} statements")

            self.evaluator.interpret(statements)
            self._step("run", "done")
        finally:
            sys.setrecursionlimit(limit)

    def _step(self, phase, detail):
        if self.error_handler is not None:
            self.error_handler.register_step(phase, detail)
