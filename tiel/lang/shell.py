"""Handles interactive/command-line mode for the TiEL interpreter. Uses cmd as backend."""

import cmd
from collections import Counter

from tiel.lang.error import ScanError
from tiel.lang.session import Session, scan
from tiel.syntax.tokens import TokenType


class Shell(cmd.Cmd):
    """TiEL interpreter shell. Every line runs in the same session, so declarations persist between lines."""
    intro = "TiEL interpreter :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "
    secondary_prompt = ". "  # used for line continuations
    _tmp_prompt = "> "       # also used for prompt swapping in line continuations

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self._tmp_line = ""

    @staticmethod
    def is_open(source):
        """Whether source still has unclosed braces, parentheses or strings, i.e. needs a line continuation. Brackets
        inside strings and comments are not counted.
        """
        try:
            tokens = scan(source)
        except ScanError as e:
            return str(e) == "Unterminated string."

        counts = Counter(token.type for token in tokens)
        return (counts[TokenType.LEFT_BRACE] > counts[TokenType.RIGHT_BRACE]
                or counts[TokenType.LEFT_PAREN] > counts[TokenType.RIGHT_PAREN])

    def default(self, line):
        """Executes arbitrary TiEL source."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            source = self._tmp_line + line + "\n"

            if self.is_open(source):
                self._tmp_line = source
                self.prompt = self.secondary_prompt
                return

            self._tmp_line = ""
            self.prompt = self._tmp_prompt

            self.sess.error_handler.register_file(Session.SH_FILE, source)
            self.sess.run(source)

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the TiEL interpreter!\n\n"
              "TiEL is a small imperative language with variables, functions and closures, \n"
              "if/then/else, while/do loops and a single built-in, print.\n\n"
              "Try it out by typing 'var x = 40;'. Then type 'print(x + 2);', which will \n"
              "print 42. Unclosed braces continue on the next line.")

    def emptyline(self):
        """Do not repeat previous command on empty line, but keep an open continuation going."""
        if self._tmp_line:
            self.default("")
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        if arg:
            self.sess.error_handler.warn(f"Unrecognized token: '{arg}'")
            return False
        return True
