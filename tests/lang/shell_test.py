import contextlib
import io
import unittest

from tiel.lang.error import ErrorHandler
from tiel.lang.session import Session
from tiel.lang.shell import Shell


class ShellTestCase(unittest.TestCase):

    def setUp(self):
        self.output = io.StringIO()
        self.stdout = io.StringIO()
        self.shell = Shell(Session(self.output, ErrorHandler(fatal=False)), stdout=self.stdout)

    def feed(self, *lines):
        """Runs lines through the shell and returns what the error handler printed."""
        printed = io.StringIO()
        with contextlib.redirect_stdout(printed):
            for line in lines:
                self.shell.onecmd(line)
        return printed.getvalue()

    def test_state_persists_between_lines(self):
        self.feed("var x = 40;", "print(x + 2);")
        self.assertEqual("42\n", self.output.getvalue())

    def test_line_continuation(self):
        self.feed("fun add(a, b) {")
        self.assertEqual(Shell.secondary_prompt, self.shell.prompt)
        self.feed("", "return a + b;", "}")
        self.assertEqual(Shell._tmp_prompt, self.shell.prompt)

        self.feed("print(add(", "1, 2));")
        self.assertEqual("3\n", self.output.getvalue())

    def test_brackets_in_strings_and_comments(self):
        self.feed("print(\"(\");", "var x = 1; // {", "print(x);")
        self.assertEqual(Shell._tmp_prompt, self.shell.prompt)
        self.assertEqual("(\n1\n", self.output.getvalue())

    def test_unterminated_string_continues(self):
        self.feed("print(\"one")
        self.assertEqual(Shell.secondary_prompt, self.shell.prompt)
        self.feed("two\");")
        self.assertEqual(Shell._tmp_prompt, self.shell.prompt)
        self.assertEqual("one\ntwo\n", self.output.getvalue())

    def test_errors_are_not_fatal(self):
        printed = self.feed("print(missing);", "var ok = 1;", "print(ok);")
        self.assertIn("Undefined variable 'missing'.", printed)
        self.assertEqual("1\n", self.output.getvalue())

        printed = self.feed("print(1)")
        self.assertIn("Expect ';' after expression.", printed)
        self.assertIn("Error on line 1: ", printed)

    def test_empty_line(self):
        self.assertEqual("", self.feed(""))
        self.assertEqual("", self.output.getvalue())

    def test_exit(self):
        self.assertTrue(self.shell.onecmd("exit"))

        printed = io.StringIO()
        with contextlib.redirect_stdout(printed):
            self.assertFalse(self.shell.onecmd("exit now"))
        self.assertIn("Unrecognized token: 'now'", printed.getvalue())

    def test_eof(self):
        printed = io.StringIO()
        with contextlib.redirect_stdout(printed):
            self.assertTrue(self.shell.onecmd("EOF"))

    def test_help(self):
        printed = self.feed("help")
        self.assertIn("Welcome to the TiEL interpreter!", printed)

    def test_is_open(self):
        should_pass = ["fun f() {", "print(", "{ { }", "f(g(", "print(\"}", "print(\")\" "]
        for case in should_pass:
            self.assertTrue(Shell.is_open(case), case)

        should_fail = ["print(1);", "{ }", "}", "", "print(\"(\");", "x; // {", "@ ("]
        for case in should_fail:
            self.assertFalse(Shell.is_open(case), case)


if __name__ == '__main__':
    unittest.main()
