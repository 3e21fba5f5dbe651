"""
Unit tests for the pylox runner.

Tests for Session.run, run_file, run_prompt and the command-line entry point.
"""

import io
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from runner import Session, EXIT_OK, EXIT_USAGE, EXIT_DATA_ERROR, EXIT_NO_INPUT
from runner.cli import main


def make_session(**kwargs):
    out = io.StringIO()
    err = io.StringIO()
    return Session(out=out, err=err, **kwargs), out, err


class TestSessionRun(unittest.TestCase):
    """Test Session.run()."""

    def test_prints_tree(self):
        """A valid expression prints its tree to out."""
        session, out, err = make_session()
        result = session.run("-123 * (45.67)")
        self.assertTrue(result.ok)
        self.assertEqual(out.getvalue(), "(* (- 123.0) (group 45.67))\n")
        self.assertEqual(err.getvalue(), "")

    def test_syntax_error_prints_nothing_to_out(self):
        """Errors go to err only."""
        session, out, err = make_session()
        result = session.run("(1 + 2")
        self.assertIsNone(result.expression)
        self.assertTrue(session.had_error)
        self.assertEqual(out.getvalue(), "")
        self.assertEqual(err.getvalue(), "[line 1] Error at end: Expect ')' after expression.\n")

    def test_lexical_error_suppresses_tree(self):
        """A tree is not printed when the scanner reported an error."""
        session, out, err = make_session()
        session.run("1 + 2 @")
        self.assertEqual(out.getvalue(), "")
        self.assertIn("Unexpected character.", err.getvalue())

    def test_show_tokens(self):
        """Tokens are dumped before the tree."""
        session, out, _ = make_session(show_tokens=True)
        session.run("1 + 2")
        self.assertEqual(out.getvalue().splitlines(), [
            "NUMBER 1 1.0",
            "PLUS + null",
            "NUMBER 2 2.0",
            "EOF  null",
            "(+ 1.0 2.0)",
        ])

    def test_deep_tree_reports_instead_of_printing(self):
        """A left-deep chain too long to print is reported, not raised."""
        session, out, err = make_session()
        result = session.run("1" + " + 1" * 5000)
        self.assertIsNotNone(result.expression)
        self.assertTrue(session.had_error)
        self.assertEqual(out.getvalue(), "")
        self.assertEqual(err.getvalue(), "[line 1] Error: Expression too deep to print.\n")


class TestSessionRunFile(unittest.TestCase):
    """Test Session.run_file()."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def write(self, name, source):
        path = self.tmp / name
        path.write_text(source, encoding='utf-8')
        return path

    def test_ok_file(self):
        session, out, _ = make_session()
        code = session.run_file(self.write("ok.lox", "// sum\n1 + 2\n"))
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(out.getvalue(), "(+ 1.0 2.0)\n")

    def test_bad_file_returns_data_error(self):
        session, out, err = make_session()
        code = session.run_file(self.write("bad.lox", "1 +\n"))
        self.assertEqual(code, EXIT_DATA_ERROR)
        self.assertEqual(err.getvalue(), "[line 2] Error at end: Expect expression.\n")

    def test_missing_file_raises(self):
        session, _, _ = make_session()
        with self.assertRaises(OSError):
            session.run_file(self.tmp / "missing.lox")


class TestSessionPrompt(unittest.TestCase):
    """Test Session.run_prompt()."""

    def test_runs_each_line(self):
        session, out, _ = make_session()
        code = session.run_prompt(io.StringIO("1 + 2\n!true\n"))
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(out.getvalue(), "> (+ 1.0 2.0)\n> (! true)\n> \n")

    def test_errors_do_not_carry_over(self):
        """The error from the first line is cleared before the second."""
        session, out, err = make_session()
        session.run_prompt(io.StringIO("(\n2\n"))
        self.assertIn("2.0\n", out.getvalue())
        self.assertEqual(err.getvalue().count("Error"), 1)
        self.assertFalse(session.had_error)

    def test_error_at_end_is_on_line_one(self):
        """The line terminator is not part of the source."""
        session, _, err = make_session()
        session.run_prompt(io.StringIO("(1 + 2\n"))
        self.assertEqual(err.getvalue(), "[line 1] Error at end: Expect ')' after expression.\n")

    def test_crlf_line_terminator(self):
        session, out, err = make_session()
        session.run_prompt(io.StringIO("1 +\r\n"))
        self.assertEqual(err.getvalue(), "[line 1] Error at end: Expect expression.\n")

    def test_empty_input(self):
        session, out, _ = make_session()
        self.assertEqual(session.run_prompt(io.StringIO("")), EXIT_OK)
        self.assertEqual(out.getvalue(), "> \n")


class TestCommandLine(unittest.TestCase):
    """Test runner.cli.main()."""

    def run_main(self, argv):
        out = io.StringIO()
        err = io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_too_many_arguments(self):
        code, _, err = self.run_main(["a.lox", "b.lox"])
        self.assertEqual(code, EXIT_USAGE)
        self.assertIn("Usage: pylox [script]", err)

    def test_missing_script(self):
        with tempfile.TemporaryDirectory() as tmp:
            code, _, err = self.run_main([str(Path(tmp) / "nope.lox")])
        self.assertEqual(code, EXIT_NO_INPUT)
        self.assertIn("cannot read", err)

    def test_script(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "expr.lox"
            path.write_text("(1 + 2) * 3", encoding='utf-8')
            code, out, err = self.run_main([str(path)])
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(out, "(* (group (+ 1.0 2.0)) 3.0)\n")
        self.assertEqual(err, "")

    def test_script_with_errors(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "bad.lox"
            path.write_text('"open', encoding='utf-8')
            code, out, err = self.run_main([str(path)])
        self.assertEqual(code, EXIT_DATA_ERROR)
        self.assertEqual(out, "")
        self.assertIn("[line 1] Error: Unterminated string.", err)

    def test_tokens_flag(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "one.lox"
            path.write_text("nil", encoding='utf-8')
            code, out, _ = self.run_main(["--tokens", str(path)])
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(out, "NIL nil null\nEOF  null\nnil\n")


if __name__ == "__main__":
    unittest.main()
