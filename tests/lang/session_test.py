import os
import tempfile
import unittest

from letlang.lang.error import ErrorHandler, GenericException, ParseError
from letlang.lang.session import SAMPLE, Session


def write_program(text):
    """Writes text to a temporary .let file and returns its path."""
    fd, path = tempfile.mkstemp(suffix=".let")
    with os.fdopen(fd, "w") as file:
        file.write(text)
    return path


class SessionTestCase(unittest.TestCase):

    def test_sample(self):
        sess = Session.sample(ErrorHandler())
        self.assertEqual(SAMPLE, sess.source)

        expected = {"it": "0.654876418768547946", "hex": "0xfb00be", "a": "hex"}
        self.assertEqual(expected, sess.run())
        self.assertEqual(["3", "it : 0.654876418768547946", "hex : 0xfb00be", "a : hex"], sess.report())

    def test_file(self):
        path = write_program("let x be 5\nlet y be x\n\nx = 7\n")
        try:
            sess = Session(ErrorHandler(), path)
            self.assertEqual(["let x be 5", "let y be x", "x = 7"], sess.lines)
            self.assertEqual({"x": "5", "y": "7"}, sess.run())
            self.assertEqual({path}, {token.position.file for token in sess.tokens})
        finally:
            os.remove(path)

    def test_file_with_parse_error(self):
        path = write_program("let x be 5\nlet be 6\n")
        try:
            sess = Session(ErrorHandler(), path)
            self.assertRaises(ParseError, sess.run)
        finally:
            os.remove(path)

    def test_missing_file(self):
        with self.assertRaises(GenericException) as cm:
            Session(ErrorHandler(), os.path.join(tempfile.gettempdir(), "does-not-exist.let"))
        self.assertIn("could not be opened", str(cm.exception))

    def test_reserved_filename(self):
        self.assertRaises(GenericException, Session, ErrorHandler(), Session.SH_FILE)

    def test_preprocess_line(self):
        cases = {
            "let x be 5\n": "let x be 5",
            "let x be 5\r\n": "let x be 5",
            "  x = 3": "  x = 3",
            "   \n": "",
            "\n": "",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, Session.preprocess_line(case), repr(case))


class CommandLineSessionTestCase(unittest.TestCase):

    def setUp(self):
        self.error_handler = ErrorHandler()
        self.sess = Session(self.error_handler, Session.SH_FILE, cmd_line=True)

    def test_not_fatal(self):
        self.assertFalse(self.error_handler.fatal)

    def test_add(self):
        self.sess.add("let x be 5")
        self.assertEqual({"x": "5"}, self.sess.bindings)

        self.sess.add("x = 10")
        self.assertEqual({"x": "10"}, self.sess.bindings)

        self.sess.add("let y be x")
        self.assertEqual({"x": "10", "y": "x"}, self.sess.bindings)
        self.assertEqual("let x be 5\n x = 10\n let y be x", self.sess.source)

    def test_add_rejects_bad_line(self):
        self.sess.add("let x be 5")
        self.assertRaises(ParseError, self.sess.add, "let be 6")

        self.assertEqual(["let x be 5"], self.sess.lines)
        self.assertEqual({"x": "5"}, self.sess.bindings)
        self.assertEqual({"x": "5"}, self.sess.run())

    def test_add_empty_line(self):
        for case in ["", "   ", "\n"]:
            self.assertRaises(ValueError, self.sess.add, case)
        self.assertEqual([], self.sess.lines)

    def test_empty_program(self):
        self.assertEqual({}, self.sess.run())
        self.assertEqual(["0"], self.sess.report())


if __name__ == '__main__':
    unittest.main()
