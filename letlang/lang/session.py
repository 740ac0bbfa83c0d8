"""Session control for the letlang language. A session owns one program, read from a file or built up line by line
in command-line mode, and runs it through the lexer and the parser.
"""

from letlang.lang.error import GenericException
from letlang.lang.lexical import lex
from letlang.lang.syntax import parse


# line breaks are followed by a space so that every line starts a new segment
LINE_SEP = "\n "

SAMPLE = LINE_SEP.join([
    "let it be 0.654876418768547946",
    "let\n\r hex be 0xfb00be",
    "let a be hex",
])


class Session:
    """Governs a letlang session: its source lines, tokens, and the resulting bindings."""
    SH_FILE = "<in>"         # command-line interpreter filename
    SAMPLE_FILE = "<sample>"  # filename reported for the built-in sample program

    def __init__(self, error_handler, path, cmd_line=False):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for token positions and error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode

        self.lines = []     # preprocessed source lines
        self.tokens = []    # tokens of the last run
        self.bindings = {}  # name: value bindings of the last run

        if self.cmd_line:
            self.error_handler.fatal = False

        if path not in (Session.SH_FILE, Session.SAMPLE_FILE):
            try:
                with open(path, "r") as file:
                    for line in file:
                        line = self.preprocess_line(line)
                        if line:
                            self.lines.append(line)
            except OSError:
                raise GenericException("'{}' could not be opened", path, diagnosis=False)

        elif path == Session.SH_FILE and not cmd_line:
            raise GenericException("'<in>' is a reserved filename")

    @classmethod
    def sample(cls, error_handler):
        """Returns a Session over the built-in sample program."""
        sess = cls(error_handler, Session.SAMPLE_FILE)
        sess.lines.append(SAMPLE)
        return sess

    @staticmethod
    def preprocess_line(line):
        """Strips the trailing line break from line. Blank lines come back empty and should be dropped."""
        line = line.rstrip("\r\n")
        return "" if line.isspace() else line

    @property
    def source(self):
        return LINE_SEP.join(self.lines)

    def _evaluate(self, lines):
        """Lexes and parses lines as one program. Returns (tokens, bindings)."""
        tokens = lex(LINE_SEP.join(lines), self.path)
        return tokens, parse(tokens)

    def add(self, line, line_num=None):
        """Adds line to the program. The line is only kept if the program still parses with it: on a ParseError the
        session is left untouched and the error is raised.
        """
        line = self.preprocess_line(line)
        if not line:
            raise ValueError("line is empty")

        self.error_handler.register_line(self.path, line, line_num or len(self.lines) + 1)  # in case error is raised
        self.tokens, self.bindings = self._evaluate(self.lines + [line])
        self.lines.append(line)
        self.error_handler.remove_line(self.path)  # error was not raised

    def run(self):
        """Runs the whole program and returns its bindings. Will raise any errors that are encountered."""
        self.tokens, self.bindings = self._evaluate(self.lines)
        return self.bindings

    def report(self):
        """Returns the output lines for the current bindings: the number of bindings, then one 'key : value' each."""
        return [str(len(self.bindings))] + [f"{key} : {value}" for key, value in self.bindings.items()]
