"""Runs letlang programs: a file, the built-in sample program, or an interactive shell. Also uses the error handling
context manager. Called from the letlang console script.
"""

import argparse

from letlang.lang.error import ErrorHandler
from letlang.lang.session import Session
from letlang.lang.shell import Shell


def main(argv=None):
    """Runs the letlang interpreter. Exits with status 1 on a fatal parse error."""
    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="letlang")
        parser.add_argument("file", help="file to lex and parse (if empty, runs the built-in sample)", nargs="?")
        parser.add_argument("-i", "--interactive", help="go to command-line mode", action="store_true")
        parser.add_argument("-t", "--tokens", help="dump the token stream before the bindings", action="store_true")
        args = parser.parse_args(argv)

        if args.interactive:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True)).cmdloop()
            return

        if args.file is not None:
            sess = Session(error_handler, args.file)
        else:
            sess = Session.sample(error_handler)

        sess.run()

        if args.tokens:
            for token in sess.tokens:
                print(repr(token))

        for line in sess.report():
            print(line)


if __name__ == "__main__":
    main()
