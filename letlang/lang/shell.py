"""Handles interactive/command-line mode for the letlang interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """letlang interpreter shell."""
    intro = "letlang interpreter :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self.line_num = 0

    def default(self, line):
        """Adds an arbitrary letlang statement to the session and prints the resulting bindings."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            try:
                self.sess.add(line, self.line_num)
            except ValueError:
                return  # if line is empty, terminate

            for out in self.sess.report():
                print(out)

    def do_tokens(self, arg):
        """Prints the token stream of the current program."""
        for token in self.sess.tokens:
            print(repr(token))

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the letlang interpreter!\n\n"
              "letlang knows two statements: 'let <name> be <value>' declares a name and binds \n"
              "a value to it, and '<name> = <value>' rebinds the most recently declared name. \n"
              "Values are taken literally, there are no expressions.\n\n"
              "Try it out by typing 'let x be 5'. Next, try 'x = 10'. Type 'tokens' to see how \n"
              "the program was lexed.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit("")

    def do_exit(self, arg):
        """Exits interpreter."""
        if arg:
            self.sess.error_handler.warn("unrecognized argument to exit: '{}'", arg)
            return False
        return True
