"""
minforth REPL - Interactive Read-Eval-Print Loop and DSL interface
"""

import logging

from .core import ForthException
from .interpreter import Forth

logger = logging.getLogger(__name__)

PROMPT = "ok> "


class ForthREPL:
    """Mixin providing the interactive loop"""

    def _reset_after_error(self):
        self.stack.clear()
        self.if_stack.clear()

    def repl(self, get_input=input):
        """Start interactive REPL

        Each line is executed against the same interpreter, so definitions
        persist for the session.  Errors are reported and the stacks are
        cleared; 'bye' or end of input leaves the loop.
        """
        self._write("minforth - type 'bye' to exit\n")

        while True:
            try:
                try:
                    line = get_input(PROMPT)
                except EOFError:
                    self._write("\n")
                    break

                command = line.strip()
                if command == 'bye':
                    break
                if command == '.s':
                    self._write(self.format_stack() + "\n")
                    continue
                if command == 'words':
                    self._write(' '.join(self.list_words()) + "\n")
                    continue
                if command.startswith('see '):
                    self._write(self.see(command[4:].strip()) + "\n")
                    continue

                self.execute(line)
                self._write(" ok\n")
            except KeyboardInterrupt:
                self._write("\n(Ctrl+C) type 'bye' to exit\n")
            except ForthException as e:
                logger.debug("line failed: %r", e)
                self._write(f"\nError: {e}\n")
                self._reset_after_error()

        return self


class InteractiveForth(Forth, ForthREPL):
    """Complete Interactive Forth with REPL and DSL support"""

    def __repr__(self):
        return f"<InteractiveForth {self.format_stack()}>"

    def __call__(self, *values):
        return self.push(*values)

    def push(self, *values):
        for v in values:
            self._push(v)
        return self

    def pop(self):
        return self._pop()

    def peek(self):
        self._need(1)
        return self.stack[-1]

    @property
    def depth(self):
        return len(self.stack)
