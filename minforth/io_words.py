"""
minforth I/O - Character output, line input and string literals
"""

from .core import IOFailure
from .tokens import Kind


class ForthIO:
    """Mixin providing I/O operations"""

    def _register_io_words(self):
        """Register I/O words"""
        self.primitives[Kind.EMIT] = self._emit
        self.primitives[Kind.CR] = self._cr
        self.primitives[Kind.KEY] = self._key

    def _emit(self):
        code = self._pop('emit')
        self._write(chr(code & 0xFF))

    def _cr(self):
        self._write('\n')

    def _key(self):
        """KEY ( -- c ) Reads a line and pushes the code of its first byte"""
        try:
            line = self.input.readline()
        except (OSError, ValueError) as e:
            raise IOFailure(f"key: cannot read input: {e}") from e
        if not line:
            raise IOFailure("key: end of input")
        self._push(line.encode('utf-8')[0])

    def _type_string(self, text):
        self._write(text)
