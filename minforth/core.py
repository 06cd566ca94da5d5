"""
minforth Core - Base class with fundamental infrastructure
- Exception classes
- Interpreter state: data stack, memory, name tables
- Stack and memory access helpers
"""

import sys

from .tokens import Kind

INT32_MASK = 0xFFFFFFFF
INT32_SIGN = 0x80000000

DEFAULT_CELL_WIDTH = 1
# Python frames used per level of nesting (run -> _call or _do -> run)
FRAMES_PER_LEVEL = 2
# frames left for the caller and for primitives running at the deepest level
HOST_FRAME_MARGIN = 150


class ForthException(Exception):
    """Base for every error raised while running a program.

    ``code`` follows the standard Forth THROW numbering.
    """
    code = -1

    def __init__(self, message=None):
        self.message = message or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self):
        return f"{self.message} (THROW {self.code})"


class StackUnderflow(ForthException):
    code = -4

    def __init__(self, word=None):
        self.word = word
        if word:
            super().__init__(f"stack underflow in '{word}'")
        else:
            super().__init__("stack underflow")


class RecursionDepthExceeded(ForthException):
    code = -5

    def __init__(self, limit):
        self.limit = limit
        super().__init__(f"nesting deeper than {limit} levels")


class OutOfBounds(ForthException):
    code = -9

    def __init__(self, index, size):
        self.index = index
        self.size = size
        super().__init__(f"memory index {index} out of bounds (size {size})")


class ArithmeticFailure(ForthException):
    code = -10


class UndefinedWord(ForthException):
    code = -13

    def __init__(self, name):
        self.name = name
        super().__init__(f"undefined word '{name}'")


class ExpectedIdentifier(ForthException):
    code = -16

    def __init__(self, after, found=None):
        self.after = after
        self.found = found
        if found is None:
            super().__init__(f"'{after}' expects a name, got end of input")
        else:
            super().__init__(f"'{after}' expects a name, got '{found}'")


class NotInLoop(ForthException):
    code = -26

    def __init__(self):
        super().__init__("'i' used outside of do ... loop")


class IOFailure(ForthException):
    code = -37


def wrap32(value):
    """Wrap a Python int into the signed 32-bit range"""
    value &= INT32_MASK
    if value & INT32_SIGN:
        return value - (INT32_MASK + 1)
    return value


def default_max_depth():
    """Deepest nesting the current host recursion limit can hold"""
    return max(1, (sys.getrecursionlimit() - HOST_FRAME_MARGIN) // FRAMES_PER_LEVEL)


class LoopContext:
    """Counter of the innermost running do ... loop"""
    __slots__ = ('index', 'active')

    def __init__(self, index=0, active=False):
        self.index = index
        self.active = active

    def __repr__(self):
        return f"LoopContext(index={self.index}, active={self.active})"


class ForthBase:
    """Base mixin providing core infrastructure"""

    def __init__(self, output=None, input=None, cell_width=DEFAULT_CELL_WIDTH,
                 nested_control=True, max_depth=None):
        self.stack = []
        self.if_stack = []
        self.memory = []
        self.memory_map = {}
        self.constant_map = {}
        self.word_map = {}
        self.loop_context = LoopContext()

        self.output = output if output is not None else sys.stdout
        self.input = input if input is not None else sys.stdin

        self.cell_width = cell_width
        self.nested_control = nested_control
        self.max_depth = max_depth if max_depth is not None else default_max_depth()
        self._depth = 0

        self._register_core_words()

    def _register_core_words(self):
        """Register core words - to be extended by mixins"""
        self.primitives = {}
        self.immediate_words = {}

    # stack access

    def _push(self, value):
        self.stack.append(wrap32(value))

    def _pop(self, word=None):
        if not self.stack:
            raise StackUnderflow(word)
        return self.stack.pop()

    def _need(self, n, word=None):
        if len(self.stack) < n:
            raise StackUnderflow(word)

    def _write(self, text):
        self.output.write(text)
        self.output.flush()

    # memory access

    def _check_index(self, index):
        if not 0 <= index < len(self.memory):
            raise OutOfBounds(index, len(self.memory))
        return index

    def _lookup(self, name):
        """Resolve a name: dictionary first, then variables, then constants.

        Returns a ``(table, value)`` pair, or ``(None, None)``.
        """
        if name in self.word_map:
            return ('word', self.word_map[name])
        if name in self.memory_map:
            return ('variable', self.memory_map[name])
        if name in self.constant_map:
            return ('constant', self.constant_map[name])
        return (None, None)

    def _expect_name(self, tokens, pos, end, after):
        """Return the identifier at tokens[pos] or raise ExpectedIdentifier"""
        if pos >= end:
            raise ExpectedIdentifier(after)
        token = tokens[pos]
        if token.kind is not Kind.WORD:
            raise ExpectedIdentifier(after, str(token))
        return token.value
