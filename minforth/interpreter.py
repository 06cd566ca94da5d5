"""
minforth Interpreter - Mixin composition and the token evaluator
"""

from .core import ForthBase, RecursionDepthExceeded
from .arithmetic import ForthArithmetic
from .stack_ops import ForthStack
from .memory import ForthMemory
from .control_flow import ForthControlFlow
from .compiler import ForthCompiler
from .io_words import ForthIO
from .tokenizer import tokenize
from .tokens import Kind


class Forth(ForthBase, ForthArithmetic, ForthStack, ForthMemory,
            ForthControlFlow, ForthCompiler, ForthIO):
    """Complete Forth interpreter combining all mixins"""

    def __init__(self, **options):
        super().__init__(**options)
        self._register_all_words()

    def _register_all_words(self):
        """Register all words from all mixins"""
        self._register_arithmetic_words()
        self._register_stack_words()
        self._register_memory_words()
        self._register_control_flow_words()
        self._register_compiler_words()
        self._register_io_words()
        self.immediate_words[Kind.DOT_QUOTE] = self._quote_marker
        self.immediate_words[Kind.QUOTE] = self._quote_marker

    def execute(self, text):
        """Tokenize and run Forth source text"""
        self.run(tokenize(text))
        return self

    def run(self, tokens, start=0, end=None):
        """Run tokens[start:end] against the interpreter state.

        Control words consume part of the window themselves and hand back the
        position to continue from; word calls and loop bodies re-enter run on
        a sub-window of the same tuple.
        """
        if end is None:
            end = len(tokens)
        if self._depth >= self.max_depth:
            raise RecursionDepthExceeded(self.max_depth)

        self._depth += 1
        try:
            pos = start
            while pos < end:
                token = tokens[pos]
                pos += 1
                kind = token.kind

                if kind is Kind.NUMBER:
                    self._push(token.value)
                elif kind is Kind.WORD:
                    self._call(token.value)
                elif kind is Kind.STRING:
                    self._type_string(token.value)
                elif kind in self.primitives:
                    self.primitives[kind]()
                else:
                    pos = self.immediate_words[kind](tokens, pos, end)
        finally:
            self._depth -= 1
        return self

    def _quote_marker(self, tokens, pos, end):
        return pos
