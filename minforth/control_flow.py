"""
minforth Control Flow - IF/ELSE/THEN, DO/LOOP, BEGIN/UNTIL

Every construct works on the pending token window: it scans forward for its
closing marker and either skips past it or runs the enclosed span again.
"""

import logging

from .core import LoopContext, NotInLoop
from .tokens import Kind

logger = logging.getLogger(__name__)


class ForthControlFlow:
    """Mixin providing control flow structures"""

    def _register_control_flow_words(self):
        """Register control flow words"""
        self.primitives[Kind.I] = self._loop_i

        self.immediate_words[Kind.IF] = self._if
        self.immediate_words[Kind.ELSE] = self._else
        self.immediate_words[Kind.THEN] = self._then_marker

        self.immediate_words[Kind.DO] = self._do
        self.immediate_words[Kind.LOOP] = self._loop_marker

        self.immediate_words[Kind.BEGIN] = self._begin
        self.immediate_words[Kind.UNTIL] = self._until_marker

    def _scan(self, tokens, pos, end, opener, closer, stops=()):
        """Index of the first closer (or stop) at nesting level zero.

        Returns end when there is none.  With nested_control off, openers are
        not counted and the first closer or stop wins.
        """
        depth = 0
        nested = self.nested_control
        for i in range(pos, end):
            kind = tokens[i].kind
            if nested and kind is opener:
                depth += 1
            elif kind is closer:
                if depth == 0:
                    return i
                depth -= 1
            elif depth == 0 and kind in stops:
                return i
        return end

    def _loop_i(self):
        if not self.loop_context.active:
            raise NotInLoop()
        self._push(self.loop_context.index)

    def _if(self, tokens, pos, end):
        """if ( flag -- ) runs the following tokens when flag is non-zero"""
        flag = self._pop('if') != 0
        self.if_stack.append(flag)
        if flag:
            return pos

        i = self._scan(tokens, pos, end, Kind.IF, Kind.THEN, (Kind.ELSE,))
        if i < end and tokens[i].kind is Kind.ELSE:
            return i + 1
        self.if_stack.pop()
        return min(i + 1, end)

    def _else(self, tokens, pos, end):
        # A false condition already jumped past this else.
        if not self.if_stack or not self.if_stack[-1]:
            return pos
        i = self._scan(tokens, pos, end, Kind.IF, Kind.THEN)
        self.if_stack.pop()
        return min(i + 1, end)

    def _then_marker(self, tokens, pos, end):
        if self.if_stack:
            self.if_stack.pop()
        return pos

    def _do(self, tokens, pos, end):
        """do ( start limit -- ) runs the body for start <= i < limit"""
        limit = self._pop('do')
        start = self._pop('do')
        close = self._scan(tokens, pos, end, Kind.DO, Kind.LOOP)
        logger.debug("do loop %d..%d over tokens %d:%d", start, limit, pos, close)

        outer = self.loop_context
        self.loop_context = LoopContext(start, True)
        try:
            while self.loop_context.index < limit:
                self.run(tokens, pos, close)
                self.loop_context.index += 1
        finally:
            self.loop_context = outer
        return min(close + 1, end)

    def _loop_marker(self, tokens, pos, end):
        return pos

    def _begin(self, tokens, pos, end):
        """begin ... until ( flag -- ) repeats the body until flag is non-zero"""
        close = self._scan(tokens, pos, end, Kind.BEGIN, Kind.UNTIL)
        while True:
            self.run(tokens, pos, close)
            if self._pop('until') != 0:
                break
        return min(close + 1, end)

    def _until_marker(self, tokens, pos, end):
        return pos
