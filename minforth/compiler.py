"""
minforth Compiler - Colon definitions and name resolution
"""

import logging
from collections import namedtuple

from .core import UndefinedWord
from .tokens import Kind

logger = logging.getLogger(__name__)


class Span(namedtuple('Span', ['tokens', 'start', 'end'])):
    """A window [start, end) into an immutable token tuple"""
    __slots__ = ()

    def body(self):
        return self.tokens[self.start:self.end]

    def source(self):
        return ' '.join(str(token) for token in self.body())


class ForthCompiler:
    """Mixin providing word definition and lookup"""

    def _register_compiler_words(self):
        """Register compiler words"""
        self.immediate_words[Kind.COLON] = self._colon
        self.immediate_words[Kind.SEMICOLON] = self._semicolon_marker

    def _colon(self, tokens, pos, end):
        """: <name> ... ; binds name to the tokens up to the first ;"""
        name = self._expect_name(tokens, pos, end, ':')
        body_start = pos + 1
        close = self._scan(tokens, body_start, end, None, Kind.SEMICOLON)
        self.word_map[name] = Span(tokens, body_start, close)
        logger.debug("defined %s (%d tokens)", name, close - body_start)
        return min(close + 1, end)

    def _semicolon_marker(self, tokens, pos, end):
        return pos

    def _call(self, name):
        """Execute a word, or push a variable index or constant value"""
        table, value = self._lookup(name)
        if table == 'word':
            self.run(value.tokens, value.start, value.end)
        elif table is not None:
            self._push(value)
        else:
            raise UndefinedWord(name)

    def see(self, name):
        """Source text of a definition, as it would be typed"""
        table, value = self._lookup(name)
        if table == 'word':
            return f": {name} {value.source()} ;".replace('  ', ' ')
        if table == 'variable':
            return f"variable {name}"
        if table == 'constant':
            return f"{value} constant {name}"
        raise UndefinedWord(name)

    def list_words(self):
        """Names of every word, variable and constant, dictionary first"""
        names = list(self.word_map)
        names += [n for n in self.memory_map if n not in names]
        names += [n for n in self.constant_map if n not in names]
        return names
