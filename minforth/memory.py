"""
minforth Memory - Flat cell memory, variables, constants
"""

import logging

from .core import wrap32
from .tokens import Kind

logger = logging.getLogger(__name__)


class ForthMemory:
    """Mixin providing memory management operations"""

    def _register_memory_words(self):
        """Register memory words"""
        self.primitives[Kind.FETCH] = self._fetch
        self.primitives[Kind.STORE] = self._store
        self.primitives[Kind.PLUS_STORE] = self._plus_store
        self.primitives[Kind.ALLOT] = self._allot
        self.primitives[Kind.CELLS] = self._cells

        self.immediate_words[Kind.VARIABLE] = self._variable
        self.immediate_words[Kind.CONSTANT] = self._constant

    def _fetch(self):
        index = self._check_index(self._pop('@'))
        self._push(self.memory[index])

    def _store(self):
        index = self._pop('!')
        value = self._pop('!')
        self.memory[self._check_index(index)] = value

    def _plus_store(self):
        """+! ( index -- ) Increments the cell at index by one"""
        index = self._check_index(self._pop('+!'))
        self.memory[index] = wrap32(self.memory[index] + 1)

    def _allot(self):
        count = self._pop('allot')
        if count > 0:
            self.memory.extend([0] * count)

    def _cells(self):
        self._push(self._pop('cells') * self.cell_width)

    def _variable(self, tokens, pos, end):
        """variable <name> - binds name to the next free cell"""
        name = self._expect_name(tokens, pos, end, 'variable')
        self.memory_map[name] = len(self.memory)
        self.memory.append(0)
        logger.debug("variable %s at index %d", name, self.memory_map[name])
        return pos + 1

    def _constant(self, tokens, pos, end):
        """constant <name> ( n -- ) binds name to n"""
        name = self._expect_name(tokens, pos, end, 'constant')
        self.constant_map[name] = self._pop('constant')
        logger.debug("constant %s = %d", name, self.constant_map[name])
        return pos + 1
