"""
minforth Stack Operations - Stack manipulation words
"""

from .tokens import Kind


class ForthStack:
    """Mixin providing stack manipulation operations"""

    def _register_stack_words(self):
        """Register stack words"""
        self.primitives[Kind.DUP] = self._dup
        self.primitives[Kind.DROP] = self._drop
        self.primitives[Kind.SWAP] = self._swap
        self.primitives[Kind.OVER] = self._over
        self.primitives[Kind.ROT] = self._rot
        self.primitives[Kind.DOT] = self._dot

    def _dup(self):
        self._need(1, 'dup')
        self.stack.append(self.stack[-1])

    def _drop(self):
        self._pop('drop')

    def _swap(self):
        self._need(2, 'swap')
        a, b = self.stack.pop(), self.stack.pop()
        self.stack.extend([a, b])

    def _over(self):
        self._need(2, 'over')
        self.stack.append(self.stack[-2])

    def _rot(self):
        self._need(3, 'rot')
        c = self.stack.pop()
        b = self.stack.pop()
        a = self.stack.pop()
        self.stack.extend([b, c, a])

    def _dot(self):
        self._write(str(self._pop('.')))

    def format_stack(self):
        """Stack as shown by .s: <depth> followed by the items"""
        items = ' '.join(str(item) for item in self.stack)
        return f"<{len(self.stack)}> {items}".rstrip()
