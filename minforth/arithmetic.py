"""
minforth Arithmetic - Integer, bitwise and comparison operations
"""

from .core import ArithmeticFailure, INT32_SIGN
from .tokens import Kind

TRUE = -1
FALSE = 0


def _truncated_divmod(b, a):
    """Quotient rounded toward zero and remainder with the dividend's sign"""
    if a == 0:
        raise ArithmeticFailure("division by zero")
    if b == -INT32_SIGN and a == -1:
        raise ArithmeticFailure("division overflow")
    q = abs(b) // abs(a)
    if (b < 0) != (a < 0):
        q = -q
    return q, b - q * a


class ForthArithmetic:
    """Mixin providing arithmetic operations"""

    def _register_arithmetic_words(self):
        """Register arithmetic words"""
        self.primitives[Kind.PLUS] = self._plus
        self.primitives[Kind.MINUS] = self._minus
        self.primitives[Kind.STAR] = self._mult
        self.primitives[Kind.SLASH] = self._div
        self.primitives[Kind.MOD] = self._mod

        self.primitives[Kind.AND] = self._and
        self.primitives[Kind.OR] = self._or
        self.primitives[Kind.INVERT] = self._invert

        self.primitives[Kind.LESS] = self._less
        self.primitives[Kind.GREATER] = self._greater
        self.primitives[Kind.EQUAL] = self._equal

    def _operands(self, word):
        """Pop a then b; returns (b, a) in source order"""
        a = self._pop(word)
        b = self._pop(word)
        return b, a

    def _plus(self):
        b, a = self._operands('+')
        self._push(b + a)

    def _minus(self):
        b, a = self._operands('-')
        self._push(b - a)

    def _mult(self):
        b, a = self._operands('*')
        self._push(b * a)

    def _div(self):
        b, a = self._operands('/')
        self._push(_truncated_divmod(b, a)[0])

    def _mod(self):
        b, a = self._operands('mod')
        self._push(_truncated_divmod(b, a)[1])

    def _and(self):
        b, a = self._operands('and')
        self._push(b & a)

    def _or(self):
        b, a = self._operands('or')
        self._push(b | a)

    def _invert(self):
        a = self._pop('invert')
        self._push(-a - 1)

    def _less(self):
        b, a = self._operands('<')
        self._push(TRUE if b < a else FALSE)

    def _greater(self):
        b, a = self._operands('>')
        self._push(TRUE if b > a else FALSE)

    def _equal(self):
        b, a = self._operands('=')
        self._push(TRUE if b == a else FALSE)
