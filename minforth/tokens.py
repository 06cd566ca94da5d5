"""
minforth Tokens - Token kinds, keyword table and the Token value type
"""

import enum
from collections import namedtuple


class Kind(enum.Enum):
    """Every kind of token the tokenizer can produce"""
    # arithmetic
    PLUS = '+'
    MINUS = '-'
    STAR = '*'
    SLASH = '/'
    MOD = 'mod'
    # stack
    DROP = 'drop'
    DUP = 'dup'
    SWAP = 'swap'
    OVER = 'over'
    ROT = 'rot'
    # I/O
    DOT = '.'
    EMIT = 'emit'
    CR = 'cr'
    KEY = 'key'
    # definitions
    COLON = ':'
    SEMICOLON = ';'
    # bitwise / comparison
    AND = 'and'
    OR = 'or'
    INVERT = 'invert'
    LESS = '<'
    GREATER = '>'
    EQUAL = '='
    # control flow
    IF = 'if'
    ELSE = 'else'
    THEN = 'then'
    DO = 'do'
    LOOP = 'loop'
    BEGIN = 'begin'
    UNTIL = 'until'
    I = 'i'
    # memory
    VARIABLE = 'variable'
    CONSTANT = 'constant'
    FETCH = '@'
    STORE = '!'
    PLUS_STORE = '+!'
    ALLOT = 'allot'
    CELLS = 'cells'
    # string markers
    DOT_QUOTE = '."'
    QUOTE = '"'
    # data carrying
    NUMBER = '<number>'
    WORD = '<word>'
    STRING = '<string>'


DATA_KINDS = frozenset([Kind.NUMBER, Kind.WORD, Kind.STRING])

KEYWORDS = {kind.value: kind for kind in Kind if kind not in DATA_KINDS}


class Token(namedtuple('Token', ['kind', 'value'])):
    """Immutable token; equality is structural over (kind, value)"""
    __slots__ = ()

    def __new__(cls, kind, value=None):
        return super().__new__(cls, kind, value)

    def __repr__(self):
        if self.kind in DATA_KINDS:
            return f"Token({self.kind.name}, {self.value!r})"
        return f"Token({self.kind.value})"

    def __str__(self):
        if self.kind is Kind.STRING:
            return f'." {self.value} "'
        if self.kind in DATA_KINDS:
            return str(self.value)
        return self.kind.value

    @classmethod
    def number(cls, value):
        return cls(Kind.NUMBER, value)

    @classmethod
    def word(cls, name):
        return cls(Kind.WORD, name)

    @classmethod
    def string(cls, text):
        return cls(Kind.STRING, text)


def keyword(spelling):
    """Token for a keyword spelling, e.g. keyword('dup')"""
    return Token(KEYWORDS[spelling])
