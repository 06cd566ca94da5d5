"""
minforth Tokenizer - Turns source text into a tuple of Tokens
"""

import logging
import re

from .tokens import KEYWORDS, Kind, Token

logger = logging.getLogger(__name__)

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1

_INTEGER = re.compile(r'[+-]?[0-9]+\Z')

STRING_START = Kind.DOT_QUOTE.value
STRING_END = Kind.QUOTE.value


def parse_integer(text):
    """Parse a signed 32-bit decimal literal, None if text is not one"""
    if not _INTEGER.match(text):
        return None
    value = int(text)
    if INT32_MIN <= value <= INT32_MAX:
        return value
    return None


def classify(unit):
    """Classify a single whitespace-delimited unit"""
    kind = KEYWORDS.get(unit)
    if kind is not None:
        return Token(kind)
    value = parse_integer(unit)
    if value is not None:
        return Token.number(value)
    return Token.word(unit)


def tokenize(text):
    """Split text on whitespace and classify each unit.

    ``."`` swallows the following units up to the next ``"`` unit and
    emits them, joined by single spaces, as one STRING token.  The closing
    quote is dropped.  An unterminated string runs to the end of the text.
    """
    units = text.split()
    tokens = []
    i = 0
    n = len(units)

    while i < n:
        unit = units[i]
        i += 1

        if unit == STRING_START:
            start = i
            while i < n and units[i] != STRING_END:
                i += 1
            tokens.append(Token.string(' '.join(units[start:i])))
            if i < n:
                i += 1
            continue

        tokens.append(classify(unit))

    logger.debug("tokenized %d units into %d tokens", n, len(tokens))
    return tuple(tokens)
