"""
minforth - Minimal Forth-like stack language interpreter

Usage:
    from minforth import InteractiveForth
    forth = InteractiveForth()
    forth.execute(": double 2 * ; 5 double .")

Command line:
    python -m minforth program.fth
"""

from .tokens import Kind, Token
from .tokenizer import tokenize
from .core import (ForthException, StackUnderflow, RecursionDepthExceeded,
                   OutOfBounds, ArithmeticFailure, UndefinedWord,
                   ExpectedIdentifier, NotInLoop, IOFailure)
from .interpreter import Forth
from .repl import ForthREPL, InteractiveForth

__all__ = ['Forth', 'InteractiveForth', 'Kind', 'Token', 'tokenize',
           'ForthException', 'StackUnderflow', 'RecursionDepthExceeded',
           'OutOfBounds', 'ArithmeticFailure', 'UndefinedWord',
           'ExpectedIdentifier', 'NotInLoop', 'IOFailure']
__version__ = '1.0.0'
