#!/usr/bin/env python3
"""
minforth - Minimal Forth interpreter

Modes of use:
1. Run a Forth file:        python main.py program.fth
2. Interactive REPL:        python main.py -i
3. Python DSL:              from minforth import InteractiveForth

No external dependencies.
"""

import sys

from minforth.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
