"""
minforth - run a Forth source file

    python -m minforth program.fth
    python -m minforth -i                # interactive session
    python -m minforth -i program.fth    # load a file, then stay interactive
"""

import logging
import sys
from argparse import ArgumentParser

from .core import DEFAULT_CELL_WIDTH, ForthException, IOFailure
from .repl import InteractiveForth

logger = logging.getLogger('minforth')

HOST_RECURSION_LIMIT = 5000


def build_parser():
    parser = ArgumentParser(prog='minforth',
                            description="Run a program written in a minimal Forth dialect.")
    parser.add_argument("source", nargs='?', metavar="FILE",
                        help="Forth source file to run")
    parser.add_argument("-i", "--interactive", action="store_true", default=False,
                        help="start the interactive loop (after running FILE, if given)")
    parser.add_argument("--cell-width", type=int, default=DEFAULT_CELL_WIDTH, metavar="N",
                        help="value multiplied by 'cells' (default %(default)s)")
    parser.add_argument("--max-depth", type=int, default=None, metavar="N",
                        help="maximum nesting of word calls and control blocks (default: as deep as the host allows)")
    parser.add_argument("--flat-control", action="store_true", default=False,
                        help="match if/else/then, do/loop and begin/until by first occurrence, ignoring nesting")
    parser.add_argument("-v", "--verbose", action="store_true", default=False,
                        help="print status messages")
    parser.add_argument("--debug", action="store_true", default=False,
                        help="print debug messages")
    return parser


def read_source(path):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise IOFailure(f"cannot read {path}: {e}") from e


def main(argv=None):
    logging.basicConfig(level=logging.WARNING,
                        format="%(name)s: %(levelname)s: %(message)s")

    parser = build_parser()
    options = parser.parse_args(argv)

    if options.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    elif options.verbose:
        logging.getLogger().setLevel(logging.INFO)

    if options.source is None and not options.interactive:
        parser.error("a source FILE is required unless --interactive is given")

    old_limit = sys.getrecursionlimit()
    sys.setrecursionlimit(max(old_limit, HOST_RECURSION_LIMIT))
    try:
        return run_program(options)
    finally:
        sys.setrecursionlimit(old_limit)


def run_program(options):
    forth = InteractiveForth(cell_width=options.cell_width,
                             nested_control=not options.flat_control,
                             max_depth=options.max_depth)

    if options.source is not None:
        try:
            source = read_source(options.source)
            logger.info("running %s (%d characters)", options.source, len(source))
            forth.execute(source)
        except ForthException as e:
            sys.stdout.flush()
            sys.stderr.write(f"minforth: error: {e}\n")
            return 1
        except RecursionError:
            sys.stdout.flush()
            sys.stderr.write("minforth: error: host recursion limit reached\n")
            return 1
        logger.info("finished with %d item(s) on the stack", len(forth.stack))

    if options.interactive:
        forth.repl()
    return 0


if __name__ == '__main__':
    sys.exit(main())
