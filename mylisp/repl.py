"""
Interactive shell for mylisp.

Usage: mylisp [--trace] [--prompt TEXT] [-c EXPR]

Reads one form per line, prints the type-tagged result, reports errors
and keeps going. A blank line shows the previous result again without
evaluating anything. Stops on (exit), end of input or Ctrl-C.
"""

from __future__ import annotations

import argparse
import logging
import sys

from mylisp import config
from mylisp.errors import MyLispError
from mylisp.interpreter import Interpreter
from mylisp.printer import to_str


def repl(interp: Interpreter, prompt: str) -> None:
    while interp.running:
        try:
            line = input(prompt)
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print("\nGot SIGINT. Shutdown gracefully")
            break
        try:
            if not line.strip():
                # blank line shows the previous result again
                result = interp.last_result
            else:
                result = interp.parse_and_eval(line)
        except MyLispError as ex:
            print(f"Error: {ex}")
            continue
        except KeyboardInterrupt:
            print("\nGot SIGINT. Shutdown gracefully")
            break
        print(to_str(result, with_type_tag=True))


def main(argv: list[str] | None = None) -> int:
    """Command-line interface for the interpreter."""
    parser = argparse.ArgumentParser(
        prog='mylisp',
        description='mylisp - a small homoiconic list-processing language'
    )
    parser.add_argument('-c', '--command', metavar='EXPR',
                        help='Evaluate a single expression, print the result and exit')
    parser.add_argument('--prompt', default=None,
                        help='Prompt shown before each line (default: $MYLISP_PROMPT or ">> ")')
    parser.add_argument('--trace', action='store_true',
                        help='Log every evaluation step to stderr')

    args = parser.parse_args(argv)

    if args.trace or config.trace_enabled():
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    interp = Interpreter()

    if args.command is not None:
        try:
            result = interp.parse_and_eval(args.command)
        except MyLispError as ex:
            print(f"Error: {ex}", file=sys.stderr)
            return 1
        print(to_str(result, with_type_tag=True))
        return 0

    print("Welcome to MyLisp.")
    repl(interp, args.prompt if args.prompt is not None else config.get_prompt())
    return 0


if __name__ == '__main__':
    sys.exit(main())
