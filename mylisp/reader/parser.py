"""
  Reader for mylisp source text.

- Single pass over the characters, no separate token stream or AST pass.
- Builds runtime values directly:

    - nil            -> Nil
    - 'name          -> Symbol("name")
    - 12, -3.5, 1.   -> Number (tokens made only of digits, '.' and '-')
    - anything else  -> Variable
    - (op a b ...)   -> LispList whose head is Function("op")

- Each '(' pushes a level collecting an operator name and its arguments;
  each ')' folds the level into a chain and hands it to the enclosing level.
- Only the first complete top-level form is returned. Anything after it
  is ignored.
"""

from __future__ import annotations

import logging

from mylisp import SExpression, LispValue
from mylisp.errors import MyLispSyntaxError
from mylisp.types.cell import cons, make_list
from mylisp.types.nil import Nil
from mylisp.types.number import Number
from mylisp.types.symbol import Function, Symbol, Variable

logger = logging.getLogger(__name__)

NUMBER_CHARS = frozenset("0123456789.-")


def parse_atom(token: str) -> LispValue:
    """Classify a single token as nil, symbol, number or variable."""
    if not token:
        raise MyLispSyntaxError("Cannot parse an empty token")
    if token == "nil":
        return Nil
    if token.startswith("'"):
        return Symbol(token[1:])
    if all(c in NUMBER_CHARS for c in token):
        try:
            return Number(float(token))
        except ValueError:
            raise MyLispSyntaxError(f"Malformed number {token!r}") from None
    return Variable(token)


class _Level:
    """One open parenthesis: the operator seen so far and its arguments."""

    __slots__ = ("head", "args")

    def __init__(self):
        self.head: SExpression | None = None
        self.args: list[SExpression] = []

    def add_token(self, token: str) -> None:
        if self.head is None:
            self.head = Function(token)
        else:
            self.args.append(parse_atom(token))

    def add_form(self, form: SExpression) -> None:
        # A nested form in operator position becomes the head of this form
        if self.head is None:
            self.head = form
        else:
            self.args.append(form)

    def close(self) -> SExpression:
        if self.head is None:
            raise MyLispSyntaxError("Empty form: '()' has no operator")
        return cons(self.head, make_list(self.args))


class Reader:
    def __init__(self, source: str):
        self.source = source
        self.levels: list[_Level] = []
        self.token: list[str] = []

    @property
    def depth(self) -> int:
        return len(self.levels)

    def _flush(self, pos: int) -> None:
        if not self.token:
            return
        token = "".join(self.token)
        self.token.clear()
        if not self.levels:
            raise MyLispSyntaxError(f"Unexpected token {token!r} outside of a form at {pos}")
        self.levels[-1].add_token(token)

    def read(self) -> SExpression:
        pos = 0
        for pos, ch in enumerate(self.source):
            if ch == "(":
                self._flush(pos)
                self.levels.append(_Level())
            elif ch == ")":
                self._flush(pos)
                if not self.levels:
                    raise MyLispSyntaxError(f"Unmatched ')' at {pos}")
                form = self.levels.pop().close()
                if self.levels:
                    self.levels[-1].add_form(form)
                    continue
                rest = self.source[pos + 1:]
                if rest.strip():
                    logger.debug("ignoring input after first form: %r", rest)
                return form
            elif ch.isspace():
                self._flush(pos)
            else:
                self.token.append(ch)

        self._flush(pos)
        if self.depth != 0:
            raise MyLispSyntaxError(f"Unbalanced parentheses: {self.depth} '(' left open")
        raise MyLispSyntaxError("No form found in input")


def parse(source: str) -> SExpression:
    """Parse the first top-level form in `source`."""
    return Reader(source).read()
