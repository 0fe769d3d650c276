from __future__ import annotations

import logging

from mylisp import SExpression, LispValue
from mylisp import config
from mylisp.builtin import default_registry
from mylisp.builtin.registry import BuiltinRegistry
from mylisp.evaluation.evaluator import evaluate
from mylisp.reader.parser import parse
from mylisp.types.environment import Environment
from mylisp.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating mylisp code.
    Owns one binding table and one builtin registry across calls.
    """

    def __init__(
        self,
        env: Environment | None = None,
        builtins: BuiltinRegistry | None = None,
        *,
        repeat_token: str | None = None,
    ):
        self.env: Environment = env if env is not None else Environment()
        if builtins is None:
            builtins = default_registry(on_exit=self.request_exit)
        self.builtins: BuiltinRegistry = builtins
        self.repeat_token: str = config.get_repeat_token() if repeat_token is None else repeat_token
        self.running: bool = True
        self.last_code: SExpression = Nil
        self.last_result: LispValue = Nil

    def request_exit(self) -> None:
        """Called by `(exit)`: the shell stops after the current request."""
        logger.debug("exit requested")
        self.running = False

    def eval(self, code: SExpression) -> LispValue:
        return evaluate(code, self.env, self.builtins)

    def parse_and_eval(self, text: str) -> LispValue:
        """Parse the first form in `text` and evaluate it.

        Input equal to the repeat token evaluates nothing and returns the
        previous result again.
        """
        if text.strip() == self.repeat_token:
            return self.last_result
        code = parse(text)
        result = self.eval(code)
        self.last_code, self.last_result = code, result
        return result
