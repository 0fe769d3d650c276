import pytest

from mylisp.builtin import default_registry
from mylisp.interpreter import Interpreter
from mylisp.types.environment import Environment

# Most tests go through an Interpreter so that parsing, evaluation and the
# binding table are exercised together. The repeat token is pinned so a
# MYLISP_REPEAT_TOKEN set in the caller's shell cannot change behaviour.


@pytest.fixture
def env():
    """Fresh, empty binding table."""
    return Environment()


@pytest.fixture
def builtins():
    """Frozen registry with every builtin loaded."""
    return default_registry()


@pytest.fixture
def interp():
    return Interpreter(repeat_token="!!")


@pytest.fixture
def run(interp):
    return interp.parse_and_eval
