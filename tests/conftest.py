import pytest

from malt.builtin.env_builtin import register
from malt.interpreter import Interpreter
from malt.types.environment import Environment


@pytest.fixture
def env():
    """Fresh top-level environment with builtins loaded."""
    return register(Environment())


@pytest.fixture
def interp():
    return Interpreter()
