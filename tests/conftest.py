"""
Shared fixtures: fake shell, captured logger, engine factory.
"""
import pytest

from hostcheck.errors import CommandError
from hostcheck.logger import CheckLogger
from hostcheck.services.conditions.context import EvaluationContext
from hostcheck.services.conditions.engine import ConditionEngine
from hostcheck.services.obfuscation import NullObfuscator


class FakeShell:
    """Stands in for shell_command_output.

    Unknown commands print nothing. A CommandError value is raised instead
    of returned.
    """

    def __init__(self, outputs=None):
        self.outputs = dict(outputs or {})
        self.calls = []

    def __call__(self, cmd):
        self.calls.append(cmd)
        result = self.outputs.get(cmd, "")
        if isinstance(result, CommandError):
            raise result
        return result


@pytest.fixture
def shell():
    return FakeShell()


@pytest.fixture
def make_context(shell):
    def _make(**overrides):
        params = {
            "log": CheckLogger(verbose=False),
            "run_command": shell,
            "obfuscator": NullObfuscator(),
        }
        params.update(overrides)
        return EvaluationContext(**params)
    return _make


@pytest.fixture
def context(make_context):
    return make_context()


@pytest.fixture
def make_engine(make_context):
    def _make(**overrides):
        return ConditionEngine(make_context(**overrides))
    return _make


@pytest.fixture
def engine(make_engine):
    return make_engine()
