"""Tests for argument validation and the predicate registry."""
import logging

import pytest

from hostcheck.errors import ConfigurationError
from hostcheck.logger import CheckLogger
from hostcheck.schemas.check import Cond
from hostcheck.services.conditions.contract import require_args
from hostcheck.services.conditions.engine import ConditionEngine
from hostcheck.services.conditions.predicates import PREDICATES
from hostcheck.services.conditions.registry import Predicate, predicate


def _warnings(caplog):
    return [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]


class TestRequireArgs:
    """Required and unused parameter slots."""

    def test_required_only_passes_silently(self, caplog):
        cond = Cond(type="PathExists", path="/etc/passwd")
        require_args(cond, ("path",), CheckLogger())
        assert _warnings(caplog) == []

    def test_unused_argument_warns_once(self, caplog):
        cond = Cond(type="PathExists", path="/etc/passwd", value="x")
        require_args(cond, ("path",), CheckLogger())
        assert _warnings(caplog) == ["PathExists: specifying unused argument 'value'"]

    def test_hint_is_not_an_argument(self, caplog):
        cond = Cond(type="PathExists", path="/etc/passwd", hint="look in /etc")
        require_args(cond, ("path",), CheckLogger())
        assert _warnings(caplog) == []

    def test_missing_required_argument_is_fatal(self):
        cond = Cond(type="FileContains", path="/etc/passwd")
        with pytest.raises(ConfigurationError, match="FileContains: missing required argument 'value'"):
            require_args(cond, ("path", "value"), CheckLogger())

    def test_internal_condition_skips_validation(self, caplog):
        cond = Cond(value="unused")
        require_args(cond, ("path",), CheckLogger())
        assert _warnings(caplog) == []

    def test_engine_warns_and_proceeds(self, engine, tmp_path, caplog):
        target = tmp_path / "present"
        target.write_text("")
        cond = Cond(type="PathExists", path=str(target), value="ignored")
        assert engine.evaluate(cond) is True
        assert _warnings(caplog) == ["PathExists: specifying unused argument 'value'"]

    def test_engine_fails_on_missing_argument(self, engine):
        with pytest.raises(ConfigurationError, match="missing required argument 'cmd'"):
            engine.evaluate(Cond(type="CommandOutput", value="x"))


class TestRegistry:
    """Registering predicates."""

    def test_builtin_predicates(self):
        assert set(PREDICATES) >= {
            "PathExists", "FileContains", "DirContains",
            "FileEquals", "CommandOutput", "CommandContains",
        }
        assert PREDICATES["DirContains"].required == ("path", "value")
        assert PREDICATES["PathExists"].required == ("path",)

    def test_rejects_unknown_slot(self):
        with pytest.raises(ValueError, match="unknown parameter slot"):
            predicate("UserExists", "username")

    def test_rejects_modifier_suffix(self):
        with pytest.raises(ValueError, match="modifier suffix"):
            predicate("ServiceNot", "name")

    def test_rejects_duplicate_name(self):
        with pytest.raises(ValueError, match="already registered"):
            predicate("PathExists", "path")(lambda cond, context: (True, None))

    def test_custom_predicate_gets_modifiers(self, make_context):
        predicates = dict(PREDICATES)
        predicates["UserExists"] = Predicate(
            name="UserExists",
            func=lambda cond, context: (cond.user == "root", None),
            required=("user",)
        )
        engine = ConditionEngine(make_context(), predicates)

        assert engine.evaluate(Cond(type="UserExists", user="root")) is True
        assert engine.evaluate(Cond(type="UserExistsNot", user="root")) is False
        assert engine.evaluate(Cond(type="UserExistsNot", user="nobody")) is True
