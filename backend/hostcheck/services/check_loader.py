"""
Check Loader - Read check definitions from TOML.

Layout:

    [[check]]
    message = "Removed netcat"
    points = 5
      [[check.pass]]
      type = "PathExistsNot"
      path = "/usr/bin/nc"
"""
import tomllib
from pathlib import Path
from typing import Any, Union

from pydantic import TypeAdapter, ValidationError

from hostcheck.errors import ConfigurationError
from hostcheck.logger import logger
from hostcheck.schemas.check import Check

_checks_adapter = TypeAdapter(list[Check])


def parse_checks(data: dict[str, Any]) -> list[Check]:
    """Validate already-parsed configuration data."""
    unknown = sorted(set(data) - {"check"})
    if unknown:
        raise ConfigurationError(f"Unknown top-level configuration keys: {unknown}")

    try:
        return _checks_adapter.validate_python(data.get("check", []))
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid check configuration ({e.error_count()} errors)",
            str(e)
        ) from e


def load_checks(path: Union[str, Path]) -> list[Check]:
    """
    Load checks from a TOML file.

    Raises:
        ConfigurationError: unreadable file, TOML syntax error or a value
            that does not fit the check schema
    """
    path = Path(path)
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read check configuration {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in {path}: {e}") from e

    checks = parse_checks(data)
    logger.info(f"Loaded {len(checks)} checks from {path}")
    return checks
