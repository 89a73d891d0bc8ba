"""Database connection settings and their loading from environment variables."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

_SERVER_VARS = ("DB_HOST", "DB_PORT", "DB_USERNAME", "DB_PASSWORD", "DB_NAME")

_REQUIRED_VARS: dict[str, tuple[str, ...]] = {
    "postgres": _SERVER_VARS,
    "mysql": _SERVER_VARS,
    "mssql": _SERVER_VARS,
    "oracle": _SERVER_VARS,
    "sqlite": ("DB_NAME",),
    "firebase": ("DB_API_KEY",),
}

_ENV_NAMES = (
    "DB_HOST",
    "DB_PORT",
    "DB_USERNAME",
    "DB_PASSWORD",
    "DB_DRIVER",
    "DB_NAME",
    "DB_SSLMODE",
    "DB_API_KEY",
)


@dataclass
class DBConfig:
    """Parameters needed to open a database connection."""

    db_type: str = ""
    driver: str = ""
    username: str = ""
    password: str = ""
    host: str = ""
    port: int = 0
    db_name: str = ""
    db_api_key: str = ""
    ssl_mode: str = ""


class ConfigError(ValueError):
    """Base class for database configuration errors."""


class EnvParNotFoundError(ConfigError):
    """A required database variable is not set."""

    def __init__(self, message: str = "a required database variable is not set") -> None:
        super().__init__(message)


class EnvParPortNotIntError(ConfigError):
    """The connection port is not an integer."""

    def __init__(self, message: str = "the connection port number is not an integer") -> None:
        super().__init__(message)


class InvalidDBTypeError(ConfigError):
    """The configured database driver is not supported."""

    def __init__(self, message: str = "DB_DRIVER is not valid, check the '.env' file") -> None:
        super().__init__(message)


def _parse_int(text: str) -> int:
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def required_vars_for_db_type(db_type: str) -> list[str]:
    """Return the environment variables a database driver requires."""
    try:
        return list(_REQUIRED_VARS[db_type])
    except KeyError:
        raise InvalidDBTypeError() from None


def _validate(values: Mapping[str, str]) -> None:
    for name in required_vars_for_db_type(values["DB_DRIVER"]):
        if not values[name]:
            raise EnvParNotFoundError()
    try:
        _parse_int(values["DB_PORT"])
    except ValueError:
        raise EnvParPortNotIntError() from None


def init_database_vars(environ: Mapping[str, str] | None = None) -> DBConfig:
    """Build a DBConfig from environment variables, validating them first."""
    source = os.environ if environ is None else environ
    values = {name: source.get(name, "") for name in _ENV_NAMES}

    _validate(values)

    return DBConfig(
        driver=values["DB_DRIVER"],
        username=values["DB_USERNAME"],
        password=values["DB_PASSWORD"],
        host=values["DB_HOST"],
        port=_parse_int(values["DB_PORT"]),
        db_name=values["DB_NAME"],
        ssl_mode=values["DB_SSLMODE"],
        db_api_key=values["DB_API_KEY"],
    )