"""Opening database engines from a DBConfig and keeping the current one."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine

from libfunctions.config import DBConfig

_engine: Engine | None = None
_repository: Repository | None = None


class InvalidDriverError(ValueError):
    """The configured SQL driver is not supported."""

    def __init__(self, message: str = "invalid - driver SQL") -> None:
        super().__init__(message)


@dataclass
class Repository:
    """Holds the engine that data access goes through."""

    db: Engine


def mssql_dsn(config: DBConfig) -> URL:
    """Return the connection URL for a SQL Server database."""
    return URL.create(
        "mssql",
        username=config.username,
        password=config.password,
        host=config.host,
        port=config.port,
        database=config.db_name,
    )


def mysql_dsn(config: DBConfig) -> URL:
    """Return the connection URL for a MySQL database."""
    return URL.create(
        "mysql",
        username=config.username,
        password=config.password,
        host=config.host,
        port=config.port,
        database=config.db_name,
        query={"charset": "utf8mb4"},
    )


def postgres_dsn(config: DBConfig) -> URL:
    """Return the connection URL for a PostgreSQL database."""
    query = {"sslmode": config.ssl_mode} if config.ssl_mode else {}
    return URL.create(
        "postgresql",
        username=config.username,
        password=config.password,
        host=config.host,
        port=config.port,
        database=config.db_name,
        query=query,
    )


def sqlite_dsn(config: DBConfig) -> URL:
    """Return the connection URL for a SQLite database file."""
    return URL.create("sqlite", database=config.db_name)


def _open(url: URL) -> Engine:
    """Create an engine and check that it can connect."""
    engine = create_engine(url)
    try:
        with engine.connect():
            pass
    except Exception:
        engine.dispose()
        raise
    return engine


def init_sqlite(config: DBConfig) -> Engine:
    """Open a SQLite database."""
    return _open(sqlite_dsn(config))


def init_mysql(config: DBConfig) -> Engine:
    """Open a MySQL database."""
    return _open(mysql_dsn(config))


def init_postgres(config: DBConfig) -> Engine:
    """Open a PostgreSQL database."""
    return _open(postgres_dsn(config))


def init_mssql(config: DBConfig) -> Engine:
    """Open a SQL Server database."""
    return _open(mssql_dsn(config))


_OPENERS = {
    "sqlite": init_sqlite,
    "mysql": init_mysql,
    "postgres": init_postgres,
    "mssql": init_mssql,
}

# Drivers that are accepted but do not open a new connection.
_PASSIVE_DRIVERS = frozenset({"oracle", "firebase"})


def connection_database(config: DBConfig) -> Engine | None:
    """Open the database named by the config and make it the current engine.

    For the 'oracle' and 'firebase' drivers no connection is opened and the
    current engine, if any, is returned unchanged.
    """
    global _engine

    opener = _OPENERS.get(config.driver)
    if opener is None:
        if config.driver in _PASSIVE_DRIVERS:
            return _engine
        raise InvalidDriverError()

    _engine = opener(config)
    return _engine


def get_engine() -> Engine | None:
    """Return the engine opened by the last successful connection."""
    return _engine


def get_repository() -> Repository | None:
    """Return the repository created last."""
    return _repository


def repository_instance(engine: Engine | None) -> Repository:
    """Create a repository over the given engine."""
    global _repository

    if engine is None:
        raise ValueError("database is not valid")

    _repository = Repository(db=engine)
    return _repository