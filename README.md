# libfunctions

Small helpers for applications that use a relational database through
SQLAlchemy and need to check Brazilian CPF and CNPJ numbers.

## Installation

```
pip install .
```

## Modules

### `libfunctions.config`

- `DBConfig`: a dataclass with `db_type`, `driver`, `username`, `password`,
  `host`, `port`, `db_name`, `db_api_key` and `ssl_mode`.
- `init_database_vars(environ=None)`: reads `DB_HOST`, `DB_PORT`,
  `DB_USERNAME`, `DB_PASSWORD`, `DB_DRIVER`, `DB_NAME`, `DB_SSLMODE` and
  `DB_API_KEY` from `environ` (or `os.environ`), validates them and returns a
  `DBConfig`. `db_type` is left empty.
- `required_vars_for_db_type(db_type)`: the variables a driver needs.
  `postgres`, `mysql`, `mssql` and `oracle` need host, port, username,
  password and name; `sqlite` needs `DB_NAME`; `firebase` needs `DB_API_KEY`.

Errors are subclasses of `ConfigError` (itself a `ValueError`):
`InvalidDBTypeError` for an unknown driver, `EnvParNotFoundError` for a
missing required variable, and `EnvParPortNotIntError` when `DB_PORT` is not
an integer. The port is checked for every driver, including `sqlite` and
`firebase`.

### `libfunctions.env`

- `load_env_mem()`: loads `.env` from the working directory; if there is
  none, from the parent directory; failing that, calls `load_sys_env()`.
- `load_sys_env()`: loads `.env` from the parent of the working directory,
  or else from the first directory upwards that holds a `pyproject.toml`.
- `get_root_path()`: the absolute parent of the working directory.
- `get_sys_path(path)`: walks up from `path` to the first directory holding
  `pyproject.toml` and returns the path of its `.env`, or `""`.

Variables already set in the environment are not overwritten. Errors are
subclasses of `EnvError`: `EnvNotFoundError`, `EnvPathLoadError`,
`EnvRootPathError`.

### `libfunctions.database`

- `sqlite_dsn`, `mysql_dsn`, `postgres_dsn`, `mssql_dsn`: build a SQLAlchemy
  `URL` from a `DBConfig` (MySQL adds `charset=utf8mb4`; PostgreSQL adds
  `sslmode` when set).
- `init_sqlite`, `init_mysql`, `init_postgres`, `init_mssql`: create an
  engine and check that it can connect.
- `connection_database(config)`: opens the engine for `config.driver`
  (`sqlite`, `mysql`, `postgres`, `mssql`) and keeps it as the current one,
  returned by `get_engine()`. Any other driver raises `InvalidDriverError`.
- `repository_instance(engine)`: wraps an engine in a `Repository`
  (`.db`), keeps it for `get_repository()`, and raises `ValueError` for
  `None`.

Only SQLite works without extra installs; the MySQL, PostgreSQL and SQL
Server URLs use SQLAlchemy's default DBAPI driver for each dialect, which
must be installed separately.

### `libfunctions.models`

- `Migration`: abstract base with `apply()`, `revert()`, `name()` and
  `premises()` (default: none); the constructor takes an optional `db`.
- `add_migrate(migration_type)` / `get_all_migrates()`: a registry of
  migration classes, in registration order.
- `Pagination`: a dataclass with `limit`, `page`, `sort`, `order`,
  `total_rows`, `total_pages`.
  - `effective_page()`: a page of 0 becomes 1.
  - `effective_limit()`: a limit of 0 takes `ITEMS_PER_PAGE`; a limit still
    0, or above the maximum of 999, becomes 50.
  - `offset()`: `(page - 1) * limit`.
  - `sort_clause()`: `"<sort> <order>"`, defaulting to `id desc`.

  Each of these stores the value it resolves on the object.

### `libfunctions.migrate`

- `running_migrate(method_name)`: instantiates every registered `Migration`
  subclass, sets its `db` to the current engine, and calls `method_name`
  (for example `"apply"` or `"revert"`) after first processing its premises.
  Each migration name runs at most once. Returns the names run, in order.

### `libfunctions.pagination`

- `paginate(model, page, session)`: counts the rows of `model`, fills in
  `page.total_rows` and `page.total_pages`, and returns a function that
  applies the page's offset, limit and ordering to a `select()` statement.

### `libfunctions.text`

- `remove_special_chars(text)`: removes `/ \ < > : " | ? *`.
- `valid_cnpj_cpf(document)`: validates an 11-digit CPF or a 14-digit CNPJ,
  ignoring punctuation. A 14-character alphanumeric CNPJ is accepted without
  checking its digits.

## Example

```python
from sqlalchemy.orm import Session

from libfunctions.env import load_env_mem
from libfunctions.config import init_database_vars
from libfunctions.database import connection_database
from libfunctions.text import valid_cnpj_cpf

load_env_mem()
config = init_database_vars()
engine = connection_database(config)

valid_cnpj_cpf("332.945.830-52")      # True
valid_cnpj_cpf("61.695.227/0001-93")  # True
valid_cnpj_cpf("33294583000")         # False
```

## What it does not do

- `oracle` and `firebase` pass configuration checks, but
  `connection_database` opens no connection for them and returns the current
  engine unchanged.
- There is no command-line tool; everything is used as a library.
- No migrations are shipped; the package only registers and runs the ones
  you define.

## Running the tests

```
pip install .[test]
pytest
```