"""Running the registered migrations in dependency order."""

from __future__ import annotations

import logging

from libfunctions.database import get_engine
from libfunctions.models import Migration, get_all_migrates

log = logging.getLogger(__name__)


def _process(migration: Migration, method_name: str, done: set[str], executed: list[str]) -> None:
    log.info("method: %s", method_name)

    name = migration.name()
    if name in done:
        return

    for premise in migration.premises():
        _process(premise, method_name, done, executed)

    method = getattr(migration, method_name, None)
    if not callable(method):
        return

    method()
    done.add(name)
    executed.append(name)


def running_migrate(method_name: str) -> list[str]:
    """Call method_name ('apply' or 'revert') on every registered migration.

    Premises run before the migrations that depend on them, and each migration
    name runs at most once. Returns the names run, in order.
    """
    done: set[str] = set()
    executed: list[str] = []

    for migration_type in get_all_migrates():
        log.info("processing migration - %s", migration_type)

        if not (isinstance(migration_type, type) and issubclass(migration_type, Migration)):
            log.info("interface not implemented: %s", migration_type)
            continue

        migration = migration_type()
        migration.db = get_engine()

        log.info("starting migration: %s", migration_type)
        _process(migration, method_name, done, executed)

    return executed