"""Locating and loading the application's '.env' file."""

from __future__ import annotations

import os

from dotenv import load_dotenv

TOP_PATH = ".."
ENV_FILE = ".env"
ROOT_MARKER = "pyproject.toml"


class EnvError(Exception):
    """Base class for environment loading errors."""


class EnvNotFoundError(EnvError):
    """No '.env' file could be found."""

    def __init__(self, message: str = "no .env file found") -> None:
        super().__init__(message)


class EnvPathLoadError(EnvError):
    """The application's directory could not be determined."""

    def __init__(self, message: str = "could not determine the application directory") -> None:
        super().__init__(message)


class EnvRootPathError(EnvError):
    """The main directory could not be determined."""

    def __init__(self, message: str = "could not determine the main directory") -> None:
        super().__init__(message)


def _load(path: str) -> None:
    """Load variables from a '.env' file; existing variables are kept."""
    if not path or not os.path.isfile(path):
        raise FileNotFoundError(path)
    load_dotenv(path, override=False)


def load_env_mem() -> None:
    """Load the '.env' file from the current directory or a directory above it."""
    if not os.path.exists(ENV_FILE):
        try:
            _load(os.path.join(TOP_PATH, ENV_FILE))
        except OSError:
            load_sys_env()
        return

    try:
        _load(ENV_FILE)
    except OSError:
        raise EnvNotFoundError() from None


def load_sys_env() -> None:
    """Load '.env' from the parent of the working directory or the project root."""
    root_path = get_root_path()

    try:
        _load(os.path.join(root_path, ENV_FILE))
    except OSError:
        try:
            _load(get_sys_path(root_path))
        except OSError:
            raise EnvNotFoundError() from None


def get_root_path() -> str:
    """Return the absolute parent of the current working directory."""
    try:
        cwd = os.getcwd()
    except OSError:
        raise EnvPathLoadError() from None

    try:
        return os.path.abspath(os.path.dirname(cwd))
    except (OSError, ValueError):
        raise EnvRootPathError() from None


def get_sys_path(path: str) -> str:
    """Walk up from path to the project root and return its '.env' path.

    The project root is the first directory holding the root marker file.
    An empty string is returned when no such directory exists.
    """
    current = path
    while True:
        if os.path.exists(os.path.join(current, ROOT_MARKER)):
            return os.path.join(current, ENV_FILE)
        parent = os.path.dirname(current)
        if parent == current:
            return ""
        current = parent