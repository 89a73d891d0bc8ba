import os
from pathlib import Path

import pytest

from libfunctions.env import (
    EnvError,
    EnvNotFoundError,
    get_root_path,
    get_sys_path,
    load_env_mem,
    load_sys_env,
)


def clear_var(monkeypatch, name):
    monkeypatch.setenv(name, "x")
    monkeypatch.delenv(name)


def test_load_env_mem_success(tmp_path, monkeypatch):
    clear_var(monkeypatch, "LIBF_TEST_LOCAL")
    (tmp_path / ".env").write_text("LIBF_TEST_LOCAL=local\n")
    monkeypatch.chdir(tmp_path)
    assert load_env_mem() is None
    assert os.environ["LIBF_TEST_LOCAL"] == "local"


def test_load_env_mem_keeps_existing_values(tmp_path, monkeypatch):
    monkeypatch.setenv("LIBF_TEST_KEEP", "original")
    (tmp_path / ".env").write_text("LIBF_TEST_KEEP=changed\n")
    monkeypatch.chdir(tmp_path)
    result = load_env_mem()
    assert result is None
    assert os.environ["LIBF_TEST_KEEP"] == "original"


def test_load_env_mem_from_parent(tmp_path, monkeypatch):
    clear_var(monkeypatch, "LIBF_TEST_PARENT")
    (tmp_path / ".env").write_text("LIBF_TEST_PARENT=parent\n")
    child = tmp_path / "child"
    child.mkdir()
    monkeypatch.chdir(child)
    result = load_env_mem()
    assert result is None
    assert os.environ["LIBF_TEST_PARENT"] == "parent"


def test_load_env_mem_from_project_root(tmp_path, monkeypatch):
    clear_var(monkeypatch, "LIBF_TEST_ROOT")
    (tmp_path / "pyproject.toml").write_text("")
    (tmp_path / ".env").write_text("LIBF_TEST_ROOT=root\n")
    deep = tmp_path / "a" / "b" / "c"
    deep.mkdir(parents=True)
    monkeypatch.chdir(deep)
    result = load_env_mem()
    assert result is None
    assert os.environ["LIBF_TEST_ROOT"] == "root"


def test_load_env_mem_not_found(tmp_path, monkeypatch):
    deep = tmp_path / "x" / "y"
    deep.mkdir(parents=True)
    monkeypatch.chdir(deep)
    with pytest.raises(EnvNotFoundError):
        load_env_mem()


def test_load_sys_env_from_parent(tmp_path, monkeypatch):
    clear_var(monkeypatch, "LIBF_TEST_SYS")
    (tmp_path / ".env").write_text("LIBF_TEST_SYS=sys\n")
    child = tmp_path / "child"
    child.mkdir()
    monkeypatch.chdir(child)
    result = load_sys_env()
    assert result is None
    assert os.environ["LIBF_TEST_SYS"] == "sys"


def test_load_sys_env_not_found_is_env_error(tmp_path, monkeypatch):
    deep = tmp_path / "p" / "q"
    deep.mkdir(parents=True)
    monkeypatch.chdir(deep)
    with pytest.raises(EnvError):
        load_sys_env()


def test_get_root_path_is_parent_of_cwd(tmp_path, monkeypatch):
    child = tmp_path / "child"
    child.mkdir()
    monkeypatch.chdir(child)
    root = get_root_path()
    assert Path(root).resolve() == tmp_path.resolve()
    assert os.path.isabs(root)


def test_get_sys_path_finds_marker(tmp_path):
    (tmp_path / "pyproject.toml").write_text("")
    deep = tmp_path / "one" / "two"
    deep.mkdir(parents=True)
    assert get_sys_path(str(deep)) == os.path.join(str(tmp_path), ".env")


def test_get_sys_path_marker_in_start_dir(tmp_path):
    (tmp_path / "pyproject.toml").write_text("")
    assert get_sys_path(str(tmp_path)) == os.path.join(str(tmp_path), ".env")


def test_get_sys_path_without_marker(tmp_path):
    deep = tmp_path / "none" / "here"
    deep.mkdir(parents=True)
    assert get_sys_path(str(deep)) == ""