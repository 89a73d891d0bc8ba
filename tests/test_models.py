import pytest

from libfunctions import models
from libfunctions.models import Migration, Pagination


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("ITEMS_PER_PAGE", raising=False)
    monkeypatch.delenv("ITEMS_MAX_PAGE", raising=False)


class _Noop(Migration):
    def apply(self):
        self.db = "applied"

    def revert(self):
        self.db = "reverted"

    def name(self):
        return "models-noop"


def test_migration_cannot_be_instantiated_without_methods():
    with pytest.raises(TypeError):
        Migration()


def test_migration_default_premises_empty():
    assert Migration.premises(_Noop()) == []


def test_migration_stores_db():
    marker = object()
    models.add_migrate(_Noop)
    registered = models.get_all_migrates()[-1]
    assert registered(db=marker).db is marker


def test_add_migrate_registers_in_order():
    before = models.get_all_migrates()
    models.add_migrate(_Noop)
    after = models.get_all_migrates()
    assert after[:-1] == before
    assert after[-1] is _Noop


def test_get_all_migrates_returns_copy():
    listing = models.get_all_migrates()
    listing.append(int)
    assert int not in models.get_all_migrates()


def test_page_defaults_to_one():
    p = Pagination()
    assert p.effective_page() == 1
    assert p.page == 1


def test_page_kept_when_set():
    assert Pagination(page=4).effective_page() == 4


def test_sort_defaults():
    p = Pagination()
    assert p.sort_clause() == "id desc"
    assert (p.sort, p.order) == ("id", "desc")


def test_sort_custom():
    assert Pagination(sort="name", order="asc").sort_clause() == "name asc"


def test_limit_default_without_env():
    p = Pagination()
    assert p.effective_limit() == models.DEFAULT_LIMIT
    assert p.limit == models.DEFAULT_LIMIT


def test_limit_from_env(monkeypatch):
    monkeypatch.setenv("ITEMS_PER_PAGE", "20")
    assert Pagination().effective_limit() == 20


def test_env_does_not_override_explicit_limit(monkeypatch):
    monkeypatch.setenv("ITEMS_PER_PAGE", "20")
    assert Pagination(limit=7).effective_limit() == 7


def test_limit_above_max_falls_back():
    p = Pagination(limit=models.DEFAULT_MAX_LIMIT + 1)
    assert p.effective_limit() == models.DEFAULT_LIMIT


def test_limit_at_max_kept():
    p = Pagination(limit=models.DEFAULT_MAX_LIMIT)
    assert p.effective_limit() == models.DEFAULT_MAX_LIMIT


def test_max_page_env_is_ignored_when_valid(monkeypatch):
    monkeypatch.setenv("ITEMS_MAX_PAGE", "10")
    assert Pagination(limit=500).effective_limit() == 500


def test_offset():
    p = Pagination(limit=10, page=3)
    assert p.offset() == 20


def test_offset_first_page_is_zero():
    assert Pagination(limit=10).offset() == 0