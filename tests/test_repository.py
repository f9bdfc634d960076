"""Tests for the in-memory link repository."""

from datetime import datetime, timedelta, timezone

from shortlinks.db import InMemoryLinkRepository, LinkRecord, LinkRepository, get_repository

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


def make_record(code):
    return LinkRecord(
        code=code,
        original_url=f"https://example.com/{code}",
        created_at=NOW,
        expires_at=NOW + timedelta(minutes=30),
    )


def test_get_missing_returns_none():
    assert InMemoryLinkRepository().get("missing") is None


def test_put_then_get():
    repository = InMemoryLinkRepository()
    record = make_record("abc")

    repository.put(record)

    assert repository.get("abc") is record
    assert "abc" in repository
    assert "ABC" not in repository
    assert len(repository) == 1


def test_iteration_keeps_insertion_order():
    repository = InMemoryLinkRepository()
    for code in ["zeta", "alpha", "mid"]:
        repository.put(make_record(code))

    assert [record.code for record in repository] == ["zeta", "alpha", "mid"]


def test_iterating_while_inserting():
    repository = InMemoryLinkRepository()
    repository.put(make_record("one"))

    for record in repository:
        repository.put(make_record(record.code + "copy"))

    assert len(repository) == 2


def test_factory_returns_fresh_repository():
    first = get_repository()
    second = get_repository()

    assert isinstance(first, LinkRepository)
    assert first is not second
