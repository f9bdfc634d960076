"""Tests for the redirect and statistics services."""

import pytest

from shortlinks.core.exceptions import ShortCodeNotFoundError
from shortlinks.services.redirect_service import RedirectService
from shortlinks.services.stats_service import StatsService


class TestRedirectService:

    def test_redirect_records_click(self, store):
        store.create("https://example.com/page", 30, "go")

        url = RedirectService(store).get_redirect_url("go", referrer="https://ref.example.com")

        assert url == "https://example.com/page"
        clicks = store.get_statistics("go").clicks
        assert [click.referrer for click in clicks] == ["https://ref.example.com"]

    def test_expired_link_is_not_redirected_or_counted(self, store, clock):
        record = store.create("https://example.com", 1, "old")
        clock.advance(minutes=2)

        with pytest.raises(ShortCodeNotFoundError):
            RedirectService(store).get_redirect_url("old")

        assert record.clicks == ()

    def test_unknown_code(self, store):
        with pytest.raises(ShortCodeNotFoundError):
            RedirectService(store).get_redirect_url("missing")


class TestStatsService:

    def test_get_stats(self, store, clock):
        store.create("https://example.com", 30, "stats")
        store.record_click("stats", None)

        stats = StatsService(store).get_stats("stats")

        assert stats == {
            "short_code": "stats",
            "original_url": "https://example.com",
            "created_at": "2026-01-01T12:00:00+00:00",
            "expires_at": "2026-01-01T12:30:00+00:00",
            "click_count": 1,
            "clicks": [
                {
                    "timestamp": "2026-01-01T12:00:00+00:00",
                    "referrer": "Direct",
                    "location": "Unknown",
                }
            ],
        }

    def test_list_stats_flags_expired_links(self, store, clock):
        store.create("https://example.com/short", 1, "brief")
        store.create("https://example.com/long", 120, "lasting")
        clock.advance(minutes=10)

        listing = StatsService(store).list_stats()

        assert [(item["short_code"], item["expired"]) for item in listing] == [
            ("brief", True),
            ("lasting", False),
        ]
