"""Unit tests for FeedService and feed models."""

import logging

import pytest

from venue_feed.config.models import FeedSettings
from venue_feed.feed import FeedRequest, FeedResult, FeedService
from venue_feed.logging.context import clear_log_context
from tests.helpers import NOW, make_candidate, make_viewer, minutes_ago


@pytest.fixture(autouse=True)
def clean_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def request_factory():
    """Build FeedRequests for venue 'bar-do-ze'."""

    def _build(**overrides):
        data = {
            "venue_id": "bar-do-ze",
            "viewer": make_viewer(bio="musica viagem", partner_preference="female"),
            "candidates": [
                make_candidate(id="c1", bio="musica viagem", checked_in_at=minutes_ago(2)),
                make_candidate(id="c2", bio="cinema", checked_in_at=minutes_ago(30)),
                make_candidate(id="c3", sex="male"),
                make_candidate(id="c4", partner_preference="female", checked_in_at=minutes_ago(90)),
            ],
            "seed": "checkin-1",
            "now": NOW,
        }
        data.update(overrides)
        return FeedRequest(**data)

    return _build


class TestResolveSeed:
    """Seed priority: request > fallback > settings > derived."""

    def test_request_seed_wins(self, request_factory):
        service = FeedService(FeedSettings(default_seed="cfg"), fallback_seed="env")
        assert service.resolve_seed(request_factory(seed="req")) == "req"

    def test_fallback_seed_before_settings(self, request_factory):
        service = FeedService(FeedSettings(default_seed="cfg"), fallback_seed="env")
        assert service.resolve_seed(request_factory(seed=None)) == "env"

    def test_settings_seed(self, request_factory):
        service = FeedService(FeedSettings(default_seed="cfg"))
        assert service.resolve_seed(request_factory(seed=None)) == "cfg"

    def test_derived_seed_is_venue_and_viewer(self, request_factory):
        service = FeedService()
        assert service.resolve_seed(request_factory(seed=None)) == "bar-do-ze:viewer-1"


class TestBuildFeed:
    """Tests for FeedService.build_feed."""

    def test_ranks_eligible_candidates(self, request_factory):
        result = FeedService().build_feed(request_factory())

        assert isinstance(result, FeedResult)
        assert [p.id for p in result.profiles] == ["c1", "c4", "c2"]
        assert result.total_candidates == 4
        assert result.eligible_count == 3
        assert result.blocked_count == 0
        assert result.seed == "checkin-1"
        assert result.generated_at == NOW
        assert result.duration_seconds >= 0

    def test_matches_order_feed(self, request_factory):
        from venue_feed.ranking import order_feed

        request = request_factory()
        result = FeedService().build_feed(request)

        assert result.profiles == order_feed(
            request.viewer, request.candidates, "checkin-1", NOW
        )

    def test_blocked_candidates_hidden(self, request_factory):
        result = FeedService().build_feed(request_factory(blocked_ids=frozenset({"c1"})))

        assert "c1" not in [p.id for p in result.profiles]
        assert result.blocked_count == 1

    def test_blocks_ignored_when_disabled(self, request_factory):
        service = FeedService(FeedSettings(respect_blocks=False))

        result = service.build_feed(request_factory(blocked_ids=frozenset({"c1"})))

        assert "c1" in [p.id for p in result.profiles]
        assert result.blocked_count == 0

    def test_mutual_preference_setting(self, request_factory):
        service = FeedService(FeedSettings(mutual_preference=True))

        result = service.build_feed(request_factory())

        assert [p.id for p in result.profiles] == ["c1", "c2"]

    def test_request_candidates_untouched(self, request_factory):
        request = request_factory(blocked_ids=frozenset({"c2"}))
        before = list(request.candidates)

        FeedService().build_feed(request)

        assert request.candidates == before

    def test_empty_feed(self, request_factory):
        result = FeedService().build_feed(request_factory(candidates=[]))

        assert result.is_empty
        assert result.profiles == []

    def test_deterministic(self, request_factory):
        service = FeedService()
        first = service.build_feed(request_factory())
        second = service.build_feed(request_factory())

        assert first.profiles == second.profiles

    def test_logs_with_context(self, request_factory, caplog):
        caplog.set_level(logging.INFO, logger="venue_feed.feed.service")

        FeedService().build_feed(request_factory())

        built = [r for r in caplog.records if getattr(r, "event", None) == "feed.built"]
        assert len(built) == 1
        assert built[0].eligible_count == 3
        assert built[0].component == "feed"
