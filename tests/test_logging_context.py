"""Tests for logging context propagation."""

import threading

import pytest

from venue_feed.logging.context import (
    clear_log_context,
    get_log_context,
    log_context,
    pop_log_context,
    push_log_context,
)


@pytest.fixture(autouse=True)
def clean_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


def test_empty_context():
    assert get_log_context() == {}


def test_push_and_pop():
    token = push_log_context(venue_id="bar-do-ze", viewer_id="viewer-1")
    assert get_log_context() == {"venue_id": "bar-do-ze", "viewer_id": "viewer-1"}

    pop_log_context(token)
    assert get_log_context() == {}


def test_nested_context():
    """Nested pushes merge and pops restore the outer layer."""
    outer = push_log_context(venue_id="bar-do-ze")
    inner = push_log_context(viewer_id="viewer-1")
    assert get_log_context() == {"venue_id": "bar-do-ze", "viewer_id": "viewer-1"}

    pop_log_context(inner)
    assert get_log_context() == {"venue_id": "bar-do-ze"}

    pop_log_context(outer)
    assert get_log_context() == {}


def test_inner_value_overrides_outer():
    with log_context(seed="outer"):
        with log_context(seed="inner"):
            assert get_log_context()["seed"] == "inner"
        assert get_log_context()["seed"] == "outer"


def test_get_returns_copy():
    with log_context(venue_id="bar-do-ze"):
        get_log_context()["venue_id"] = "changed"
        assert get_log_context()["venue_id"] == "bar-do-ze"


def test_context_manager_restores_on_exception():
    with pytest.raises(RuntimeError):
        with log_context(venue_id="bar-do-ze"):
            raise RuntimeError("boom")

    assert get_log_context() == {}


def test_context_manager_returns_self():
    with log_context(venue_id="v") as ctx:
        assert ctx.kwargs == {"venue_id": "v"}
    assert ctx.token is None


def test_clear_context():
    push_log_context(venue_id="bar-do-ze")
    clear_log_context()
    assert get_log_context() == {}


def test_threads_do_not_share_context():
    seen = {}

    def worker():
        with log_context(viewer_id="other"):
            seen["worker_inner"] = get_log_context()

    with log_context(viewer_id="main"):
        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()
        assert get_log_context() == {"viewer_id": "main"}

    assert seen["worker_inner"] == {"viewer_id": "other"}
