"""Tests for logging context propagation."""

import threading

import pytest

from jobfit.logging.context import (
    clear_log_context,
    get_log_context,
    log_context,
    new_run_id,
    pop_log_context,
    push_log_context,
)


def test_empty_context():
    """Test that context starts empty."""
    assert get_log_context() == {}


def test_push_and_pop():
    token = push_log_context(run_id="abc123", candidate_id="cand-001")
    assert get_log_context() == {"run_id": "abc123", "candidate_id": "cand-001"}

    pop_log_context(token)
    assert get_log_context() == {}


def test_nested_push_pop():
    """Test layered pushes unwound in reverse order."""
    token1 = push_log_context(run_id="abc123")
    token2 = push_log_context(candidate_id="cand-001")
    assert get_log_context() == {"run_id": "abc123", "candidate_id": "cand-001"}

    pop_log_context(token2)
    assert get_log_context() == {"run_id": "abc123"}

    pop_log_context(token1)
    assert get_log_context() == {}


def test_inner_value_shadows_outer():
    with log_context(candidate_id="cand-001"):
        with log_context(candidate_id="cand-002"):
            assert get_log_context() == {"candidate_id": "cand-002"}
        assert get_log_context() == {"candidate_id": "cand-001"}


def test_context_manager_nested():
    with log_context(run_id="abc123"):
        with log_context(candidate_id="cand-001"):
            assert get_log_context() == {"run_id": "abc123", "candidate_id": "cand-001"}
        assert get_log_context() == {"run_id": "abc123"}

    assert get_log_context() == {}


def test_context_restored_after_exception():
    with pytest.raises(ValueError):
        with log_context(run_id="abc123"):
            raise ValueError("Test exception")

    assert get_log_context() == {}


def test_clear_context():
    push_log_context(run_id="abc123")

    clear_log_context()

    assert get_log_context() == {}


def test_get_returns_copy():
    """Test that mutating the returned dict does not change the context."""
    with log_context(run_id="abc123"):
        context = get_log_context()
        context["candidate_id"] = "modified"

        assert get_log_context() == {"run_id": "abc123"}


def test_threads_do_not_share_context():
    seen = {}

    def worker():
        seen["context"] = get_log_context()

    with log_context(run_id="abc123"):
        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

    assert seen["context"] == {}


def test_new_run_id():
    first = new_run_id()

    assert len(first) == 12
    assert int(first, 16) >= 0
    assert new_run_id() != first
