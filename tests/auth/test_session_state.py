from __future__ import annotations

from datetime import timedelta

from waduk_app.auth.session import SessionState


def test_start_stores_user_and_refresh_time():
    store = {"flash": "old"}
    state = SessionState(store)

    state.start(5, timedelta(minutes=10), now=1_000)

    assert store == {"user_id": 5, "user_refresh_time": 1_600}
    assert state.user_id == 5
    assert state.user_refresh_time == 1_600.0


def test_empty_session_is_expired():
    assert SessionState({}).is_expired(now=0) is True
    assert SessionState({"user_refresh_time": ""}).is_expired(now=0) is True


def test_refresh_time_in_past_is_expired():
    state = SessionState({"user_id": 1, "user_refresh_time": 999})

    assert state.is_expired(now=1_000) is True


def test_refresh_time_equal_to_now_is_still_valid():
    state = SessionState({"user_id": 1, "user_refresh_time": 1_000})

    assert state.is_expired(now=1_000) is False


def test_destroy_clears_everything():
    store = {"user_id": 1, "user_refresh_time": 2_000, "other": "x"}

    SessionState(store).destroy()

    assert store == {}
