import pytest

from src.service.catalog.driven_adapter.account.login_attempt_tracker import LoginAttemptTracker


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.mark.unit
class TestLoginAttemptTracker:
    @pytest.fixture
    def clock(self) -> FakeClock:
        return FakeClock()

    @pytest.fixture
    def tracker(self, clock: FakeClock) -> LoginAttemptTracker:
        return LoginAttemptTracker(max_attempts=3, lockout_seconds=60, clock=clock)

    def test_locks_after_max_failures(self, tracker: LoginAttemptTracker):
        for _ in range(2):
            tracker.record_failure('ana@catalogo.com.br')
        assert tracker.is_locked('ana@catalogo.com.br') is False

        tracker.record_failure('ana@catalogo.com.br')

        assert tracker.is_locked('ana@catalogo.com.br') is True
        assert tracker.is_locked('bruno@catalogo.com.br') is False

    def test_lock_expires(self, tracker: LoginAttemptTracker, clock: FakeClock):
        for _ in range(3):
            tracker.record_failure('ana@catalogo.com.br')

        clock.now += 61

        assert tracker.is_locked('ana@catalogo.com.br') is False

    def test_success_clears_failures(self, tracker: LoginAttemptTracker):
        tracker.record_failure('ana@catalogo.com.br')
        tracker.record_failure('ana@catalogo.com.br')
        tracker.record_success('ana@catalogo.com.br')
        tracker.record_failure('ana@catalogo.com.br')

        assert tracker.is_locked('ana@catalogo.com.br') is False

    def test_failures_outside_window_do_not_add_up(
        self, tracker: LoginAttemptTracker, clock: FakeClock
    ):
        # Given: failures spread further apart than the window
        for _ in range(5):
            tracker.record_failure('ana@catalogo.com.br')
            clock.now += 60

        # Then
        assert tracker.is_locked('ana@catalogo.com.br') is False

    def test_failures_inside_window_still_lock(
        self, tracker: LoginAttemptTracker, clock: FakeClock
    ):
        for _ in range(3):
            tracker.record_failure('ana@catalogo.com.br')
            clock.now += 10

        assert tracker.is_locked('ana@catalogo.com.br') is True

    def test_stale_entries_are_evicted(self, tracker: LoginAttemptTracker, clock: FakeClock):
        # Given: many emails failing once
        for i in range(1000):
            tracker.record_failure(f'user{i}@catalogo.com.br')
        assert len(tracker) == 1000

        # When: the window passes and another failure comes in
        clock.now += 61
        tracker.record_failure('ana@catalogo.com.br')

        # Then: only the fresh entry is kept
        assert len(tracker) == 1

    def test_expired_lock_is_evicted(self, tracker: LoginAttemptTracker, clock: FakeClock):
        for _ in range(3):
            tracker.record_failure('ana@catalogo.com.br')

        clock.now += 61

        assert tracker.is_locked('ana@catalogo.com.br') is False
        assert len(tracker) == 0
