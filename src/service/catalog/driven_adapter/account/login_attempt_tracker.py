import time
from typing import Callable, Dict

import attrs


@attrs.define
class _Attempts:
    first_failure_at: float
    failures: int = 0
    locked_until: float = 0.0


class LoginAttemptTracker:
    """
    Counts failed logins per email in this process.

    Failures are counted in a window of `lockout_seconds` opened by the first
    failure. Reaching `max_attempts` inside the window locks the email for
    `lockout_seconds`; a successful login clears the counter. Entries whose
    window and lock are both over are dropped.
    """

    def __init__(
        self,
        *,
        max_attempts: int,
        lockout_seconds: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_attempts = max_attempts
        self.lockout_seconds = lockout_seconds
        self._clock = clock
        self._attempts: Dict[str, _Attempts] = {}

    def __len__(self) -> int:
        return len(self._attempts)

    def _is_stale(self, attempts: _Attempts, now: float) -> bool:
        if attempts.locked_until:
            return now >= attempts.locked_until
        return now - attempts.first_failure_at >= self.lockout_seconds

    def _evict_stale(self, now: float) -> None:
        stale = [email for email, a in self._attempts.items() if self._is_stale(a, now)]
        for email in stale:
            del self._attempts[email]

    def is_locked(self, email: str) -> bool:
        attempts = self._attempts.get(email)
        if attempts is None:
            return False
        if self._is_stale(attempts, self._clock()):
            del self._attempts[email]
            return False
        return bool(attempts.locked_until)

    def record_failure(self, email: str) -> None:
        now = self._clock()
        self._evict_stale(now)

        attempts = self._attempts.setdefault(email, _Attempts(first_failure_at=now))
        attempts.failures += 1
        if attempts.failures >= self.max_attempts:
            attempts.locked_until = now + self.lockout_seconds

    def record_success(self, email: str) -> None:
        self._attempts.pop(email, None)
