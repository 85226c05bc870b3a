from __future__ import annotations

TEST_SECRET = "test-signing-secret-0123456789abcdef"
FIXED_NOW = 1_700_000_000


class FrozenClock:
    def __init__(self, now: float = FIXED_NOW) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds
