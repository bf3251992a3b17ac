import pytest

from taskboard.errors import RateLimited
from taskboard.rate_limiter import RateLimiter, TokenBucket, RATE_LIMITS, MINUTE, HOUR


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def make_limiter():
    clock = FakeClock()
    return RateLimiter(RATE_LIMITS, clock=clock), clock


def test_burst_then_refuse():
    limiter, _ = make_limiter()
    results = [limiter.limit("create_task", 1).ok for _ in range(6)]
    assert results == [True] * 5 + [False]


def test_retry_after_reflects_refill_rate():
    limiter, _ = make_limiter()
    for _ in range(5):
        limiter.limit("create_task", 1)
    status = limiter.limit("create_task", 1)
    assert not status.ok
    # 30 per minute -> one token every two seconds
    assert status.retry_after == pytest.approx(2.0)


def test_refill_over_time():
    limiter, clock = make_limiter()
    for _ in range(5):
        limiter.limit("create_task", 1)
    clock.now += 2.0
    assert limiter.limit("create_task", 1).ok
    assert not limiter.limit("create_task", 1).ok


def test_refill_is_capped_at_capacity():
    limiter, clock = make_limiter()
    limiter.limit("create_label", 1)
    clock.now += HOUR
    results = [limiter.limit("create_label", 1).ok for _ in range(4)]
    assert results == [True, True, True, False]


def test_at_most_capacity_plus_rate_per_minute():
    limiter, clock = make_limiter()
    successes = 0
    attempts = 120
    for _ in range(attempts):
        if limiter.limit("create_task", 1).ok:
            successes += 1
        clock.now += 0.5
    assert successes <= 5 + 30
    assert successes < attempts


def test_buckets_are_per_user_and_per_operation():
    limiter, _ = make_limiter()
    for _ in range(5):
        assert limiter.limit("create_task", 1).ok
    assert not limiter.limit("create_task", 1).ok
    assert limiter.limit("create_task", 2).ok
    assert limiter.limit("delete_task", 1).ok


def test_check_raises_rate_limited():
    limiter = RateLimiter({"op": TokenBucket(rate=1, period=MINUTE, capacity=1)}, clock=lambda: 0.0)
    limiter.check("op", "u")
    with pytest.raises(RateLimited) as excinfo:
        limiter.check("op", "u")
    assert excinfo.value.status_code == 429
    assert excinfo.value.retry_after == pytest.approx(60.0)
    assert excinfo.value.headers["Retry-After"] == "60"


def test_reset_refills_everything():
    limiter, _ = make_limiter()
    for _ in range(5):
        limiter.limit("create_task", 1)
    limiter.reset()
    assert limiter.limit("create_task", 1).ok


def test_configured_buckets():
    assert RATE_LIMITS["create_thread"] == TokenBucket(rate=10, period=HOUR, capacity=2)
    assert RATE_LIMITS["send_message"] == TokenBucket(rate=30, period=HOUR, capacity=5)
    assert RATE_LIMITS["update_task"] == TokenBucket(rate=60, period=MINUTE, capacity=10)
    assert RATE_LIMITS["add_label_to_task"].capacity == 10
