import pytest

from gameguard.validator import RateLimitConfig, get_remaining_quota, validate_rate

from conftest import NOW, records_at


def test_no_history_warns_without_confidence(make_submission, clock):
    result = validate_rate(make_submission(), clock=clock)
    assert result.valid
    assert result.errors == []
    assert result.warnings == ["No submission history available"]
    assert result.confidence is None


def test_clean_history(make_submission, clock):
    history = records_at(15000, 30000, 45000, 120000)
    result = validate_rate(make_submission(submission_history=history), clock=clock)
    assert result.valid
    assert result.warnings is None
    assert result.confidence == 1.0


def test_too_many_in_last_minute(make_submission, clock):
    history = records_at(15000, 20000, 25000, 30000, 35000, 40000)
    result = validate_rate(make_submission(submission_history=history), clock=clock)
    assert not result.valid
    assert result.errors == ["Too many submissions in last minute: 6"]
    assert result.confidence == 0.0


def test_five_in_last_minute_is_allowed(make_submission, clock):
    history = records_at(15000, 20000, 25000, 30000, 35000)
    assert validate_rate(make_submission(submission_history=history), clock=clock).valid


def test_minute_window_excludes_its_boundary(make_submission, clock):
    history = records_at(15000, 20000, 25000, 30000, 35000, 60000)
    assert validate_rate(make_submission(submission_history=history), clock=clock).valid


def test_too_many_in_last_hour(make_submission, clock):
    history = records_at(*(61000 + i * 1000 for i in range(100)))
    result = validate_rate(make_submission(submission_history=history), clock=clock)
    assert result.errors == ["Too many submissions in last hour: 100"]


def test_hour_window_excludes_its_boundary(make_submission, clock):
    config = RateLimitConfig(max_per_minute=6, max_per_hour=1, cooldown_ms=0)
    outside = validate_rate(make_submission(submission_history=records_at(3600000)), config, clock=clock)
    inside = validate_rate(make_submission(submission_history=records_at(3599999)), config, clock=clock)

    assert outside.valid
    assert inside.errors == ["Too many submissions in last hour: 1"]


def test_cooldown_not_met(make_submission, clock):
    result = validate_rate(make_submission(submission_history=records_at(5000)), clock=clock)
    assert result.errors == ["Cooldown period not met"]


def test_cooldown_boundary_is_met(make_submission, clock):
    result = validate_rate(make_submission(submission_history=records_at(10000)), clock=clock)
    assert result.valid


def test_unsorted_history_uses_latest_entry(make_submission, clock):
    history = records_at(300000, 2000, 900000)
    submission = make_submission(submission_history=history)
    result = validate_rate(submission, clock=clock)

    assert result.errors == ["Cooldown period not met"]
    assert [record.timestamp for record in submission.submission_history] == [
        NOW - 300000, NOW - 2000, NOW - 900000,
    ]


def test_history_from_any_game_counts(make_submission, clock):
    history = records_at(3000, game_slug='memory-match')
    result = validate_rate(make_submission(submission_history=history), clock=clock)
    assert result.errors == ["Cooldown period not met"]


def test_custom_rate_limits(make_submission, clock):
    config = RateLimitConfig(max_per_minute=2, max_per_hour=3, cooldown_ms=0)
    history = records_at(1000, 2000, 120000)
    result = validate_rate(make_submission(submission_history=history), config, clock=clock)
    assert result.errors == [
        "Too many submissions in last minute: 2",
        "Too many submissions in last hour: 3",
    ]


def test_default_rate_limits():
    config = RateLimitConfig()
    assert config.max_per_minute == 6
    assert config.max_per_hour == 100
    assert config.cooldown_ms == 10000


@pytest.mark.parametrize("overrides", [
    {'max_per_minute': 0},
    {'max_per_hour': 0},
    {'cooldown_ms': -1},
])
def test_rate_limit_config_rejects_bad_values(overrides):
    with pytest.raises(ValueError):
        RateLimitConfig(**overrides)


def test_quota_without_history(clock):
    quota = get_remaining_quota([], clock=clock)
    assert quota.remaining_per_minute == 6
    assert quota.remaining_per_hour == 100
    assert quota.cooldown_remaining_ms == 0
    assert quota.can_submit
    assert quota.retry_after_seconds == 0


def test_quota_with_recent_history(clock):
    quota = get_remaining_quota(records_at(4000, 30000, 600000), clock=clock)
    assert quota.remaining_per_minute == 4
    assert quota.remaining_per_hour == 97
    assert quota.cooldown_remaining_ms == 6000
    assert not quota.can_submit
    assert quota.retry_after_seconds == 6


def test_quota_never_negative(clock):
    history = records_at(*(11000 + i * 1000 for i in range(8)))
    quota = get_remaining_quota(history, clock=clock)
    assert quota.remaining_per_minute == 0
    assert quota.remaining_per_hour == 92
    assert quota.cooldown_remaining_ms == 0
    assert not quota.can_submit


def test_quota_matches_rate_check(make_submission, clock):
    history = records_at(15000, 20000, 25000, 30000, 35000, 40000)
    quota = get_remaining_quota(history, clock=clock)
    result = validate_rate(make_submission(submission_history=history), clock=clock)
    assert quota.remaining_per_minute == 0
    assert not result.valid
