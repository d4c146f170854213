"""Submission rate and cooldown checks."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np

from gameguard.utils.misc import Clock, now_ms
from gameguard.validator._logger import logger
from gameguard.validator.constants import (
    DEBUG_VALIDATION,
    HOUR_MS,
    MINUTE_MS,
    RATE_WARNING_CONFIDENCE,
)
from gameguard.validator.schema import (
    GameSubmissionData,
    RateLimitConfig,
    RemainingQuota,
    SubmissionRecord,
    ValidationResult,
)

DEFAULT_RATE_LIMITS = RateLimitConfig()


def _window_counts(
    history: Sequence[SubmissionRecord], now: int
) -> Tuple[int, int, Optional[int]]:
    """
    Count submissions inside the trailing minute and hour.

    History is treated as unordered and is not modified.

    Returns:
        (last_minute, last_hour, latest_timestamp); latest is None when empty
    """
    if not history:
        return 0, 0, None

    timestamps = np.fromiter((record.timestamp for record in history), dtype=np.int64, count=len(history))
    last_minute = int(np.count_nonzero(timestamps > now - MINUTE_MS))
    last_hour = int(np.count_nonzero(timestamps > now - HOUR_MS))
    return last_minute, last_hour, int(timestamps.max())


def validate_rate(
    data: GameSubmissionData,
    config: Optional[RateLimitConfig] = None,
    clock: Clock = now_ms,
    now: Optional[int] = None,
) -> ValidationResult:
    """
    Check submission frequency against sliding windows and the cooldown.

    Without any history there is nothing to compare against: the result is
    valid, carries a warning and leaves confidence unset.

    Args:
        data: Submission carrying the user's recent ``submission_history``
        config: Rate policy, defaults to DEFAULT_RATE_LIMITS
        clock: Source of the current time in epoch ms
        now: Pre-read current time; takes precedence over ``clock``

    Returns:
        ValidationResult with confidence 1.0 (clean), 0.8 (warnings) or 0.0
    """
    if not data.submission_history:
        return ValidationResult(valid=True, errors=[], warnings=["No submission history available"])

    config = config or DEFAULT_RATE_LIMITS
    current = clock() if now is None else now
    errors: List[str] = []
    warnings: List[str] = []

    last_minute, last_hour, latest = _window_counts(data.submission_history, current)

    if last_minute >= config.max_per_minute:
        errors.append(f"Too many submissions in last minute: {last_minute}")

    if last_hour >= config.max_per_hour:
        errors.append(f"Too many submissions in last hour: {last_hour}")

    if latest is not None and current - latest < config.cooldown_ms:
        errors.append("Cooldown period not met")

    result = ValidationResult.from_findings(errors, warnings, RATE_WARNING_CONFIDENCE)

    if DEBUG_VALIDATION:
        logger.debug(
            f"Rate check user={data.user_id} minute={last_minute}/{config.max_per_minute} "
            f"hour={last_hour}/{config.max_per_hour} -> confidence={result.confidence}"
        )

    return result


def get_remaining_quota(
    submission_history: Sequence[SubmissionRecord],
    config: Optional[RateLimitConfig] = None,
    clock: Clock = now_ms,
) -> RemainingQuota:
    """
    Project the remaining submission allowance from a user's history.

    Args:
        submission_history: Recent submissions, any order
        config: Rate policy, defaults to DEFAULT_RATE_LIMITS
        clock: Source of the current time in epoch ms

    Returns:
        RemainingQuota for the per-minute and per-hour windows and cooldown
    """
    config = config or DEFAULT_RATE_LIMITS
    current = clock()

    last_minute, last_hour, latest = _window_counts(submission_history or [], current)

    cooldown_remaining = 0
    if latest is not None:
        cooldown_remaining = max(0, config.cooldown_ms - (current - latest))

    return RemainingQuota(
        remaining_per_minute=max(0, config.max_per_minute - last_minute),
        remaining_per_hour=max(0, config.max_per_hour - last_hour),
        cooldown_remaining_ms=int(cooldown_remaining),
    )
