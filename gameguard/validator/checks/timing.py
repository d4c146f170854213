"""Timing plausibility checks."""

from __future__ import annotations

from typing import List, Optional

from gameguard.utils.misc import Clock, format_number, now_ms
from gameguard.validator._logger import logger
from gameguard.validator.constants import (
    DEBUG_VALIDATION,
    MAX_SESSION_AGE_MS,
    MIN_HUMAN_DURATION_MS,
    SESSION_TOLERANCE_MS,
    TIMING_WARNING_CONFIDENCE,
)
from gameguard.validator.registry import DEFAULT_REGISTRY, GameConfigRegistry
from gameguard.validator.schema import GameSubmissionData, ValidationResult


def validate_timing(
    data: GameSubmissionData,
    registry: GameConfigRegistry = DEFAULT_REGISTRY,
    clock: Clock = now_ms,
    now: Optional[int] = None,
) -> ValidationResult:
    """
    Check the reported duration against the game's bounds and session start.

    Args:
        data: Submission to check
        registry: Game configs to resolve ``data.game_slug`` against
        clock: Source of the current time in epoch ms
        now: Pre-read current time; takes precedence over ``clock``

    Returns:
        ValidationResult with confidence 1.0 (clean), 0.75 (warnings) or 0.0
    """
    errors: List[str] = []
    warnings: List[str] = []

    config = registry.get(data.game_slug)
    if config is None:
        return ValidationResult.from_findings(
            [f"Unknown game: {data.game_slug}"], [], TIMING_WARNING_CONFIDENCE
        )

    duration = format_number(data.duration)

    if data.duration < 0:
        errors.append(f"Invalid negative duration: {duration}ms")

    if data.duration < config.min_duration:
        errors.append(
            f"Duration {duration}ms is below minimum {format_number(config.min_duration)}ms"
        )

    if data.duration > config.max_duration:
        errors.append(
            f"Duration {duration}ms exceeds maximum {format_number(config.max_duration)}ms"
        )

    # A zero start time means the client did not report one
    if data.session_start_time:
        current = clock() if now is None else now
        session_age = current - data.session_start_time

        if data.session_start_time > current:
            errors.append("Session start time is in the future")

        if abs(session_age - data.duration) > SESSION_TOLERANCE_MS:
            warnings.append("Session age doesn't match reported duration")

        if session_age > MAX_SESSION_AGE_MS:
            errors.append("Session is too old")

    if data.duration < MIN_HUMAN_DURATION_MS and data.score > 0:
        errors.append(f"Duration {duration}ms is impossibly fast")

    result = ValidationResult.from_findings(errors, warnings, TIMING_WARNING_CONFIDENCE)

    if DEBUG_VALIDATION:
        logger.debug(
            f"Timing check game={data.game_slug} user={data.user_id} duration={duration}ms "
            f"-> confidence={result.confidence}"
        )

    return result
