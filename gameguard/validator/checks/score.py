"""Score bound and progression checks."""

from __future__ import annotations

from typing import List

from gameguard.utils.misc import format_number
from gameguard.validator._logger import logger
from gameguard.validator.constants import (
    DEBUG_VALIDATION,
    HIGH_STREAK_RATIO,
    LARGE_JUMP_RATIO,
    LOW_SCORE_RATIO,
    MINUTE_MS,
    SCORE_RATE_TOLERANCE,
    SCORE_WARNING_CONFIDENCE,
    ZERO_START_MAX_RATIO,
)
from gameguard.validator.registry import DEFAULT_REGISTRY, GameConfigRegistry
from gameguard.validator.schema import GameSubmissionData, ValidationResult


def score_per_minute(score: float, duration_ms: float) -> float:
    """
    Points earned per minute of play.

    A positive score over zero duration is an infinite rate; a zero score
    over zero duration is treated as no rate at all.
    """
    if duration_ms == 0:
        return float("inf") if score > 0 else 0.0
    return score / (duration_ms / MINUTE_MS)


def validate_score(
    data: GameSubmissionData,
    registry: GameConfigRegistry = DEFAULT_REGISTRY,
) -> ValidationResult:
    """
    Check score, streak and progression against the game's bounds.

    Args:
        data: Submission to check
        registry: Game configs to resolve ``data.game_slug`` against

    Returns:
        ValidationResult with confidence 1.0 (clean), 0.7 (warnings) or 0.0
    """
    errors: List[str] = []
    warnings: List[str] = []

    config = registry.get(data.game_slug)
    if config is None:
        return ValidationResult.from_findings(
            [f"Unknown game: {data.game_slug}"], [], SCORE_WARNING_CONFIDENCE
        )

    score = format_number(data.score)

    if data.score < config.min_score:
        errors.append(f"Score {score} is below minimum {format_number(config.min_score)}")

    if data.score > config.max_score:
        errors.append(f"Score {score} exceeds maximum {format_number(config.max_score)}")

    if data.streak is not None:
        if data.streak < 0:
            errors.append(f"Invalid negative streak: {data.streak}")

        if data.streak > config.max_streak_value:
            errors.append(f"Streak {data.streak} exceeds maximum {config.max_streak_value}")

        if (
            data.streak > config.max_streak_value * HIGH_STREAK_RATIO
            and data.score < config.max_score * LOW_SCORE_RATIO
        ):
            warnings.append(f"High streak ({data.streak}) with low score ({score}) is unusual")

    if data.previous_score is not None:
        if data.score - data.previous_score > config.max_score * LARGE_JUMP_RATIO:
            warnings.append(f"Large score jump: {format_number(data.previous_score)} -> {score}")

        # Fresh players jumping straight to near-max are rejected outright
        if data.previous_score == 0 and data.score > config.max_score * ZERO_START_MAX_RATIO:
            errors.append(f"Suspicious score progression: 0 to {score}")

    rate = score_per_minute(data.score, data.duration)
    if rate > config.max_score_per_minute * SCORE_RATE_TOLERANCE:
        errors.append(f"Score rate {rate:.0f} points/min exceeds maximum")

    result = ValidationResult.from_findings(errors, warnings, SCORE_WARNING_CONFIDENCE)

    if DEBUG_VALIDATION:
        logger.debug(
            f"Score check game={data.game_slug} user={data.user_id} score={score} "
            f"rate={rate:.1f}/min -> confidence={result.confidence}"
        )

    return result
