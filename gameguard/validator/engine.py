"""
GameGuard - Submission Validation Engine

Runs the score, timing and rate checks on a submission and merges their
verdicts. Errors and warnings are concatenated in score, timing, rate order;
confidence is the minimum any check reports, so one suspicious signal is
never outweighed by clean ones.
"""

from typing import Any, Dict, List, Optional, Sequence

from gameguard.utils.misc import Clock, now_ms
from ._logger import logger
from .checks import get_remaining_quota, validate_rate, validate_score, validate_timing
from .constants import (
    CLEAN_CONFIDENCE,
    DEBUG_VALIDATION,
    DECISION_ACCEPTED,
    DECISION_REJECTED,
    DECISION_REVIEW,
    MISSING_CONFIDENCE,
    REJECT_CONFIDENCE_THRESHOLD,
)
from .registry import DEFAULT_REGISTRY, GameConfigRegistry
from .schema import (
    GameConfig,
    GameSubmissionData,
    RateLimitConfig,
    RemainingQuota,
    SubmissionRecord,
    ValidationResult,
)


def merge_results(results: Sequence[ValidationResult]) -> ValidationResult:
    """
    Combine check results into a single verdict

    Args:
        results: Check results in reporting order

    Returns:
        Merged result; a check without a confidence counts as 1.0
    """
    errors: List[str] = []
    warnings: List[str] = []
    confidence = CLEAN_CONFIDENCE

    for result in results:
        errors.extend(result.errors)
        if result.warnings:
            warnings.extend(result.warnings)
        reported = MISSING_CONFIDENCE if result.confidence is None else result.confidence
        confidence = min(confidence, reported)

    return ValidationResult(
        valid=not errors,
        errors=errors,
        warnings=warnings or None,
        confidence=confidence,
    )


def validate_game_submission(
    data: GameSubmissionData,
    registry: GameConfigRegistry = DEFAULT_REGISTRY,
    rate_limits: Optional[RateLimitConfig] = None,
    clock: Clock = now_ms,
) -> ValidationResult:
    """
    Judge a game submission with every check

    Args:
        data: Submission to judge
        registry: Game configs for the score and timing checks
        rate_limits: Rate policy, defaults to the global limits
        clock: Source of the current time in epoch ms, read once per call

    Returns:
        Merged ValidationResult
    """
    now = clock()

    score_result = validate_score(data, registry)
    timing_result = validate_timing(data, registry, now=now)
    rate_result = validate_rate(data, rate_limits, now=now)

    result = merge_results([score_result, timing_result, rate_result])

    if DEBUG_VALIDATION:
        logger.debug(
            f"Submission game={data.game_slug} user={data.user_id} "
            f"score={score_result.confidence} timing={timing_result.confidence} "
            f"rate={rate_result.confidence} -> {result.confidence}"
        )

    return result


def classify_submission(
    result: ValidationResult,
    reject_threshold: float = REJECT_CONFIDENCE_THRESHOLD
) -> str:
    """
    Map a validation result to what the reward-crediting caller should do

    Args:
        result: Aggregated validation result
        reject_threshold: Confidence below which a submission is rejected

    Returns:
        "rejected", "review" or "accepted"
    """
    confidence = MISSING_CONFIDENCE if result.confidence is None else result.confidence

    if not result.valid or confidence < reject_threshold:
        return DECISION_REJECTED
    if result.has_warnings or confidence < CLEAN_CONFIDENCE:
        return DECISION_REVIEW
    return DECISION_ACCEPTED


class SubmissionValidator:
    """
    Validation engine bound to a registry, rate policy and clock

    Holds no per-submission state, so one instance can serve any number of
    concurrent callers.
    """

    def __init__(
        self,
        registry: GameConfigRegistry = DEFAULT_REGISTRY,
        rate_limits: Optional[RateLimitConfig] = None,
        clock: Clock = now_ms,
        reject_threshold: float = REJECT_CONFIDENCE_THRESHOLD,
    ):
        if not (0 <= reject_threshold <= 1):
            raise ValueError(f"reject_threshold must be in [0, 1], got {reject_threshold}")

        self.registry = registry
        self.rate_limits = rate_limits or RateLimitConfig()
        self.clock = clock
        self.reject_threshold = reject_threshold

    def validate(self, data: GameSubmissionData) -> ValidationResult:
        """Judge a submission and log rejections and flagged results"""
        result = validate_game_submission(data, self.registry, self.rate_limits, self.clock)
        decision = classify_submission(result, self.reject_threshold)

        if decision == DECISION_REJECTED:
            logger.warning(
                f"Submission rejected: user={data.user_id} game={data.game_slug} "
                f"score={data.score} confidence={result.confidence} errors={result.errors}"
            )
        elif result.has_warnings:
            logger.info(
                f"Submission flagged: user={data.user_id} game={data.game_slug} "
                f"score={data.score} confidence={result.confidence} warnings={result.warnings}"
            )

        return result

    def decide(self, data: GameSubmissionData) -> str:
        return classify_submission(self.validate(data), self.reject_threshold)

    def remaining_quota(self, history: Sequence[SubmissionRecord]) -> RemainingQuota:
        return get_remaining_quota(history, self.rate_limits, self.clock)

    def get_game_config(self, game_slug: str) -> Optional[GameConfig]:
        return self.registry.get(game_slug)

    def supported_games(self) -> List[str]:
        return self.registry.supported_games()

    def get_status(self) -> Dict[str, Any]:
        """Return engine configuration for diagnostics"""
        return {
            "supported_games": self.supported_games(),
            "rate_limits": self.rate_limits.model_dump(),
            "reject_threshold": self.reject_threshold,
        }
