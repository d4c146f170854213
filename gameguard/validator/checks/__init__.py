"""Independent submission checks."""

from gameguard.validator.checks.rate import DEFAULT_RATE_LIMITS, get_remaining_quota, validate_rate
from gameguard.validator.checks.score import score_per_minute, validate_score
from gameguard.validator.checks.timing import validate_timing

__all__ = [
    "validate_score",
    "validate_timing",
    "validate_rate",
    "get_remaining_quota",
    "score_per_minute",
    "DEFAULT_RATE_LIMITS",
]
