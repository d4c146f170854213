"""
GameGuard - Validation Constants

Configuration constants for the submission validation engine.
Defines time windows, tolerance ratios, confidence levels and rate limits
used by the score, timing and rate validators.
"""

import os

# =============================================================================
# TIME WINDOWS
# =============================================================================

MINUTE_MS = 60 * 1000
HOUR_MS = 60 * MINUTE_MS
DAY_MS = 24 * HOUR_MS

# =============================================================================
# SCORE CHECKS
# =============================================================================

SCORE_RATE_TOLERANCE = 1.1          # 10% slack over max points/minute
ZERO_START_MAX_RATIO = 0.9          # 0 -> above 90% of max is rejected
LARGE_JUMP_RATIO = 0.5              # Jumps above 50% of max are flagged
HIGH_STREAK_RATIO = 0.8             # Streak above 80% of max...
LOW_SCORE_RATIO = 0.3               # ...with score below 30% of max is flagged

# =============================================================================
# TIMING CHECKS
# =============================================================================

SESSION_TOLERANCE_MS = 5000         # Allowed drift between session age and duration
MAX_SESSION_AGE_MS = DAY_MS         # Sessions older than this are stale
MIN_HUMAN_DURATION_MS = 1000        # Game-independent floor for scored play

# =============================================================================
# RATE LIMITS
# =============================================================================

DEFAULT_MAX_PER_MINUTE = 6
DEFAULT_MAX_PER_HOUR = 100
DEFAULT_COOLDOWN_MS = 10000

# =============================================================================
# CONFIDENCE
# =============================================================================

CLEAN_CONFIDENCE = 1.0
FAILED_CONFIDENCE = 0.0
SCORE_WARNING_CONFIDENCE = 0.7
TIMING_WARNING_CONFIDENCE = 0.75
RATE_WARNING_CONFIDENCE = 0.8
MISSING_CONFIDENCE = 1.0            # Counted for validators that report none

# Submissions below this confidence are rejected by classify_submission
REJECT_CONFIDENCE_THRESHOLD = 0.5

# Decision labels
DECISION_ACCEPTED = "accepted"
DECISION_REVIEW = "review"
DECISION_REJECTED = "rejected"

# =============================================================================
# ENVIRONMENT OVERRIDES
# =============================================================================

DEFAULT_MAX_PER_MINUTE = int(os.getenv("GAMEGUARD_MAX_PER_MINUTE", DEFAULT_MAX_PER_MINUTE))
DEFAULT_MAX_PER_HOUR = int(os.getenv("GAMEGUARD_MAX_PER_HOUR", DEFAULT_MAX_PER_HOUR))
DEFAULT_COOLDOWN_MS = int(os.getenv("GAMEGUARD_COOLDOWN_MS", DEFAULT_COOLDOWN_MS))
REJECT_CONFIDENCE_THRESHOLD = float(
    os.getenv("GAMEGUARD_REJECT_CONFIDENCE", REJECT_CONFIDENCE_THRESHOLD)
)

# Debug and development flags
DEBUG_VALIDATION = os.getenv("GAMEGUARD_DEBUG_VALIDATION", "false").lower() == "true"

# =============================================================================
# VALIDATION
# =============================================================================

def validate_constants():
    """
    Validate that all constants are reasonable and consistent

    Raises:
        ValueError: If constants are invalid
    """
    if DEFAULT_MAX_PER_MINUTE < 1:
        raise ValueError(f"DEFAULT_MAX_PER_MINUTE must be >= 1, got {DEFAULT_MAX_PER_MINUTE}")

    if DEFAULT_MAX_PER_HOUR < DEFAULT_MAX_PER_MINUTE:
        raise ValueError(
            f"DEFAULT_MAX_PER_HOUR ({DEFAULT_MAX_PER_HOUR}) must be >= "
            f"DEFAULT_MAX_PER_MINUTE ({DEFAULT_MAX_PER_MINUTE})"
        )

    if DEFAULT_COOLDOWN_MS < 0:
        raise ValueError(f"DEFAULT_COOLDOWN_MS must be >= 0, got {DEFAULT_COOLDOWN_MS}")

    if not (0 <= REJECT_CONFIDENCE_THRESHOLD <= 1):
        raise ValueError(
            f"REJECT_CONFIDENCE_THRESHOLD must be in [0, 1], got {REJECT_CONFIDENCE_THRESHOLD}"
        )

    # Warning levels must sit strictly between a failure and a clean pass
    for name, value in (
        ("SCORE_WARNING_CONFIDENCE", SCORE_WARNING_CONFIDENCE),
        ("TIMING_WARNING_CONFIDENCE", TIMING_WARNING_CONFIDENCE),
        ("RATE_WARNING_CONFIDENCE", RATE_WARNING_CONFIDENCE),
    ):
        if not (FAILED_CONFIDENCE < value < CLEAN_CONFIDENCE):
            raise ValueError(f"{name} must be in (0, 1), got {value}")


# Validate constants on import
if __name__ != "__main__":
    validate_constants()


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def get_constants_summary() -> dict:
    """
    Get a summary of all validation constants for debugging

    Returns:
        Dictionary with constant categories
    """
    return {
        "score": {
            "rate_tolerance": SCORE_RATE_TOLERANCE,
            "zero_start_max_ratio": ZERO_START_MAX_RATIO,
            "large_jump_ratio": LARGE_JUMP_RATIO,
            "high_streak_ratio": HIGH_STREAK_RATIO,
            "low_score_ratio": LOW_SCORE_RATIO,
        },
        "timing": {
            "session_tolerance_ms": SESSION_TOLERANCE_MS,
            "max_session_age_ms": MAX_SESSION_AGE_MS,
            "min_human_duration_ms": MIN_HUMAN_DURATION_MS,
        },
        "rate_limits": {
            "max_per_minute": DEFAULT_MAX_PER_MINUTE,
            "max_per_hour": DEFAULT_MAX_PER_HOUR,
            "cooldown_ms": DEFAULT_COOLDOWN_MS,
        },
        "confidence": {
            "score_warning": SCORE_WARNING_CONFIDENCE,
            "timing_warning": TIMING_WARNING_CONFIDENCE,
            "rate_warning": RATE_WARNING_CONFIDENCE,
            "missing": MISSING_CONFIDENCE,
            "reject_threshold": REJECT_CONFIDENCE_THRESHOLD,
        },
        "debug": DEBUG_VALIDATION,
    }
