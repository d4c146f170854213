"""
GameGuard - Validator Package

Multi-signal validation of reward-bearing game score submissions: score
bounds, timing plausibility and submission rate, merged into one verdict.
"""

from .schema import (
    GameSubmissionData,
    SubmissionRecord,
    GameConfig,
    RateLimitConfig,
    ValidationResult,
    RemainingQuota,
)
from .registry import (
    GameConfigRegistry,
    DEFAULT_GAME_CONFIGS,
    DEFAULT_REGISTRY,
    get_game_config,
    get_supported_games,
)
from .checks import (
    DEFAULT_RATE_LIMITS,
    validate_score,
    validate_timing,
    validate_rate,
    get_remaining_quota,
)
from .engine import (
    SubmissionValidator,
    validate_game_submission,
    classify_submission,
    merge_results,
)
from .constants import get_constants_summary, validate_constants

__all__ = [
    # Schema
    'GameSubmissionData',
    'SubmissionRecord',
    'GameConfig',
    'RateLimitConfig',
    'ValidationResult',
    'RemainingQuota',

    # Registry
    'GameConfigRegistry',
    'DEFAULT_GAME_CONFIGS',
    'DEFAULT_REGISTRY',
    'get_game_config',
    'get_supported_games',

    # Checks
    'DEFAULT_RATE_LIMITS',
    'validate_score',
    'validate_timing',
    'validate_rate',
    'get_remaining_quota',

    # Engine
    'SubmissionValidator',
    'validate_game_submission',
    'classify_submission',
    'merge_results',

    # Constants
    'get_constants_summary',
    'validate_constants',
]
