"""
GameGuard - Submission Schema

Pydantic models for game submissions, per-game policy, rate limit policy
and validation results. Caller payloads are parsed leniently: values are
typed but not range-checked, so out-of-bounds input reaches the validators
and is reported as data instead of raising. NaN and infinity are refused at
construction.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, model_validator

from gameguard.utils.misc import safe_float
from .constants import (
    CLEAN_CONFIDENCE,
    DEFAULT_COOLDOWN_MS,
    DEFAULT_MAX_PER_HOUR,
    DEFAULT_MAX_PER_MINUTE,
    FAILED_CONFIDENCE,
)


def _pick(data: Dict[str, Any], camel: str, snake: str, default: Any = None) -> Any:
    """Read a key in either the platform's camelCase or snake_case form"""
    if camel in data:
        return data[camel]
    return data.get(snake, default)


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else safe_float(value)


def _optional_int(value: Any) -> Optional[int]:
    return None if value is None else int(safe_float(value))


class SubmissionRecord(BaseModel):
    """A past submission used for sliding-window rate accounting"""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    timestamp: int                      # epoch ms
    game_slug: str = Field(default="")
    score: float = Field(default=0.0)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SubmissionRecord':
        """Safely create from dictionary with defaults"""
        return cls(
            timestamp=int(safe_float(data.get('timestamp'))),
            game_slug=str(_pick(data, 'gameSlug', 'game_slug', '')),
            score=safe_float(data.get('score')),
        )


class GameSubmissionData(BaseModel):
    """One candidate submission to judge"""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    game_slug: str
    user_id: str = Field(default="")
    score: float
    streak: Optional[int] = None
    duration: float                     # ms
    session_start_time: Optional[int] = None  # epoch ms
    previous_score: Optional[float] = None
    submission_history: List[SubmissionRecord] = Field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GameSubmissionData':
        """
        Create from an API payload

        Accepts camelCase keys (``gameSlug``, ``sessionStartTime`` ...) as sent
        by the web client, or their snake_case equivalents. Missing or
        non-finite numbers fall back to 0.

        Args:
            data: Raw submission dictionary

        Returns:
            Parsed submission
        """
        history = _pick(data, 'submissionHistory', 'submission_history') or []
        return cls(
            game_slug=str(_pick(data, 'gameSlug', 'game_slug', '')),
            user_id=str(_pick(data, 'userId', 'user_id', '')),
            score=safe_float(data.get('score')),
            streak=_optional_int(data.get('streak')),
            duration=safe_float(data.get('duration')),
            session_start_time=_optional_int(_pick(data, 'sessionStartTime', 'session_start_time')),
            previous_score=_optional_float(_pick(data, 'previousScore', 'previous_score')),
            submission_history=[
                record if isinstance(record, SubmissionRecord) else SubmissionRecord.from_dict(record)
                for record in history
            ],
        )


class GameConfig(BaseModel):
    """Immutable per-game validation policy"""
    model_config = ConfigDict(frozen=True)

    slug: str
    min_score: float = Field(default=0)
    max_score: float
    min_duration: float                 # ms
    max_duration: float                 # ms
    max_streak_value: int = Field(ge=0)
    max_score_per_minute: float = Field(gt=0)

    @model_validator(mode='after')
    def validate_bounds(self) -> 'GameConfig':
        """Reject inverted or negative ranges"""
        if not self.slug:
            raise ValueError("Game config requires a slug")
        if self.min_score > self.max_score:
            raise ValueError(
                f"{self.slug}: min_score ({self.min_score}) exceeds max_score ({self.max_score})"
            )
        if self.min_duration < 0:
            raise ValueError(f"{self.slug}: min_duration must be >= 0, got {self.min_duration}")
        if self.min_duration > self.max_duration:
            raise ValueError(
                f"{self.slug}: min_duration ({self.min_duration}) exceeds "
                f"max_duration ({self.max_duration})"
            )
        return self


class RateLimitConfig(BaseModel):
    """Global submission rate policy, shared by all games"""
    model_config = ConfigDict(frozen=True)

    max_per_minute: int = Field(default=DEFAULT_MAX_PER_MINUTE, ge=1)
    max_per_hour: int = Field(default=DEFAULT_MAX_PER_HOUR, ge=1)
    cooldown_ms: int = Field(default=DEFAULT_COOLDOWN_MS, ge=0)


class ValidationResult(BaseModel):
    """Outcome of a validator or of the aggregated check"""
    valid: bool = True
    errors: List[str] = Field(default_factory=list)
    warnings: Optional[List[str]] = None
    confidence: Optional[float] = Field(default=None, ge=0.0, le=1.0)

    @classmethod
    def from_findings(
        cls,
        errors: Sequence[str],
        warnings: Sequence[str],
        warning_confidence: float,
    ) -> 'ValidationResult':
        """
        Build a result from collected errors and warnings

        Args:
            errors: Hard failures
            warnings: Soft failures
            warning_confidence: Confidence reported when only warnings exist

        Returns:
            Result with ``valid`` and ``confidence`` derived from the findings
        """
        if errors:
            confidence = FAILED_CONFIDENCE
        elif warnings:
            confidence = warning_confidence
        else:
            confidence = CLEAN_CONFIDENCE

        return cls(
            valid=not errors,
            errors=list(errors),
            warnings=list(warnings) or None,
            confidence=confidence,
        )

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dictionary without unset optional fields"""
        return self.model_dump(exclude_none=True)


@dataclass(frozen=True)
class RemainingQuota:
    """What a user may still submit under the current rate policy"""
    remaining_per_minute: int
    remaining_per_hour: int
    cooldown_remaining_ms: int

    @property
    def can_submit(self) -> bool:
        return (
            self.remaining_per_minute > 0
            and self.remaining_per_hour > 0
            and self.cooldown_remaining_ms == 0
        )

    @property
    def retry_after_seconds(self) -> int:
        """Whole seconds until the cooldown ends, suitable for Retry-After"""
        return int(math.ceil(self.cooldown_remaining_ms / 1000))
