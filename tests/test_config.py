import pytest

from gameguard.utils.config import build_parser, rate_limits_from_args
from gameguard.validator import get_constants_summary, validate_constants


def test_constants_are_consistent():
    validate_constants()


def test_constants_summary():
    summary = get_constants_summary()
    assert summary["rate_limits"] == {
        "max_per_minute": 6,
        "max_per_hour": 100,
        "cooldown_ms": 10000,
    }
    assert summary["timing"]["min_human_duration_ms"] == 1000
    assert summary["score"]["rate_tolerance"] == 1.1
    assert summary["confidence"]["reject_threshold"] == 0.5


def test_parser_defaults():
    args = build_parser().parse_args([])
    config = rate_limits_from_args(args)
    assert config.max_per_minute == 6
    assert config.max_per_hour == 100
    assert config.cooldown_ms == 10000
    assert getattr(args, "engine.now") is None
    assert getattr(args, "engine.reject_threshold") == 0.5


def test_parser_overrides():
    args = build_parser().parse_args([
        "--rate.max_per_minute", "3",
        "--rate.cooldown_ms", "2500",
        "--engine.now", "1700000000000",
    ])
    config = rate_limits_from_args(args)
    assert config.max_per_minute == 3
    assert config.max_per_hour == 100
    assert config.cooldown_ms == 2500
    assert getattr(args, "engine.now") == 1700000000000


def test_invalid_override_is_rejected():
    args = build_parser().parse_args(["--rate.max_per_minute", "0"])
    with pytest.raises(ValueError):
        rate_limits_from_args(args)
