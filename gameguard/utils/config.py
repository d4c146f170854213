# The MIT License (MIT)
# Copyright © 2025 GameGuard Team

# Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated
# documentation files (the "Software"), to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so, subject to the following conditions:

# The above copyright notice and this permission notice shall be included in all copies or substantial portions of
# the Software.

# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO
# THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL
# THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION
# OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER
# DEALINGS IN THE SOFTWARE.

import argparse

import bittensor as bt

from gameguard.validator.constants import (
    DEFAULT_COOLDOWN_MS,
    DEFAULT_MAX_PER_HOUR,
    DEFAULT_MAX_PER_MINUTE,
    REJECT_CONFIDENCE_THRESHOLD,
)
from gameguard.validator.schema import RateLimitConfig


def add_rate_limit_args(parser: argparse.ArgumentParser):
    """
    Adds rate limit override arguments to the parser.
    """
    rate_group = parser.add_argument_group('rate')
    rate_group.add_argument(
        "--rate.max_per_minute",
        type=int,
        help="Maximum submissions in any rolling minute",
        default=DEFAULT_MAX_PER_MINUTE,
    )
    rate_group.add_argument(
        "--rate.max_per_hour",
        type=int,
        help="Maximum submissions in any rolling hour",
        default=DEFAULT_MAX_PER_HOUR,
    )
    rate_group.add_argument(
        "--rate.cooldown_ms",
        type=int,
        help="Minimum milliseconds between two submissions",
        default=DEFAULT_COOLDOWN_MS,
    )


def add_engine_args(parser: argparse.ArgumentParser):
    """Add engine level arguments to the parser."""
    engine_group = parser.add_argument_group('engine')
    engine_group.add_argument(
        "--engine.reject_threshold",
        type=float,
        help="Confidence below which a submission is rejected",
        default=REJECT_CONFIDENCE_THRESHOLD,
    )
    engine_group.add_argument(
        "--engine.now",
        type=int,
        help="Fixed current time in epoch ms (defaults to the wall clock)",
        default=None,
    )
    engine_group.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
        default=False,
    )


def rate_limits_from_args(args: argparse.Namespace) -> RateLimitConfig:
    """
    Build a RateLimitConfig from parsed arguments.

    Raises:
        ValueError: If the overrides are out of range
    """
    return RateLimitConfig(
        max_per_minute=getattr(args, "rate.max_per_minute", DEFAULT_MAX_PER_MINUTE),
        max_per_hour=getattr(args, "rate.max_per_hour", DEFAULT_MAX_PER_HOUR),
        cooldown_ms=getattr(args, "rate.cooldown_ms", DEFAULT_COOLDOWN_MS),
    )


def setup_logging(args: argparse.Namespace):
    """Route debug output through bittensor's logger when requested."""
    if getattr(args, "debug", False):
        bt.logging.set_debug(True)


def build_parser() -> argparse.ArgumentParser:
    """
    Returns the argument parser with every GameGuard option registered.
    """
    parser = argparse.ArgumentParser(description="GameGuard submission preview")
    add_rate_limit_args(parser)
    add_engine_args(parser)
    return parser
