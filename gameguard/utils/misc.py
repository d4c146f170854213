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

import time
from typing import Any, Callable

import numpy as np

# A clock returns the current wall-clock time in epoch milliseconds
Clock = Callable[[], int]


def now_ms() -> int:
    """
    Current wall-clock time in epoch milliseconds.

    Returns:
        int: Milliseconds since the Unix epoch.
    """
    return int(time.time() * 1000)


def fixed_clock(timestamp_ms: int) -> Clock:
    """
    Build a clock that always reports the same instant.

    Args:
        timestamp_ms (int): Epoch milliseconds to report.

    Returns:
        Clock: Zero-argument callable returning ``timestamp_ms``.
    """
    frozen = int(timestamp_ms)

    def clock() -> int:
        return frozen

    return clock


def safe_float(value: Any, default: float = 0.0) -> float:
    """
    Coerce a loosely typed payload value to a finite float.

    Args:
        value (Any): Raw value from a caller payload.
        default (float): Returned for None, non-numeric or non-finite input.

    Returns:
        float: The numeric value or ``default``.
    """
    try:
        if value is None:
            return default
        numeric = float(value)
        if not np.isfinite(numeric):
            return default
        return numeric
    except (TypeError, ValueError):
        return default


def format_number(value: float) -> str:
    """Render whole numbers without a trailing ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
