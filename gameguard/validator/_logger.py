"""Logging adapter that proxies validation messages to bittensor."""

from __future__ import annotations

from typing import Any

import bittensor as bt


class _BTValidationLogger:
    """Adapter that forwards standard logging calls to bittensor's logger."""

    prefix = "[GameGuard]"

    @staticmethod
    def _format(message: str, *args: Any) -> str:
        if not args:
            return message
        try:
            return message % args
        except (TypeError, ValueError):
            return f"{message} {' '.join(str(arg) for arg in args)}"

    def info(self, message: str, *args: Any) -> None:
        bt.logging.info(f"{self.prefix} {self._format(message, *args)}")

    def warning(self, message: str, *args: Any) -> None:
        bt.logging.warning(f"{self.prefix} {self._format(message, *args)}")

    def debug(self, message: str, *args: Any) -> None:
        bt.logging.debug(f"{self.prefix} {self._format(message, *args)}")


logger = _BTValidationLogger()
