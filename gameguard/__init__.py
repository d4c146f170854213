"""
GameGuard

Anti-cheat validation for game score submissions before rewards are credited.
"""

from gameguard.validator import *  # noqa: F401,F403
from gameguard.validator import __all__

__version__ = "0.1.0"
