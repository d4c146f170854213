import os
import sys

import pytest

# Ensure the project root (containing the `gameguard` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from gameguard.utils.misc import fixed_clock
from gameguard.validator import (
    GameConfig,
    GameConfigRegistry,
    GameSubmissionData,
    SubmissionRecord,
)

NOW = 1_700_000_000_000


def records_at(*ages_ms, game_slug='regex-rush'):
    """History entries that happened ``age`` milliseconds before NOW"""
    return [
        SubmissionRecord(timestamp=NOW - age, game_slug=game_slug, score=100)
        for age in ages_ms
    ]


@pytest.fixture()
def clock():
    return fixed_clock(NOW)


@pytest.fixture()
def make_submission():
    def factory(**overrides):
        fields = {
            'game_slug': 'regex-rush',
            'user_id': 'user-1',
            'score': 500,
            'duration': 60000,
        }
        fields.update(overrides)
        return GameSubmissionData(**fields)
    return factory


@pytest.fixture()
def custom_registry():
    return GameConfigRegistry([
        GameConfig(
            slug='tap-test',
            min_score=0,
            max_score=100,
            min_duration=0,
            max_duration=60000,
            max_streak_value=10,
            max_score_per_minute=100000,
        ),
    ])
