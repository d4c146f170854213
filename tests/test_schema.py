import json

import pytest

from gameguard.utils.misc import format_number, safe_float
from gameguard.validator import (
    GameSubmissionData,
    RemainingQuota,
    SubmissionRecord,
    ValidationResult,
)

from conftest import NOW


def test_from_dict_accepts_client_payload():
    submission = GameSubmissionData.from_dict({
        'gameSlug': 'regex-rush',
        'userId': 'user-42',
        'score': 640,
        'streak': 12,
        'duration': 95000,
        'sessionStartTime': NOW - 95000,
        'previousScore': 410,
        'submissionHistory': [
            {'timestamp': NOW - 600000, 'gameSlug': 'memory-match', 'score': 300},
        ],
    })
    assert submission.game_slug == 'regex-rush'
    assert submission.user_id == 'user-42'
    assert submission.score == 640
    assert submission.streak == 12
    assert submission.duration == 95000
    assert submission.session_start_time == NOW - 95000
    assert submission.previous_score == 410
    assert submission.submission_history == [
        SubmissionRecord(timestamp=NOW - 600000, game_slug='memory-match', score=300),
    ]


def test_from_dict_accepts_snake_case():
    submission = GameSubmissionData.from_dict({
        'game_slug': 'speed-type',
        'user_id': 'user-7',
        'score': 100,
        'duration': 20000,
        'previous_score': 50,
    })
    assert submission.game_slug == 'speed-type'
    assert submission.previous_score == 50
    assert submission.streak is None
    assert submission.session_start_time is None
    assert submission.submission_history == []


def test_from_dict_coerces_missing_and_non_finite_numbers():
    submission = GameSubmissionData.from_dict({
        'gameSlug': 'regex-rush',
        'score': float('nan'),
        'duration': None,
        'previousScore': 'oops',
    })
    assert submission.score == 0
    assert submission.duration == 0
    assert submission.previous_score == 0


def test_out_of_range_values_are_representable():
    submission = GameSubmissionData(game_slug='regex-rush', score=-10, duration=-500, streak=-3)
    assert submission.score == -10
    assert submission.duration == -500
    assert submission.streak == -3


@pytest.mark.parametrize('field', ['score', 'duration', 'previous_score'])
@pytest.mark.parametrize('value', [float('nan'), float('inf'), float('-inf')])
def test_non_finite_numbers_are_refused(field, value):
    fields = {'game_slug': 'regex-rush', 'score': 1000, 'duration': 60000, field: value}
    with pytest.raises(ValueError):
        GameSubmissionData(**fields)


def test_nan_literal_from_json_is_refused():
    payload = json.loads('{"game_slug": "regex-rush", "score": 1000, "duration": NaN}')
    with pytest.raises(ValueError):
        GameSubmissionData(**payload)


def test_non_finite_history_score_is_refused():
    with pytest.raises(ValueError):
        SubmissionRecord(timestamp=NOW, game_slug='regex-rush', score=float('nan'))


def test_submission_is_frozen():
    submission = GameSubmissionData(game_slug='regex-rush', score=10, duration=60000)
    with pytest.raises(ValueError):
        submission.score = 9999


def test_from_findings_confidence_levels():
    clean = ValidationResult.from_findings([], [], 0.7)
    warned = ValidationResult.from_findings([], ["w"], 0.7)
    failed = ValidationResult.from_findings(["e"], ["w"], 0.7)

    assert (clean.valid, clean.confidence, clean.warnings) == (True, 1.0, None)
    assert (warned.valid, warned.confidence, warned.warnings) == (True, 0.7, ["w"])
    assert (failed.valid, failed.confidence, failed.errors) == (False, 0.0, ["e"])


def test_to_dict_omits_unset_fields():
    assert ValidationResult(valid=True, errors=[], warnings=["w"]).to_dict() == {
        'valid': True,
        'errors': [],
        'warnings': ['w'],
    }


def test_confidence_must_stay_in_range():
    with pytest.raises(ValueError):
        ValidationResult(confidence=1.5)


def test_retry_after_rounds_up():
    quota = RemainingQuota(remaining_per_minute=3, remaining_per_hour=50, cooldown_remaining_ms=1500)
    assert quota.retry_after_seconds == 2
    assert not quota.can_submit


def test_safe_float():
    assert safe_float("12.5") == 12.5
    assert safe_float(None) == 0.0
    assert safe_float(float('inf')) == 0.0
    assert safe_float([1, 2], default=-1.0) == -1.0


def test_format_number():
    assert format_number(1000.0) == "1000"
    assert format_number(12.5) == "12.5"
    assert format_number(7) == "7"
