#!/usr/bin/env python3
"""
GameGuard - Submission Preview CLI

Command-line tool for previewing how a game submission is judged,
inspecting game configs, and debugging the validation thresholds.
"""

import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

try:
    from gameguard.validator import (
        GameSubmissionData, SubmissionValidator,
        validate_score, validate_timing, validate_rate,
        classify_submission, get_constants_summary, DEFAULT_REGISTRY,
    )
    from gameguard.utils.config import build_parser, rate_limits_from_args, setup_logging
    from gameguard.utils.misc import fixed_clock, now_ms
except ImportError as e:
    print(f"Error importing GameGuard modules: {e}")
    print("Make sure you're running from the project root directory")
    sys.exit(1)


class SubmissionPreview:
    """Submission preview and analysis tool"""

    def __init__(self, validator: SubmissionValidator):
        self.validator = validator

    def preview_from_json(self, json_file: str):
        """Preview a submission from a JSON file"""
        try:
            with open(json_file, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            print(f"❌ Error reading JSON file: {e}")
            return 1

        if not isinstance(data, dict):
            print(f"❌ Invalid submission: expected a JSON object, got {type(data).__name__}")
            return 1

        # Either a bare submission or {"submission": ..., "history": [...]}
        if 'submission' in data and isinstance(data['submission'], dict):
            payload = dict(data['submission'])
            if 'history' in data:
                payload['submissionHistory'] = data['history']
        else:
            payload = data

        try:
            submission = GameSubmissionData.from_dict(payload)
        except ValueError as e:
            print(f"❌ Invalid submission: {e}")
            return 1

        self._analyze_submission(submission)
        return 0

    def list_games(self):
        """Print every supported game"""
        print("🎮 Supported Games:")
        for slug in self.validator.supported_games():
            print(f"   {slug}")

    def show_game(self, slug: str):
        """Print one game's config"""
        config = self.validator.get_game_config(slug)
        if config is None:
            print(f"❌ Unknown game: {slug}")
            return 1

        print(f"🎮 {config.slug}")
        print(f"   Score: {config.min_score:g} - {config.max_score:g}")
        print(f"   Duration: {config.min_duration / 1000:g}s - {config.max_duration / 1000:g}s")
        print(f"   Max streak: {config.max_streak_value}")
        print(f"   Max score/min: {config.max_score_per_minute:g}")
        return 0

    def _analyze_submission(self, submission: GameSubmissionData):
        """Run each check and the aggregate, printing the breakdown"""
        print("📋 Submission Analysis")
        print(f"   Game: {submission.game_slug}")
        print(f"   User: {submission.user_id or 'unknown'}")
        print(f"   Score: {submission.score:g}  Duration: {submission.duration / 1000:.1f}s")
        if submission.streak is not None:
            print(f"   Streak: {submission.streak}")
        print(f"   History: {len(submission.submission_history)} submissions")
        print()

        # Breakdown, aggregate and quota all see the same instant
        now = self.validator.clock()
        run = SubmissionValidator(
            registry=self.validator.registry,
            rate_limits=self.validator.rate_limits,
            clock=fixed_clock(now),
            reject_threshold=self.validator.reject_threshold,
        )
        checks = [
            ("Score", validate_score(submission, run.registry)),
            ("Timing", validate_timing(submission, run.registry, now=now)),
            ("Rate", validate_rate(submission, run.rate_limits, now=now)),
        ]

        for name, result in checks:
            self._print_result(name, result)

        result = run.validate(submission)
        decision = classify_submission(result, run.reject_threshold)

        print("🏆 Aggregate:")
        self._print_result("Overall", result)
        print(f"   Decision: {decision.upper()}")
        print()

        quota = run.remaining_quota(submission.submission_history)
        print("⏱️  Remaining Quota:")
        print(f"   Per minute: {quota.remaining_per_minute}")
        print(f"   Per hour: {quota.remaining_per_hour}")
        print(f"   Cooldown: {quota.retry_after_seconds}s")

    @staticmethod
    def _print_result(name: str, result):
        status = "✅" if result.valid else "❌"
        confidence = "n/a" if result.confidence is None else f"{result.confidence:.2f}"
        print(f"{status} {name}: confidence={confidence}")
        for error in result.errors:
            print(f"   error: {error}")
        for warning in result.warnings or []:
            print(f"   warning: {warning}")
        print()


def main():
    parser = build_parser()
    parser.add_argument("--file", type=str, help="JSON file with a submission")
    parser.add_argument("--games", action="store_true", help="List supported games")
    parser.add_argument("--game", type=str, help="Show config for one game")
    parser.add_argument("--constants", action="store_true", help="Show validation constants")
    args = parser.parse_args()

    setup_logging(args)

    try:
        rate_limits = rate_limits_from_args(args)
        fixed_now = getattr(args, "engine.now")
        validator = SubmissionValidator(
            registry=DEFAULT_REGISTRY,
            rate_limits=rate_limits,
            clock=fixed_clock(fixed_now) if fixed_now is not None else now_ms,
            reject_threshold=getattr(args, "engine.reject_threshold"),
        )
    except ValueError as e:
        print(f"❌ Invalid configuration: {e}")
        return 1

    preview = SubmissionPreview(validator)

    if args.constants:
        print(json.dumps(get_constants_summary(), indent=2))
        return 0
    if args.games:
        preview.list_games()
        return 0
    if args.game:
        return preview.show_game(args.game)
    if args.file:
        return preview.preview_from_json(args.file)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
