"""
GameGuard - Game Config Registry

Read-only lookup from game slug to per-game validation bounds. Each entry is
tuned to that game's scoring economy.
"""

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Optional

from .schema import GameConfig


class GameConfigRegistry:
    """
    Immutable mapping of game slug to GameConfig

    Built once and passed to the validators. Lookups of unknown slugs return
    None; callers report those as an unknown game.
    """

    def __init__(self, configs: Iterable[GameConfig] = ()):
        """
        Initialize the registry

        Args:
            configs: Game configs, one per slug

        Raises:
            ValueError: If two configs share a slug
        """
        entries: Dict[str, GameConfig] = {}
        for config in configs:
            if config.slug in entries:
                raise ValueError(f"Duplicate game config for slug: {config.slug}")
            entries[config.slug] = config
        self._configs = MappingProxyType(entries)

    def get(self, slug: str) -> Optional[GameConfig]:
        """Return the config for ``slug`` or None if the game is unknown"""
        return self._configs.get(slug)

    def supported_games(self) -> List[str]:
        """Slugs of all configured games, in registration order"""
        return list(self._configs.keys())

    def with_configs(self, configs: Iterable[GameConfig]) -> 'GameConfigRegistry':
        """
        Derive a new registry with additional or replaced entries

        Args:
            configs: Configs to add; an existing slug is overridden

        Returns:
            New registry; this one is left untouched
        """
        merged = dict(self._configs)
        for config in configs:
            merged[config.slug] = config
        return GameConfigRegistry(merged.values())

    def __contains__(self, slug: object) -> bool:
        return slug in self._configs

    def __iter__(self) -> Iterator[GameConfig]:
        return iter(self._configs.values())

    def __len__(self) -> int:
        return len(self._configs)

    def __repr__(self) -> str:
        return f"GameConfigRegistry({self.supported_games()!r})"


DEFAULT_GAME_CONFIGS = (
    GameConfig(
        slug='regex-rush',
        min_score=0,
        max_score=1000,
        min_duration=30000,
        max_duration=300000,
        max_streak_value=50,
        max_score_per_minute=1000,
    ),
    GameConfig(
        slug='memory-match',
        min_score=0,
        max_score=500,
        min_duration=60000,
        max_duration=600000,
        max_streak_value=20,
        max_score_per_minute=500,
    ),
    GameConfig(
        slug='speed-type',
        min_score=0,
        max_score=2000,
        min_duration=15000,
        max_duration=180000,
        max_streak_value=100,
        max_score_per_minute=2000,
    ),
    GameConfig(
        slug='code-breaker',
        min_score=0,
        max_score=800,
        min_duration=30000,
        max_duration=300000,
        max_streak_value=30,
        max_score_per_minute=800,
    ),
    GameConfig(
        slug='bug-hunter',
        min_score=0,
        max_score=1200,
        min_duration=45000,
        max_duration=360000,
        max_streak_value=40,
        max_score_per_minute=1200,
    ),
    GameConfig(
        slug='quantum-grep',
        min_score=0,
        max_score=1500,
        min_duration=60000,
        max_duration=420000,
        max_streak_value=60,
        max_score_per_minute=1500,
    ),
    GameConfig(
        slug='regex-crossword',
        min_score=0,
        max_score=1000,
        min_duration=90000,
        max_duration=600000,
        max_streak_value=25,
        max_score_per_minute=600,
    ),
    GameConfig(
        slug='merge-miners',
        min_score=0,
        max_score=3000,
        min_duration=120000,
        max_duration=900000,
        max_streak_value=80,
        max_score_per_minute=1500,
    ),
    GameConfig(
        slug='syntax-sprint',
        min_score=0,
        max_score=1800,
        min_duration=20000,
        max_duration=240000,
        max_streak_value=70,
        max_score_per_minute=1800,
    ),
    GameConfig(
        slug='grep-rails',
        min_score=0,
        max_score=2500,
        min_duration=30000,
        max_duration=300000,
        max_streak_value=90,
        max_score_per_minute=2500,
    ),
)

DEFAULT_REGISTRY = GameConfigRegistry(DEFAULT_GAME_CONFIGS)


def get_game_config(
    game_slug: str,
    registry: GameConfigRegistry = DEFAULT_REGISTRY
) -> Optional[GameConfig]:
    """
    Look up a game's validation policy

    Args:
        game_slug: Game identifier
        registry: Registry to consult

    Returns:
        GameConfig, or None for an unknown game
    """
    return registry.get(game_slug)


def get_supported_games(registry: GameConfigRegistry = DEFAULT_REGISTRY) -> List[str]:
    """List the slugs of every game the registry knows"""
    return registry.supported_games()
