from backend.engine.gamegenerator.generator import GameGenerator
from backend.engine.gamegenerator.random_source import (
    RandomSource,
    daily_random,
    daily_seed,
    seeded_random,
)

__all__ = ["GameGenerator", "RandomSource", "daily_random", "daily_seed", "seeded_random"]
