import random
from typing import Dict, Tuple
from ..errors import UnknownDifficultyError
from ..models import Difficulty

DIFFICULTY_RANGES: Dict[Difficulty, Tuple[int, int]] = {
    Difficulty.easy: (0, 5),
    Difficulty.medium: (3, 8),
    Difficulty.hard: (3, 12),
}

def to_difficulty(value: Difficulty | str) -> Difficulty:
    if isinstance(value, Difficulty):
        return value
    try:
        return Difficulty((value or "").strip().lower())
    except ValueError as e:
        raise UnknownDifficultyError(f"unknown difficulty: {value!r}") from e

def bounds_for(difficulty: Difficulty | str) -> Tuple[int, int]:
    return DIFFICULTY_RANGES[to_difficulty(difficulty)]

def draw_operands(rng: random.Random, lower_bound: int, upper_bound: int) -> Tuple[int, int]:
    # both ends inclusive
    return rng.randint(lower_bound, upper_bound), rng.randint(lower_bound, upper_bound)

def random_color(rng: random.Random) -> str:
    return "#{:02x}{:02x}{:02x}".format(rng.randrange(256), rng.randrange(256), rng.randrange(256))
