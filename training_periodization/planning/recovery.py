"""Recovery tactics catalog, gated by training level."""

from typing import List

from .models import TrainingLevel


BASE_STRATEGIES = (
    'adequate sleep (7-9 hours)',
    'proper nutrition',
    'hydration',
    'active recovery',
)

# Intermediate and above
ADVANCED_STRATEGIES = (
    'contrast showers',
    'foam rolling',
    'massage',
    'stretching',
    'meditation',
    'stress management',
)

# Advanced and above
ELITE_STRATEGIES = (
    'cold therapy',
    'compression garments',
    'targeted mobility work',
    'blood flow restriction recovery',
    'neuromuscular electrical stimulation',
    'supplementation (approved)',
)

DELOAD_STRATEGIES = (
    'reduced training volume',
    'reduced training intensity',
    'focus on technique',
    'extra sleep',
    'mental recovery',
    'active recovery',
)

_LEVEL_TIERS = {
    TrainingLevel.BEGINNER: (),
    TrainingLevel.INTERMEDIATE: (ADVANCED_STRATEGIES,),
    TrainingLevel.ADVANCED: (ADVANCED_STRATEGIES, ELITE_STRATEGIES),
    TrainingLevel.ELITE: (ADVANCED_STRATEGIES, ELITE_STRATEGIES),
}


def get_recovery_strategies(is_deload: bool, training_level: TrainingLevel) -> List[str]:
    """Ordered, de-duplicated recovery tactics for a week."""
    strategies = list(BASE_STRATEGIES)
    for tier in _LEVEL_TIERS.get(training_level, ()):
        strategies.extend(tier)

    if is_deload:
        strategies.extend(DELOAD_STRATEGIES)

    return list(dict.fromkeys(strategies))
