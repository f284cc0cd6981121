"""Weekly volume distribution across muscle groups, per training phase."""

from typing import Dict

from .models import TrainingPhase


MUSCLE_GROUPS = ("chest", "back", "legs", "shoulders", "arms", "core")

# Neutral split used for general phases and for any phase missing below
BALANCED_DISTRIBUTION: Dict[str, float] = {
    'chest': 20, 'back': 20, 'legs': 25, 'shoulders': 15, 'arms': 10, 'core': 10,
}

_VOLUME_ACCUMULATION = {
    'chest': 20, 'back': 20, 'legs': 25, 'shoulders': 15, 'arms': 15, 'core': 5,
}
_INTENSITY_ACCUMULATION = {
    'chest': 20, 'back': 20, 'legs': 20, 'shoulders': 15, 'arms': 20, 'core': 5,
}

VOLUME_DISTRIBUTIONS: Dict[TrainingPhase, Dict[str, float]] = {
    TrainingPhase.FOUNDATION: {
        'chest': 15, 'back': 25, 'legs': 25, 'shoulders': 15, 'arms': 10, 'core': 10,
    },
    TrainingPhase.ANATOMICAL_ADAPTATION: BALANCED_DISTRIBUTION,
    TrainingPhase.HYPERTROPHY: _VOLUME_ACCUMULATION,
    TrainingPhase.HYPERTROPHY_VOLUME: _VOLUME_ACCUMULATION,
    TrainingPhase.HYPERTROPHY_INTENSITY: _INTENSITY_ACCUMULATION,
    TrainingPhase.PROGRESSIVE_OVERLOAD: BALANCED_DISTRIBUTION,
    TrainingPhase.STRENGTH: {
        'chest': 15, 'back': 20, 'legs': 30, 'shoulders': 15, 'arms': 10, 'core': 10,
    },
    TrainingPhase.STRENGTH_PEAKING: {
        'chest': 15, 'back': 15, 'legs': 40, 'shoulders': 15, 'arms': 5, 'core': 10,
    },
    TrainingPhase.METABOLIC_PHASE: {
        'chest': 15, 'back': 15, 'legs': 30, 'shoulders': 10, 'arms': 10, 'core': 20,
    },
    TrainingPhase.INTENSITY_PHASE: _INTENSITY_ACCUMULATION,
    TrainingPhase.MAINTENANCE: BALANCED_DISTRIBUTION,
    TrainingPhase.DELOAD: BALANCED_DISTRIBUTION,
}


def get_volume_distribution(phase: TrainingPhase) -> Dict[str, float]:
    """Return a fresh copy of the volume split for a phase (percentages summing to 100)."""
    return dict(VOLUME_DISTRIBUTIONS.get(phase, BALANCED_DISTRIBUTION))
