"""Week-level planning: volume, intensity, RIR and fatigue management."""

from dataclasses import dataclass
from datetime import date
from typing import Callable, Dict, Optional

import numpy as np

from .dates import add_weeks
from .models import FatigueManagement, MicroCycle, TrainingLevel, TrainingPhase
from .recovery import get_recovery_strategies
from .volume import get_volume_distribution


SCALE_MIN = 1.0
SCALE_MAX = 10.0

DELOAD_VOLUME = 3.0
DELOAD_INTENSITY = 3.0
DELOAD_RIR = 4.0
DELOAD_FATIGUE = 3.0
MIN_DELOAD_FREQUENCY = 2

READINESS_THRESHOLD = 7.0
DELOAD_READINESS_THRESHOLD = 5.0


@dataclass(frozen=True)
class WeekLoading:
    """Per-phase loading rule: base value plus a per-week increment."""

    volume: float
    intensity: float
    rir: float
    volume_step: float = 0.0
    intensity_step: float = 0.0
    rir_step: float = 0.0


# Used for any phase missing from PHASE_LOADING
BALANCED_LOADING = WeekLoading(volume=5, intensity=5, rir=2, volume_step=0.5, intensity_step=0.5)

PHASE_LOADING: Dict[TrainingPhase, WeekLoading] = {
    TrainingPhase.FOUNDATION: WeekLoading(volume=6, intensity=5, rir=3, volume_step=0.5),
    TrainingPhase.ANATOMICAL_ADAPTATION: WeekLoading(volume=5, intensity=4, rir=3, volume_step=0.5),
    TrainingPhase.HYPERTROPHY: WeekLoading(volume=7, intensity=6, rir=2, volume_step=0.5),
    TrainingPhase.HYPERTROPHY_VOLUME: WeekLoading(volume=7, intensity=6, rir=2, volume_step=0.5),
    TrainingPhase.HYPERTROPHY_INTENSITY: WeekLoading(volume=6, intensity=7, rir=1, intensity_step=0.5),
    TrainingPhase.PROGRESSIVE_OVERLOAD: WeekLoading(
        volume=6, intensity=6, rir=2, volume_step=0.3, intensity_step=0.3, rir_step=-0.5
    ),
    TrainingPhase.STRENGTH: WeekLoading(volume=5, intensity=8, rir=1, intensity_step=0.5),
    TrainingPhase.STRENGTH_PEAKING: WeekLoading(volume=4, intensity=9, rir=0),
    TrainingPhase.METABOLIC_PHASE: WeekLoading(volume=8, intensity=5, rir=1),
    TrainingPhase.INTENSITY_PHASE: WeekLoading(volume=6, intensity=7, rir=1, intensity_step=0.5),
    TrainingPhase.MAINTENANCE: WeekLoading(volume=5, intensity=6, rir=2),
    TrainingPhase.DELOAD: WeekLoading(volume=DELOAD_VOLUME, intensity=DELOAD_INTENSITY, rir=DELOAD_RIR),
}


def clamp_scale(value: float) -> float:
    """Clamp to the 1-10 scale and round to one decimal."""
    return round(float(np.clip(value, SCALE_MIN, SCALE_MAX)), 1)


def clamp_rir(value: float) -> float:
    return round(max(0.0, float(value)), 1)


def get_week_loading(phase: TrainingPhase) -> WeekLoading:
    return PHASE_LOADING.get(phase, BALANCED_LOADING)


class MicrocyclePlanner:
    """Derives one training week from the phase, week index and deload flag."""

    def __init__(self, id_factory: Callable[[], str]):
        self.id_factory = id_factory

    def plan_week(
        self,
        phase: TrainingPhase,
        week_index: int,
        is_deload: bool,
        frequency: int,
        training_level: TrainingLevel,
        start_date: date,
        end_limit: Optional[date] = None,
    ) -> MicroCycle:
        """Plan the week at zero-based ``week_index`` of its mesocycle.

        Args:
            phase: Phase of the enclosing mesocycle
            week_index: Zero-based week within the mesocycle
            is_deload: Whether this week is a deload week
            frequency: Planned training days per week
            training_level: Athlete level, gates the recovery catalog
            start_date: First day of the week
            end_limit: Last exclusive date of the plan; the week is cut short there

        Returns:
            MicroCycle for the week
        """
        end_date = add_weeks(start_date, 1)
        if end_limit is not None and end_date > end_limit:
            end_date = end_limit

        if is_deload:
            volume = DELOAD_VOLUME
            intensity = DELOAD_INTENSITY
            target_rir = DELOAD_RIR
            week_frequency = max(MIN_DELOAD_FREQUENCY, frequency - 1)
            expected_fatigue = DELOAD_FATIGUE
            readiness = DELOAD_READINESS_THRESHOLD
        else:
            loading = get_week_loading(phase)
            volume = loading.volume + loading.volume_step * week_index
            intensity = loading.intensity + loading.intensity_step * week_index
            target_rir = loading.rir + loading.rir_step * week_index
            week_frequency = frequency
            expected_fatigue = min(SCALE_MAX, 5.0 + week_index)
            readiness = READINESS_THRESHOLD

        return MicroCycle(
            id=self.id_factory(),
            name=f"Week {week_index + 1}{' (Deload)' if is_deload else ''}",
            phase=phase,
            week_number=week_index + 1,
            start_date=start_date,
            end_date=end_date,
            is_deload=is_deload,
            volume=clamp_scale(volume),
            intensity=clamp_scale(intensity),
            frequency=week_frequency,
            target_rir=clamp_rir(target_rir),
            volume_distribution=get_volume_distribution(phase),
            fatigue_management=FatigueManagement(
                expected_fatigue=expected_fatigue,
                recovery_strategies=tuple(get_recovery_strategies(is_deload, training_level)),
                readiness_threshold=readiness,
            ),
        )
