"""Deload cadence, strategy and timing by training level and goal."""

import logging
from typing import Dict, Optional

from ..config import config
from .models import DeloadSchedule, DeloadTiming, DeloadType, TrainingGoal, TrainingLevel

logger = logging.getLogger(__name__)


# Weeks between planned deloads; shorter for higher training ages
DELOAD_CADENCE_WEEKS: Dict[TrainingLevel, int] = {
    TrainingLevel.BEGINNER: 6,
    TrainingLevel.INTERMEDIATE: 5,
    TrainingLevel.ADVANCED: 4,
    TrainingLevel.ELITE: 4,
}

GOAL_DELOAD_STRATEGIES: Dict[TrainingGoal, DeloadType] = {
    TrainingGoal.STRENGTH: DeloadType.COMBINED,
    TrainingGoal.HYPERTROPHY: DeloadType.VOLUME,
    TrainingGoal.POWER: DeloadType.FREQUENCY,
    TrainingGoal.WEIGHT_LOSS: DeloadType.ACTIVE_RECOVERY,
    TrainingGoal.ENDURANCE: DeloadType.VOLUME,
    TrainingGoal.GENERAL_FITNESS: DeloadType.VOLUME,
}


def get_deload_cadence(training_level: TrainingLevel) -> int:
    return DELOAD_CADENCE_WEEKS.get(training_level, 4)


def get_deload_strategy(training_level: TrainingLevel, goal: TrainingGoal) -> DeloadType:
    """Beginners always reduce volume; everyone else deloads according to the goal."""
    if training_level == TrainingLevel.BEGINNER:
        return DeloadType.VOLUME
    return GOAL_DELOAD_STRATEGIES.get(goal, DeloadType.VOLUME)


def get_deload_timing(training_level: TrainingLevel) -> DeloadTiming:
    if training_level == TrainingLevel.BEGINNER:
        return DeloadTiming.PLANNED
    return DeloadTiming.AUTOREGULATED


class DeloadPolicy:
    """Derives the macrocycle deload schedule."""

    def __init__(self, fatigue_threshold: Optional[float] = None):
        self.fatigue_threshold = (
            fatigue_threshold if fatigue_threshold is not None else config.FATIGUE_DELOAD_THRESHOLD
        )

    def build_schedule(self, training_level: TrainingLevel, goal: TrainingGoal) -> DeloadSchedule:
        timing = get_deload_timing(training_level)
        auto_regulated = timing == DeloadTiming.AUTOREGULATED

        schedule = DeloadSchedule(
            frequency=get_deload_cadence(training_level),
            strategy=get_deload_strategy(training_level, goal),
            timing=timing,
            auto_regulated=auto_regulated,
            fatigue_threshold=self.fatigue_threshold if auto_regulated else None,
        )
        logger.debug(
            f"Deload schedule for {training_level.value}/{goal.value}: every "
            f"{schedule.frequency} weeks, {schedule.strategy.value} ({schedule.timing.value})"
        )
        return schedule
