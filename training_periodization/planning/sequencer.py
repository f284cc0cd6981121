"""Phase sequencing: slices the program into goal-specific phase blocks."""

import logging
from typing import Dict, List, Tuple

from .models import InvalidPlanRequest, PhaseSlot, TrainingGoal, TrainingLevel, TrainingPhase

logger = logging.getLogger(__name__)


# Repeating phase templates per goal
PHASE_TEMPLATES: Dict[TrainingGoal, Tuple[TrainingPhase, ...]] = {
    TrainingGoal.HYPERTROPHY: (
        TrainingPhase.FOUNDATION,
        TrainingPhase.HYPERTROPHY_VOLUME,
        TrainingPhase.HYPERTROPHY_INTENSITY,
        TrainingPhase.DELOAD,
        TrainingPhase.HYPERTROPHY_VOLUME,
        TrainingPhase.PROGRESSIVE_OVERLOAD,
        TrainingPhase.DELOAD,
    ),
    TrainingGoal.STRENGTH: (
        TrainingPhase.HYPERTROPHY,
        TrainingPhase.STRENGTH,
        TrainingPhase.DELOAD,
        TrainingPhase.STRENGTH,
        TrainingPhase.STRENGTH_PEAKING,
        TrainingPhase.DELOAD,
    ),
    TrainingGoal.WEIGHT_LOSS: (
        TrainingPhase.METABOLIC_PHASE,
        TrainingPhase.HYPERTROPHY,
        TrainingPhase.DELOAD,
        TrainingPhase.METABOLIC_PHASE,
        TrainingPhase.INTENSITY_PHASE,
        TrainingPhase.DELOAD,
    ),
}

GENERAL_TEMPLATE: Tuple[TrainingPhase, ...] = (
    TrainingPhase.ANATOMICAL_ADAPTATION,
    TrainingPhase.HYPERTROPHY,
    TrainingPhase.DELOAD,
    TrainingPhase.STRENGTH,
    TrainingPhase.MAINTENANCE,
    TrainingPhase.DELOAD,
)

# Mesocycle length in weeks; fatigue accumulates faster at higher training ages
MESOCYCLE_WEEKS: Dict[TrainingLevel, int] = {
    TrainingLevel.BEGINNER: 6,
    TrainingLevel.INTERMEDIATE: 5,
    TrainingLevel.ADVANCED: 4,
    TrainingLevel.ELITE: 4,
}

DELOAD_BLOCK_WEEKS = 1


def get_phase_template(goal: TrainingGoal) -> Tuple[TrainingPhase, ...]:
    return PHASE_TEMPLATES.get(goal, GENERAL_TEMPLATE)


def get_mesocycle_weeks(training_level: TrainingLevel) -> int:
    return MESOCYCLE_WEEKS.get(training_level, 4)


class PhaseSequencer:
    """Walks the goal template cyclically until the program weeks are consumed."""

    def sequence(self, goal: TrainingGoal, training_level: TrainingLevel,
                 total_weeks: int) -> List[PhaseSlot]:
        """Slice ``total_weeks`` into phase slots.

        The final slot is truncated so the weeks sum exactly to the total.
        """
        if total_weeks <= 0:
            raise InvalidPlanRequest(f"Program must span at least one week, got {total_weeks}")

        template = get_phase_template(goal)
        block_weeks = get_mesocycle_weeks(training_level)

        slots: List[PhaseSlot] = []
        remaining = total_weeks
        index = 0

        while remaining > 0:
            phase = template[index % len(template)]
            weeks = DELOAD_BLOCK_WEEKS if phase.is_deload else block_weeks
            weeks = min(weeks, remaining)

            slots.append(PhaseSlot(
                index=index,
                phase=phase,
                weeks=weeks,
                is_deload_block=phase.is_deload,
            ))
            remaining -= weeks
            index += 1

        logger.debug(
            f"Sequenced {total_weeks} weeks for {goal.value}/{training_level.value} "
            f"into {len(slots)} slots"
        )
        return slots
