"""Mesocycle planning: expands a phase slot into weeks with its metadata."""

import logging
from datetime import date
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .dates import add_weeks
from .deload import get_deload_strategy, get_deload_timing
from .descriptors import describe_phase, get_phase_descriptor, get_special_techniques
from .microcycle import MicrocyclePlanner
from .models import (
    MesoCycle,
    PhaseSlot,
    ProgressionShape,
    TrainingGoal,
    TrainingLevel,
    TrainingPhase,
)

logger = logging.getLogger(__name__)

ASC = ProgressionShape.ASCENDING
DESC = ProgressionShape.DESCENDING
WAVE = ProgressionShape.WAVE
STEP = ProgressionShape.STEP
CONST = ProgressionShape.CONSTANT

# Used for any phase missing from PROGRESSION_SHAPES
BALANCED_PROGRESSION: Tuple[ProgressionShape, ProgressionShape] = (WAVE, STEP)

# Phase -> (volume progression, intensity progression)
PROGRESSION_SHAPES: Dict[TrainingPhase, Tuple[ProgressionShape, ProgressionShape]] = {
    TrainingPhase.FOUNDATION: (ASC, CONST),
    TrainingPhase.ANATOMICAL_ADAPTATION: (ASC, CONST),
    TrainingPhase.HYPERTROPHY: (ASC, CONST),
    TrainingPhase.HYPERTROPHY_VOLUME: (ASC, CONST),
    TrainingPhase.HYPERTROPHY_INTENSITY: (CONST, ASC),
    TrainingPhase.PROGRESSIVE_OVERLOAD: (ASC, ASC),
    TrainingPhase.STRENGTH: (STEP, ASC),
    TrainingPhase.STRENGTH_PEAKING: (DESC, ASC),
    TrainingPhase.METABOLIC_PHASE: (WAVE, WAVE),
    TrainingPhase.INTENSITY_PHASE: (CONST, ASC),
    TrainingPhase.MAINTENANCE: (CONST, CONST),
    TrainingPhase.DELOAD: (DESC, DESC),
}


def get_progression_shapes(phase: TrainingPhase) -> Tuple[ProgressionShape, ProgressionShape]:
    return PROGRESSION_SHAPES.get(phase, BALANCED_PROGRESSION)


def cadence_deload_due(slots: Sequence[PhaseSlot], position: int, cadence: int) -> bool:
    """Whether the slot at ``position`` takes a cadence deload in its final week.

    A cadence deload is skipped when it would land next to a deload week,
    since the neighbouring deload already serves the cadence.
    """
    slot = slots[position]
    if slot.is_deload_block or cadence <= 0 or (slot.index + 1) % cadence != 0:
        return False

    next_slot = slots[position + 1] if position + 1 < len(slots) else None
    if next_slot is not None and next_slot.is_deload_block:
        return False

    previous_slot = slots[position - 1] if position > 0 else None
    if slot.weeks == 1 and previous_slot is not None and previous_slot.is_deload_block:
        return False

    return True


class MesocyclePlanner:
    """Builds a MesoCycle for one slot produced by the PhaseSequencer."""

    def __init__(self, id_factory: Callable[[], str]):
        self.id_factory = id_factory
        self.microcycle_planner = MicrocyclePlanner(id_factory)

    def plan(
        self,
        slot: PhaseSlot,
        start_date: date,
        frequency: int,
        training_level: TrainingLevel,
        goal: TrainingGoal,
        cadence_deload: bool = False,
        end_limit: Optional[date] = None,
    ) -> MesoCycle:
        """Expand ``slot`` into a mesocycle starting on ``start_date``.

        ``cadence_deload`` turns the final week into a deload week; deload
        blocks are deload weeks throughout. ``end_limit`` cuts the final
        week short at the end of the plan.
        """
        mesocycle_id = self.id_factory()
        phase = slot.phase
        descriptor = get_phase_descriptor(phase)
        volume_shape, intensity_shape = get_progression_shapes(phase)

        micro_cycles = []
        for week_index in range(slot.weeks):
            is_deload = slot.is_deload_block or (cadence_deload and week_index == slot.weeks - 1)
            micro_cycles.append(self.microcycle_planner.plan_week(
                phase=phase,
                week_index=week_index,
                is_deload=is_deload,
                frequency=frequency,
                training_level=training_level,
                start_date=add_weeks(start_date, week_index),
                end_limit=end_limit,
            ))

        end_date = add_weeks(start_date, slot.weeks)
        if end_limit is not None and end_date > end_limit:
            end_date = end_limit

        includes_deload = slot.is_deload_block or cadence_deload
        if cadence_deload:
            logger.debug(f"Cadence deload in week {slot.weeks} of slot {slot.index} ({phase.value})")

        return MesoCycle(
            id=mesocycle_id,
            name=f"{phase.label} Mesocycle",
            description=describe_phase(phase, goal),
            phase=phase,
            goal=goal,
            micro_cycles=tuple(micro_cycles),
            volume_progression=volume_shape,
            intensity_progression=intensity_shape,
            includes_deload=includes_deload,
            deload_strategy=get_deload_strategy(training_level, goal),
            deload_timing=get_deload_timing(training_level),
            start_date=start_date,
            end_date=end_date,
            primary_focus=descriptor.primary_focus,
            secondary_focus=descriptor.secondary_focus,
            special_techniques=tuple(get_special_techniques(phase, training_level)),
            progression_model=descriptor.progression_model(training_level),
            adaptation_markers=descriptor.adaptation_markers,
        )

    def plan_all(
        self,
        slots: Sequence[PhaseSlot],
        start_date: date,
        frequency: int,
        training_level: TrainingLevel,
        goal: TrainingGoal,
        deload_cadence: int,
        end_limit: Optional[date] = None,
    ) -> List[MesoCycle]:
        """Plan every slot in order, each starting where the previous one ended."""
        mesocycles: List[MesoCycle] = []
        cursor = start_date

        for position, slot in enumerate(slots):
            mesocycle = self.plan(
                slot,
                start_date=cursor,
                frequency=frequency,
                training_level=training_level,
                goal=goal,
                cadence_deload=cadence_deload_due(slots, position, deload_cadence),
                end_limit=end_limit,
            )
            mesocycles.append(mesocycle)
            cursor = mesocycle.end_date

        return mesocycles
