"""Nutrition periodization coupled to the training goal."""

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Tuple

from .models import (
    CalorieAdjustment,
    CarbStrategy,
    FatStrategy,
    InvalidPlanRequest,
    NutritionPhase,
    NutritionPhaseType,
    TrainingGoal,
    TrainingLevel,
)

logger = logging.getLogger(__name__)


# Protein baseline in g/kg of bodyweight
BASE_PROTEIN: Dict[TrainingLevel, float] = {
    TrainingLevel.BEGINNER: 1.6,
    TrainingLevel.INTERMEDIATE: 1.8,
    TrainingLevel.ADVANCED: 2.0,
    TrainingLevel.ELITE: 2.0,
}


@dataclass(frozen=True)
class NutritionTemplate:
    phase: NutritionPhaseType
    fraction: float  # Share of the program
    calorie_adjustment: CalorieAdjustment
    protein_offset: float
    carb_strategy: CarbStrategy
    fat_strategy: FatStrategy


ACC = NutritionPhaseType.ACCUMULATION
INT = NutritionPhaseType.INTENSIFICATION
PEAK = NutritionPhaseType.PEAK
DELOAD = NutritionPhaseType.DELOAD

SURPLUS = CalorieAdjustment.SURPLUS
MAINT = CalorieAdjustment.MAINTENANCE
DEFICIT = CalorieAdjustment.DEFICIT

GENERAL_NUTRITION: Tuple[NutritionTemplate, ...] = (
    NutritionTemplate(ACC, 0.8, MAINT, 0.0, CarbStrategy.MODERATE, FatStrategy.MODERATE),
    NutritionTemplate(DELOAD, 0.2, MAINT, 0.0, CarbStrategy.MODERATE, FatStrategy.MODERATE),
)

NUTRITION_TEMPLATES: Dict[TrainingGoal, Tuple[NutritionTemplate, ...]] = {
    TrainingGoal.HYPERTROPHY: (
        NutritionTemplate(ACC, 0.6, SURPLUS, 0.2, CarbStrategy.HIGH, FatStrategy.MODERATE),
        NutritionTemplate(INT, 0.3, SURPLUS, 0.3, CarbStrategy.CYCLING, FatStrategy.MODERATE),
        NutritionTemplate(DELOAD, 0.1, MAINT, 0.0, CarbStrategy.MODERATE, FatStrategy.MODERATE),
    ),
    TrainingGoal.STRENGTH: (
        NutritionTemplate(ACC, 0.4, SURPLUS, 0.1, CarbStrategy.HIGH, FatStrategy.MODERATE),
        NutritionTemplate(INT, 0.4, MAINT, 0.2, CarbStrategy.CYCLING, FatStrategy.MODERATE),
        NutritionTemplate(PEAK, 0.1, MAINT, 0.3, CarbStrategy.CYCLING, FatStrategy.LOW),
        NutritionTemplate(DELOAD, 0.1, MAINT, 0.0, CarbStrategy.MODERATE, FatStrategy.MODERATE),
    ),
    # Higher protein offsets protect lean mass during the deficit
    TrainingGoal.WEIGHT_LOSS: (
        NutritionTemplate(ACC, 0.7, DEFICIT, 0.4, CarbStrategy.LOW, FatStrategy.MODERATE),
        NutritionTemplate(INT, 0.2, DEFICIT, 0.5, CarbStrategy.CYCLING, FatStrategy.LOW),
        NutritionTemplate(DELOAD, 0.1, MAINT, 0.3, CarbStrategy.MODERATE, FatStrategy.MODERATE),
    ),
    TrainingGoal.POWER: GENERAL_NUTRITION,
    TrainingGoal.ENDURANCE: GENERAL_NUTRITION,
    TrainingGoal.GENERAL_FITNESS: GENERAL_NUTRITION,
}


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def get_nutrition_template(goal: TrainingGoal) -> Tuple[NutritionTemplate, ...]:
    return NUTRITION_TEMPLATES.get(goal, GENERAL_NUTRITION)


class NutritionPeriodizer:
    """Splits the program into nutrition phases keyed to the goal."""

    def allocate_weeks(self, templates: Tuple[NutritionTemplate, ...], total_weeks: int) -> List[int]:
        """Convert template fractions to whole weeks summing to ``total_weeks``.

        The first phase absorbs the rounding remainder. Non-deload phases get at
        least one week; with very short programs this floor can push the sum
        over the total by at most one week per phase.
        """
        weeks = [round_half_up(total_weeks * template.fraction) for template in templates]
        weeks[0] += total_weeks - sum(weeks)

        return [
            weeks_i if template.phase == DELOAD else max(1, weeks_i)
            for template, weeks_i in zip(templates, weeks)
        ]

    def periodize(self, goal: TrainingGoal, total_weeks: int,
                  training_level: TrainingLevel) -> List[NutritionPhase]:
        if total_weeks <= 0:
            raise InvalidPlanRequest(f"Nutrition plan needs at least one week, got {total_weeks}")

        templates = get_nutrition_template(goal)
        base_protein = BASE_PROTEIN.get(training_level, 1.8)

        phases = []
        for template, weeks in zip(templates, self.allocate_weeks(templates, total_weeks)):
            if weeks <= 0:
                continue
            phases.append(NutritionPhase(
                phase=template.phase,
                calorie_adjustment=template.calorie_adjustment,
                protein_target=round(base_protein + template.protein_offset, 1),
                carb_strategy=template.carb_strategy,
                fat_strategy=template.fat_strategy,
                duration_weeks=weeks,
            ))

        logger.debug(f"Nutrition periodization for {goal.value}: {[p.phase.value for p in phases]}")
        return phases
