"""Periodization planning: macro, meso and micro cycle generation."""

from .models import (
    TrainingGoal,
    TrainingLevel,
    TrainingPhase,
    PeriodizationType,
    MacroCycle,
    MesoCycle,
    MicroCycle,
    NutritionPhase,
    PlanCreationFailure,
    InvalidPlanRequest,
)
from .macrocycle import MacroCycleBuilder, create_macro_cycle

__all__ = [
    "TrainingGoal",
    "TrainingLevel",
    "TrainingPhase",
    "PeriodizationType",
    "MacroCycle",
    "MesoCycle",
    "MicroCycle",
    "NutritionPhase",
    "PlanCreationFailure",
    "InvalidPlanRequest",
    "MacroCycleBuilder",
    "create_macro_cycle",
]
