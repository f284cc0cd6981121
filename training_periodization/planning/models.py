"""Periodization data model: enumerations and the macro/meso/micro cycle tree."""

from enum import Enum
from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, List, Optional, Tuple, Any


class TrainingGoal(Enum):
    """Primary training goals."""

    HYPERTROPHY = "hypertrophy"
    STRENGTH = "strength"
    POWER = "power"
    ENDURANCE = "endurance"
    WEIGHT_LOSS = "weight_loss"
    GENERAL_FITNESS = "general_fitness"


class TrainingLevel(Enum):
    """Training age of the athlete."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    ELITE = "elite"


class TrainingPhase(Enum):
    """Training emphasis of a mesocycle."""

    FOUNDATION = "foundation"
    ANATOMICAL_ADAPTATION = "anatomical_adaptation"
    HYPERTROPHY = "hypertrophy"
    HYPERTROPHY_VOLUME = "hypertrophy_volume"  # Volume accumulation
    HYPERTROPHY_INTENSITY = "hypertrophy_intensity"  # Intensity accumulation
    PROGRESSIVE_OVERLOAD = "progressive_overload"
    STRENGTH = "strength"
    STRENGTH_PEAKING = "strength_peaking"
    METABOLIC_PHASE = "metabolic_phase"
    INTENSITY_PHASE = "intensity_phase"
    MAINTENANCE = "maintenance"
    DELOAD = "deload"

    @property
    def is_deload(self) -> bool:
        return self is TrainingPhase.DELOAD

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").capitalize()


class ProgressionShape(Enum):
    """Shape of a volume or intensity curve across a mesocycle."""

    ASCENDING = "ascending"
    DESCENDING = "descending"
    WAVE = "wave"
    STEP = "step"
    CONSTANT = "constant"


class DeloadType(Enum):
    """How load is reduced during a deload."""

    VOLUME = "volume"
    INTENSITY = "intensity"
    FREQUENCY = "frequency"
    COMBINED = "combined"  # Volume and intensity
    ACTIVE_RECOVERY = "active_recovery"


class DeloadTiming(Enum):
    """When deloads are triggered."""

    PLANNED = "planned"  # Fixed cadence
    AUTOREGULATED = "autoregulated"  # Cadence plus fatigue-triggered deloads


class PeriodizationType(Enum):
    """Overall structuring strategy of the macrocycle."""

    LINEAR = "linear"
    UNDULATING = "undulating"
    BLOCK = "block"
    CONJUGATE = "conjugate"
    REVERSE_LINEAR = "reverse_linear"
    WAVE = "wave"


class NutritionPhaseType(Enum):
    ACCUMULATION = "accumulation"
    INTENSIFICATION = "intensification"
    PEAK = "peak"
    DELOAD = "deload"


class CalorieAdjustment(Enum):
    SURPLUS = "surplus"
    MAINTENANCE = "maintenance"
    DEFICIT = "deficit"


class CarbStrategy(Enum):
    HIGH = "high"
    MODERATE = "moderate"
    LOW = "low"
    CYCLING = "cycling"


class FatStrategy(Enum):
    HIGH = "high"
    MODERATE = "moderate"
    LOW = "low"


@dataclass(frozen=True)
class FatigueManagement:
    """Fatigue expectations for a single training week."""

    expected_fatigue: float  # 1-10
    recovery_strategies: Tuple[str, ...]
    readiness_threshold: float  # Minimum readiness (1-10) to proceed

    def to_dict(self) -> Dict:
        return {
            'expected_fatigue': self.expected_fatigue,
            'recovery_strategies': list(self.recovery_strategies),
            'readiness_threshold': self.readiness_threshold,
        }


@dataclass(frozen=True)
class MicroCycle:
    """One training week."""

    id: str
    name: str
    phase: TrainingPhase
    week_number: int  # 1-based within the mesocycle
    start_date: date
    end_date: date
    is_deload: bool
    volume: float  # 1-10
    intensity: float  # 1-10
    frequency: int  # Training days in the week
    target_rir: float
    volume_distribution: Dict[str, float]  # Muscle group -> % of weekly volume
    fatigue_management: FatigueManagement

    @property
    def duration_days(self) -> int:
        return (self.end_date - self.start_date).days

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            'id': self.id,
            'name': self.name,
            'phase': self.phase.value,
            'week_number': self.week_number,
            'start_date': self.start_date.isoformat(),
            'end_date': self.end_date.isoformat(),
            'duration': self.duration_days,
            'is_deload': self.is_deload,
            'volume': self.volume,
            'intensity': self.intensity,
            'frequency': self.frequency,
            'target_rir': self.target_rir,
            'volume_distribution': dict(self.volume_distribution),
            'fatigue_management': self.fatigue_management.to_dict(),
        }


@dataclass(frozen=True)
class MesoCycle:
    """A block of 1-6 weeks dedicated to one training phase."""

    id: str
    name: str
    description: str
    phase: TrainingPhase
    goal: TrainingGoal
    micro_cycles: Tuple[MicroCycle, ...]
    volume_progression: ProgressionShape
    intensity_progression: ProgressionShape
    includes_deload: bool
    deload_strategy: DeloadType
    deload_timing: DeloadTiming
    start_date: date
    end_date: date
    primary_focus: Tuple[str, ...]
    secondary_focus: Tuple[str, ...]
    special_techniques: Tuple[str, ...]
    progression_model: str
    adaptation_markers: Tuple[str, ...]

    @property
    def duration_weeks(self) -> int:
        return len(self.micro_cycles)

    @property
    def deload_weeks(self) -> List[MicroCycle]:
        return [week for week in self.micro_cycles if week.is_deload]

    def to_dict(self) -> Dict:
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'phase': self.phase.value,
            'goal': self.goal.value,
            'duration': self.duration_weeks,
            'micro_cycles': [week.to_dict() for week in self.micro_cycles],
            'volume_progression': self.volume_progression.value,
            'intensity_progression': self.intensity_progression.value,
            'includes_deload': self.includes_deload,
            'deload_strategy': self.deload_strategy.value,
            'deload_timing': self.deload_timing.value,
            'start_date': self.start_date.isoformat(),
            'end_date': self.end_date.isoformat(),
            'primary_focus': list(self.primary_focus),
            'secondary_focus': list(self.secondary_focus),
            'special_techniques': list(self.special_techniques),
            'progression_model': self.progression_model,
            'adaptation_markers': list(self.adaptation_markers),
        }


@dataclass(frozen=True)
class DeloadSchedule:
    """Macrocycle-wide deload policy."""

    frequency: int  # Every X weeks
    strategy: DeloadType
    timing: DeloadTiming
    auto_regulated: bool
    fatigue_threshold: Optional[float]  # Fatigue score (1-10) that triggers an unplanned deload

    def to_dict(self) -> Dict:
        return {
            'frequency': self.frequency,
            'strategy': self.strategy.value,
            'timing': self.timing.value,
            'auto_regulated': self.auto_regulated,
            'fatigue_threshold': self.fatigue_threshold,
        }


@dataclass(frozen=True)
class NutritionPhase:
    """A nutrition block coupled to the training plan."""

    phase: NutritionPhaseType
    calorie_adjustment: CalorieAdjustment
    protein_target: float  # g/kg of bodyweight
    carb_strategy: CarbStrategy
    fat_strategy: FatStrategy
    duration_weeks: int

    def to_dict(self) -> Dict:
        return {
            'phase': self.phase.value,
            'calorie_adjustment': self.calorie_adjustment.value,
            'protein_target': self.protein_target,
            'carb_strategy': self.carb_strategy.value,
            'fat_strategy': self.fat_strategy.value,
            'duration': self.duration_weeks,
        }


@dataclass(frozen=True)
class MacroCycle:
    """The full multi-month training program."""

    id: str
    user_id: str
    name: str
    description: str
    duration_months: int
    meso_cycles: Tuple[MesoCycle, ...]
    periodization_type: PeriodizationType
    primary_goal: TrainingGoal
    training_level: TrainingLevel
    training_frequency: int
    start_date: date
    end_date: date
    deload_schedule: DeloadSchedule
    created_at: datetime
    updated_at: datetime
    secondary_goals: Tuple[TrainingGoal, ...] = ()
    target_muscle_groups: Tuple[str, ...] = ()
    nutrition_phases: Tuple[NutritionPhase, ...] = ()
    is_active: bool = True

    @property
    def total_weeks(self) -> int:
        return sum(meso.duration_weeks for meso in self.meso_cycles)

    @property
    def micro_cycles(self) -> List[MicroCycle]:
        return [week for meso in self.meso_cycles for week in meso.micro_cycles]

    def to_dict(self) -> Dict[str, Any]:
        record = self.to_record()
        record['duration_weeks'] = self.total_weeks
        return record

    def to_record(self) -> Dict[str, Any]:
        """Flat field-per-column representation handed to the persistence adapter."""
        return {
            'id': self.id,
            'user_id': self.user_id,
            'name': self.name,
            'description': self.description,
            'duration': self.duration_months,
            'periodization_type': self.periodization_type.value,
            'primary_goal': self.primary_goal.value,
            'secondary_goals': [goal.value for goal in self.secondary_goals],
            'training_level': self.training_level.value,
            'start_date': self.start_date.isoformat(),
            'end_date': self.end_date.isoformat(),
            'is_active': self.is_active,
            'training_frequency': self.training_frequency,
            'target_muscle_groups': list(self.target_muscle_groups),
            'deload_schedule': self.deload_schedule.to_dict(),
            'nutrition_periodization': {
                'phases': [phase.to_dict() for phase in self.nutrition_phases]
            },
            'meso_cycles': [meso.to_dict() for meso in self.meso_cycles],
            'created_at': self.created_at.isoformat(),
            'updated_at': self.updated_at.isoformat(),
        }


@dataclass(frozen=True)
class PhaseSlot:
    """A sequenced phase block before it is expanded into weeks."""

    index: int
    phase: TrainingPhase
    weeks: int
    is_deload_block: bool


@dataclass(frozen=True)
class SaveResult:
    """Outcome of a persistence write."""

    ok: bool
    cause: Optional[str] = None


@dataclass(frozen=True)
class PlanCreationFailure:
    """Returned instead of a MacroCycle when the plan could not be stored."""

    cause: str
    macro_cycle_id: Optional[str] = None

    def __bool__(self) -> bool:
        return False


class InvalidPlanRequest(ValueError):
    """Raised when plan inputs are rejected before any planning starts."""
