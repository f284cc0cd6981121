"""Macrocycle construction: the entry point of the periodization pipeline.

Composes the phase sequencer, mesocycle planner, nutrition periodizer and
deload policy into a single MacroCycle, then hands its flat record to the
persistence adapter.
"""

import logging
import uuid
from datetime import date, datetime
from typing import Callable, Iterable, Optional, Union

from ..config import config
from .dates import add_months, parse_date, weeks_between
from .deload import DeloadPolicy
from .mesocycle import MesocyclePlanner
from .models import (
    InvalidPlanRequest,
    MacroCycle,
    PeriodizationType,
    PlanCreationFailure,
    TrainingGoal,
    TrainingLevel,
)
from .nutrition import NutritionPeriodizer
from .sequencer import PhaseSequencer

logger = logging.getLogger(__name__)


def default_id_factory() -> str:
    return str(uuid.uuid4())


def _coerce_enum(enum_cls, value, field_name: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise InvalidPlanRequest(f"Unknown {field_name} '{value}'. Expected one of: {allowed}")


class MacroCycleBuilder:
    """Builds and stores periodized macrocycles.

    Identifiers and timestamps come from the injected ``id_factory`` and
    ``clock`` so that repeated builds can be compared structurally.
    """

    def __init__(
        self,
        store=None,
        id_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
        fatigue_threshold: Optional[float] = None,
    ):
        self._store = store
        self.id_factory = id_factory or default_id_factory
        self.clock = clock or datetime.utcnow
        self.sequencer = PhaseSequencer()
        self.deload_policy = DeloadPolicy(fatigue_threshold)
        self.nutrition = NutritionPeriodizer()

    @property
    def store(self):
        if self._store is None:
            from ..db.store import MacroCycleStore
            self._store = MacroCycleStore()
        return self._store

    def build(
        self,
        user_id: str,
        name: str,
        primary_goal: Union[TrainingGoal, str],
        training_level: Union[TrainingLevel, str],
        frequency: int,
        duration_months: int,
        start_date: Union[date, str],
        secondary_goals: Optional[Iterable[Union[TrainingGoal, str]]] = None,
        periodization_type: Optional[Union[PeriodizationType, str]] = None,
        target_muscle_groups: Optional[Iterable[str]] = None,
        include_nutrition_periodization: bool = True,
    ) -> MacroCycle:
        """Plan a complete macrocycle without persisting it.

        Raises:
            InvalidPlanRequest: if any input is out of its domain
        """
        goal = _coerce_enum(TrainingGoal, primary_goal, "goal")
        level = _coerce_enum(TrainingLevel, training_level, "training level")
        style = _coerce_enum(
            PeriodizationType,
            periodization_type or config.DEFAULT_PERIODIZATION_TYPE,
            "periodization type",
        )
        secondary = tuple(
            _coerce_enum(TrainingGoal, g, "secondary goal") for g in (secondary_goals or ())
        )
        muscles = []
        for muscle in target_muscle_groups or ():
            if not isinstance(muscle, str):
                raise InvalidPlanRequest(f"Target muscle groups must be names, got {muscle!r}")
            if muscle.strip():
                muscles.append(muscle.strip().lower())

        if not isinstance(user_id, str) or not user_id.strip():
            raise InvalidPlanRequest(f"A user id is required, got {user_id!r}")
        if not isinstance(name, str) or not name.strip():
            raise InvalidPlanRequest(f"A plan name is required, got {name!r}")
        if isinstance(frequency, bool) or not isinstance(frequency, int):
            raise InvalidPlanRequest(f"Training frequency must be an integer, got {frequency!r}")
        if not config.MIN_TRAINING_FREQUENCY <= frequency <= config.MAX_TRAINING_FREQUENCY:
            raise InvalidPlanRequest(
                f"Training frequency must be {config.MIN_TRAINING_FREQUENCY}-"
                f"{config.MAX_TRAINING_FREQUENCY} days per week, got {frequency}"
            )
        if isinstance(duration_months, bool) or not isinstance(duration_months, int) \
                or duration_months <= 0:
            raise InvalidPlanRequest(f"Duration must be a positive number of months, got {duration_months!r}")
        try:
            start = parse_date(start_date)
        except (TypeError, ValueError):
            raise InvalidPlanRequest(f"Invalid start date {start_date!r}, expected YYYY-MM-DD")

        end = add_months(start, duration_months)
        total_weeks = weeks_between(start, end)

        macro_cycle_id = self.id_factory()
        deload_schedule = self.deload_policy.build_schedule(level, goal)
        slots = self.sequencer.sequence(goal, level, total_weeks)

        meso_cycles = MesocyclePlanner(self.id_factory).plan_all(
            slots,
            start_date=start,
            frequency=frequency,
            training_level=level,
            goal=goal,
            deload_cadence=deload_schedule.frequency,
            end_limit=end,
        )

        nutrition_phases = ()
        if include_nutrition_periodization:
            nutrition_phases = tuple(self.nutrition.periodize(goal, total_weeks, level))

        now = self.clock()
        macro_cycle = MacroCycle(
            id=macro_cycle_id,
            user_id=user_id.strip(),
            name=name.strip(),
            description=f"{duration_months}-month {goal.value.replace('_', ' ')} program "
                        f"for {level.value} level",
            duration_months=duration_months,
            meso_cycles=tuple(meso_cycles),
            periodization_type=style,
            primary_goal=goal,
            training_level=level,
            training_frequency=frequency,
            start_date=start,
            end_date=end,
            deload_schedule=deload_schedule,
            created_at=now,
            updated_at=now,
            secondary_goals=secondary,
            target_muscle_groups=tuple(muscles),
            nutrition_phases=nutrition_phases,
        )

        deload_weeks = sum(len(meso.deload_weeks) for meso in meso_cycles)
        logger.info(
            f"Built macrocycle {macro_cycle.id}: {len(meso_cycles)} mesocycles, "
            f"{total_weeks} weeks ({deload_weeks} deload), {len(nutrition_phases)} nutrition phases"
        )
        return macro_cycle

    def create_macro_cycle(
        self,
        user_id: str,
        name: str,
        primary_goal: Union[TrainingGoal, str],
        training_level: Union[TrainingLevel, str],
        frequency: int,
        duration_months: int,
        start_date: Union[date, str],
        secondary_goals: Optional[Iterable[Union[TrainingGoal, str]]] = None,
        periodization_type: Optional[Union[PeriodizationType, str]] = None,
        target_muscle_groups: Optional[Iterable[str]] = None,
        include_nutrition_periodization: bool = True,
    ) -> Union[MacroCycle, PlanCreationFailure]:
        """Build a macrocycle and store it.

        Returns:
            The stored MacroCycle, or PlanCreationFailure if the store rejected it

        Raises:
            InvalidPlanRequest: if any input is out of its domain
        """
        macro_cycle = self.build(
            user_id,
            name,
            primary_goal,
            training_level,
            frequency,
            duration_months,
            start_date,
            secondary_goals=secondary_goals,
            periodization_type=periodization_type,
            target_muscle_groups=target_muscle_groups,
            include_nutrition_periodization=include_nutrition_periodization,
        )

        result = self.store.save(macro_cycle.to_record())
        if not result.ok:
            logger.error(f"Error creating macrocycle {macro_cycle.id}: {result.cause}")
            return PlanCreationFailure(cause=result.cause or "unknown error",
                                       macro_cycle_id=macro_cycle.id)

        return macro_cycle


def create_macro_cycle(
    user_id: str,
    name: str,
    primary_goal: Union[TrainingGoal, str],
    training_level: Union[TrainingLevel, str],
    frequency: int,
    duration_months: int,
    start_date: Union[date, str],
    secondary_goals: Optional[Iterable[Union[TrainingGoal, str]]] = None,
    periodization_type: Optional[Union[PeriodizationType, str]] = None,
    target_muscle_groups: Optional[Iterable[str]] = None,
    include_nutrition_periodization: bool = True,
    store=None,
) -> Union[MacroCycle, PlanCreationFailure]:
    """Create and store a macrocycle with the default identifier source and clock."""
    return MacroCycleBuilder(store=store).create_macro_cycle(
        user_id,
        name,
        primary_goal,
        training_level,
        frequency,
        duration_months,
        start_date,
        secondary_goals=secondary_goals,
        periodization_type=periodization_type,
        target_muscle_groups=target_muscle_groups,
        include_nutrition_periodization=include_nutrition_periodization,
    )
