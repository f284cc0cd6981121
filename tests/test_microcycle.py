"""Tests for week-level planning."""

import itertools
from datetime import date

from training_periodization.planning.microcycle import (
    MicrocyclePlanner,
    clamp_rir,
    clamp_scale,
)
from training_periodization.planning.models import TrainingLevel, TrainingPhase
from training_periodization.planning.recovery import (
    BASE_STRATEGIES,
    DELOAD_STRATEGIES,
    get_recovery_strategies,
)


class TestMicrocyclePlanner:
    """Test volume, intensity, RIR and fatigue derivation."""

    def setup_method(self):
        """Set up test fixtures."""
        counter = itertools.count(1)
        self.planner = MicrocyclePlanner(lambda: f"week-{next(counter)}")
        self.start = date(2024, 1, 1)

    def plan(self, phase, week_index, is_deload=False, frequency=4,
             level=TrainingLevel.INTERMEDIATE):
        return self.planner.plan_week(
            phase=phase,
            week_index=week_index,
            is_deload=is_deload,
            frequency=frequency,
            training_level=level,
            start_date=self.start,
        )

    def test_volume_accumulation_progression(self):
        """Volume accumulation adds 0.5 volume per week."""
        weeks = [self.plan(TrainingPhase.HYPERTROPHY_VOLUME, i) for i in range(4)]

        assert [week.volume for week in weeks] == [7.0, 7.5, 8.0, 8.5]
        assert all(week.intensity == 6.0 for week in weeks)
        assert all(week.target_rir == 2.0 for week in weeks)

    def test_strength_intensity_progression_clamped(self):
        """Strength adds 0.5 intensity per week and is clamped at 10."""
        assert self.plan(TrainingPhase.STRENGTH, 0).intensity == 8.0
        assert self.plan(TrainingPhase.STRENGTH, 2).intensity == 9.0
        assert self.plan(TrainingPhase.STRENGTH, 5).intensity == 10.0
        assert self.plan(TrainingPhase.STRENGTH, 5).target_rir == 1.0

    def test_peaking_forces_zero_rir(self):
        """Peaking keeps volume low, intensity high and RIR at 0."""
        week = self.plan(TrainingPhase.STRENGTH_PEAKING, 3)

        assert week.volume == 4.0
        assert week.intensity == 9.0
        assert week.target_rir == 0.0

    def test_progressive_overload_rir_never_negative(self):
        """RIR is reduced across the mesocycle but never below 0."""
        rirs = [self.plan(TrainingPhase.PROGRESSIVE_OVERLOAD, i).target_rir for i in range(6)]

        assert rirs[:4] == [2.0, 1.5, 1.0, 0.5]
        assert rirs[4] == 0.0
        assert rirs[5] == 0.0

    def test_deload_week_override(self):
        """Deload weeks use fixed low loading regardless of phase."""
        week = self.plan(TrainingPhase.STRENGTH, 3, is_deload=True, frequency=5)

        assert week.is_deload
        assert (week.volume, week.intensity, week.target_rir) == (3.0, 3.0, 4.0)
        assert week.frequency == 4
        assert week.name == "Week 4 (Deload)"
        assert week.fatigue_management.expected_fatigue == 3
        assert week.fatigue_management.readiness_threshold == 5

    def test_deload_frequency_floor(self):
        """Deload frequency is reduced by one day but never below 2."""
        assert self.plan(TrainingPhase.DELOAD, 0, is_deload=True, frequency=2).frequency == 2
        assert self.plan(TrainingPhase.DELOAD, 0, is_deload=True, frequency=3).frequency == 2

    def test_expected_fatigue_rises_weekly(self):
        """Expected fatigue is 5 + week index, capped at 10."""
        fatigue = [
            self.plan(TrainingPhase.FOUNDATION, i).fatigue_management.expected_fatigue
            for i in (0, 2, 5, 7)
        ]
        assert fatigue == [5, 7, 10, 10]
        assert self.plan(TrainingPhase.FOUNDATION, 0).fatigue_management.readiness_threshold == 7

    def test_week_dates(self):
        """A week spans seven days and can be cut short by an end limit."""
        week = self.plan(TrainingPhase.MAINTENANCE, 0)
        assert week.start_date == self.start
        assert week.duration_days == 7

        short = self.planner.plan_week(
            TrainingPhase.MAINTENANCE, 0, False, 4, TrainingLevel.BEGINNER,
            start_date=self.start, end_limit=date(2024, 1, 4),
        )
        assert short.end_date == date(2024, 1, 4)
        assert short.duration_days == 3

    def test_volume_distribution_sums_to_100(self):
        """Every week's volume split sums to 100."""
        for phase in TrainingPhase:
            week = self.plan(phase, 0)
            assert abs(sum(week.volume_distribution.values()) - 100) <= 1

    def test_clamping_helpers(self):
        """Scalars stay on the 1-10 scale and RIR stays non-negative."""
        assert clamp_scale(0.2) == 1.0
        assert clamp_scale(12.7) == 10.0
        assert clamp_scale(6.66) == 6.7
        assert clamp_rir(-1.5) == 0.0
        assert clamp_rir(1.25) in (1.2, 1.3)

    def test_ids_from_factory(self):
        """Each planned week takes a fresh id."""
        first = self.plan(TrainingPhase.STRENGTH, 0)
        second = self.plan(TrainingPhase.STRENGTH, 1)
        assert first.id != second.id


class TestRecoveryStrategies:
    """Test the level-gated recovery catalog."""

    def test_beginner_gets_baseline(self):
        """Beginners get the baseline tactics only."""
        assert get_recovery_strategies(False, TrainingLevel.BEGINNER) == list(BASE_STRATEGIES)

    def test_levels_add_tiers(self):
        """Each level above beginner adds a richer tier."""
        intermediate = get_recovery_strategies(False, TrainingLevel.INTERMEDIATE)
        advanced = get_recovery_strategies(False, TrainingLevel.ADVANCED)
        elite = get_recovery_strategies(False, TrainingLevel.ELITE)

        assert len(intermediate) == 10
        assert len(advanced) == 16
        assert elite == advanced
        assert 'foam rolling' in intermediate
        assert 'cold therapy' not in intermediate
        assert 'cold therapy' in advanced

    def test_deload_tactics_appended_without_duplicates(self):
        """Deload weeks append deload tactics, de-duplicated."""
        strategies = get_recovery_strategies(True, TrainingLevel.BEGINNER)

        assert len(strategies) == len(set(strategies))
        for tactic in DELOAD_STRATEGIES:
            assert tactic in strategies
        assert strategies.index('extra sleep') > strategies.index('hydration')
