"""Tests for nutrition periodization."""

import pytest
from training_periodization.planning.models import (
    CalorieAdjustment,
    InvalidPlanRequest,
    NutritionPhaseType,
    TrainingGoal,
    TrainingLevel,
)
from training_periodization.planning.nutrition import (
    NUTRITION_TEMPLATES,
    NutritionPeriodizer,
    round_half_up,
)


class TestNutritionPeriodizer:
    """Test nutrition phase allocation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.periodizer = NutritionPeriodizer()

    def test_hypertrophy_split(self):
        """Hypertrophy splits 60/30/10 into whole weeks."""
        phases = self.periodizer.periodize(TrainingGoal.HYPERTROPHY, 13, TrainingLevel.BEGINNER)

        assert [p.phase for p in phases] == [
            NutritionPhaseType.ACCUMULATION,
            NutritionPhaseType.INTENSIFICATION,
            NutritionPhaseType.DELOAD,
        ]
        assert [p.duration_weeks for p in phases] == [8, 4, 1]
        assert [p.protein_target for p in phases] == [1.8, 1.9, 1.6]
        assert phases[0].calorie_adjustment == CalorieAdjustment.SURPLUS
        assert phases[2].calorie_adjustment == CalorieAdjustment.MAINTENANCE

    def test_weight_loss_protein(self):
        """Fat loss keeps protein high through the deficit."""
        phases = self.periodizer.periodize(TrainingGoal.WEIGHT_LOSS, 26, TrainingLevel.ADVANCED)

        assert [p.protein_target for p in phases] == [2.4, 2.5, 2.3]
        assert phases[0].calorie_adjustment == CalorieAdjustment.DEFICIT

    def test_strength_has_peak(self):
        """Strength adds a peak phase before the deload."""
        phases = self.periodizer.periodize(TrainingGoal.STRENGTH, 26, TrainingLevel.INTERMEDIATE)
        assert [p.phase for p in phases][-2:] == [NutritionPhaseType.PEAK, NutritionPhaseType.DELOAD]

    def test_weeks_cover_program(self):
        """Phase weeks add up to the program length within one week per phase."""
        for goal in TrainingGoal:
            for total in range(1, 60):
                phases = self.periodizer.periodize(goal, total, TrainingLevel.INTERMEDIATE)
                assert abs(sum(p.duration_weeks for p in phases) - total) <= len(phases)
                assert all(p.duration_weeks >= 1 for p in phases)

    def test_empty_deload_dropped(self):
        """A deload phase rounding to zero weeks is dropped."""
        phases = self.periodizer.periodize(TrainingGoal.GENERAL_FITNESS, 2, TrainingLevel.BEGINNER)

        assert len(phases) == 1
        assert phases[0].phase == NutritionPhaseType.ACCUMULATION
        assert phases[0].duration_weeks == 2

    def test_every_goal_has_template(self):
        """Each goal maps to a template whose fractions sum to 1."""
        for goal in TrainingGoal:
            assert goal in NUTRITION_TEMPLATES
            assert sum(t.fraction for t in NUTRITION_TEMPLATES[goal]) == pytest.approx(1.0)

    def test_rounding_half_up(self):
        """Halves round up."""
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(2.49) == 2

    def test_rejects_empty_program(self):
        """Zero weeks cannot be periodized."""
        with pytest.raises(InvalidPlanRequest):
            self.periodizer.periodize(TrainingGoal.STRENGTH, 0, TrainingLevel.BEGINNER)
