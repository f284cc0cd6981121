"""Tests for the per-phase lookup tables."""

from training_periodization.planning.descriptors import (
    PHASE_DESCRIPTORS,
    describe_phase,
    get_special_techniques,
)
from training_periodization.planning.mesocycle import PROGRESSION_SHAPES
from training_periodization.planning.microcycle import PHASE_LOADING
from training_periodization.planning.models import TrainingGoal, TrainingLevel, TrainingPhase
from training_periodization.planning.sequencer import GENERAL_TEMPLATE, PHASE_TEMPLATES
from training_periodization.planning.volume import (
    MUSCLE_GROUPS,
    VOLUME_DISTRIBUTIONS,
    get_volume_distribution,
)


class TestLookupTables:
    """Every phase is covered by every table."""

    def test_tables_cover_all_phases(self):
        """No phase falls through to a balanced default."""
        for phase in TrainingPhase:
            assert phase in VOLUME_DISTRIBUTIONS, phase
            assert phase in PHASE_LOADING, phase
            assert phase in PROGRESSION_SHAPES, phase
            assert phase in PHASE_DESCRIPTORS, phase

    def test_templates_use_known_phases(self):
        """Templates only reference phases from the tables."""
        for template in list(PHASE_TEMPLATES.values()) + [GENERAL_TEMPLATE]:
            for phase in template:
                assert phase in VOLUME_DISTRIBUTIONS

    def test_distributions_sum_to_100(self):
        """Volume splits cover every muscle group and sum to 100."""
        for phase in TrainingPhase:
            distribution = get_volume_distribution(phase)
            assert set(distribution) == set(MUSCLE_GROUPS)
            assert sum(distribution.values()) == 100

    def test_distribution_is_a_copy(self):
        """Callers cannot mutate the shared table."""
        distribution = get_volume_distribution(TrainingPhase.MAINTENANCE)
        distribution['legs'] = 0
        assert get_volume_distribution(TrainingPhase.MAINTENANCE)['legs'] == 25

    def test_descriptions_name_the_goal(self):
        """Goal placeholders are filled in."""
        for phase in TrainingPhase:
            text = describe_phase(phase, TrainingGoal.WEIGHT_LOSS)
            assert text
            assert "{goal}" not in text


class TestSpecialTechniques:
    """Test the level-capped technique list."""

    def test_caps_by_level(self):
        """Beginners get 3 techniques at most, elite 10."""
        caps = {
            TrainingLevel.BEGINNER: 3,
            TrainingLevel.INTERMEDIATE: 5,
            TrainingLevel.ADVANCED: 7,
            TrainingLevel.ELITE: 10,
        }
        for phase in TrainingPhase:
            for level, cap in caps.items():
                techniques = get_special_techniques(phase, level)
                assert len(techniques) <= cap
                assert len(techniques) == len(set(techniques))

    def test_beginner_gets_basics(self):
        """Beginners stick to the base techniques."""
        techniques = get_special_techniques(TrainingPhase.STRENGTH, TrainingLevel.BEGINNER)
        assert techniques == ['progressive overload', 'proper warm-up', 'controlled eccentrics']
