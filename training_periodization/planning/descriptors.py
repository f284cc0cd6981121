"""Narrative descriptors for each training phase.

Each phase maps to a description, focus tags, adaptation markers, the
phase-specific special techniques and a progression model that depends on
the athlete's training level.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .models import TrainingGoal, TrainingLevel, TrainingPhase


@dataclass(frozen=True)
class PhaseDescriptor:
    """Narrative fields attached to a mesocycle."""

    description: str
    primary_focus: Tuple[str, ...]
    secondary_focus: Tuple[str, ...]
    adaptation_markers: Tuple[str, ...]
    techniques: Tuple[str, ...]
    # (beginner, intermediate, advanced and elite)
    progression_models: Tuple[str, str, str]

    def progression_model(self, training_level: TrainingLevel) -> str:
        if training_level == TrainingLevel.BEGINNER:
            return self.progression_models[0]
        if training_level == TrainingLevel.INTERMEDIATE:
            return self.progression_models[1]
        return self.progression_models[2]


def _same_for_all(model: str) -> Tuple[str, str, str]:
    return (model, model, model)


# Used for any phase missing from PHASE_DESCRIPTORS; {goal} is filled in
BALANCED_DESCRIPTOR = PhaseDescriptor(
    description="Balanced training phase addressing multiple fitness components "
                "with a primary focus on {goal}.",
    primary_focus=('general fitness', 'balanced development'),
    secondary_focus=('balanced development', 'functional strength', 'overall fitness'),
    adaptation_markers=(
        'Improved overall performance',
        'Better recovery capacity',
        'Increased work capacity',
        'Improved technique',
        'Better mind-muscle connection',
    ),
    techniques=(),
    progression_models=_same_for_all('Balanced progression across all variables'),
)

PHASE_DESCRIPTORS: Dict[TrainingPhase, PhaseDescriptor] = {
    TrainingPhase.FOUNDATION: PhaseDescriptor(
        description="Foundation building phase emphasizing technique development, "
                    "structural balance, and work capacity.",
        primary_focus=('technique development', 'work capacity', 'muscle balance'),
        secondary_focus=('movement patterns', 'structural balance', 'injury prevention'),
        adaptation_markers=(
            'Improved technique across exercises',
            'Better movement patterns',
            'Reduced compensatory patterns',
            'Improved mind-muscle connection',
            'Better structural balance',
        ),
        techniques=('tempo training', 'paused reps', 'isometric holds', 'mind-muscle connection'),
        progression_models=_same_for_all(
            'Technique-focused progression with gradual volume increase'
        ),
    ),
    TrainingPhase.ANATOMICAL_ADAPTATION: PhaseDescriptor(
        description="Anatomical adaptation phase preparing tendons, ligaments and "
                    "stabilizers for the heavier blocks that follow.",
        primary_focus=('connective tissue resilience', 'work capacity', 'movement quality'),
        secondary_focus=('muscle balance', 'core stability', 'injury prevention'),
        adaptation_markers=(
            'Reduced soreness after sessions',
            'Better movement patterns',
            'Improved work capacity',
            'Stable joints under moderate loads',
            'Consistent session completion',
        ),
        techniques=('circuit training', 'tempo training', 'unilateral work', 'isometric holds'),
        progression_models=(
            'Linear progression with focus on adding reps',
            'Double progression (reps then weight)',
            'Volume-led progression with fixed intensity',
        ),
    ),
    TrainingPhase.HYPERTROPHY: PhaseDescriptor(
        description="Hypertrophy phase building muscle cross-section through moderate "
                    "loads and accumulated volume.",
        primary_focus=('muscle growth', 'volume accumulation', 'work capacity'),
        secondary_focus=('strength foundation', 'metabolic conditioning', 'recovery capacity'),
        adaptation_markers=(
            'Increased muscle fullness',
            'Better pumps during training',
            'Improved work capacity',
            'Strength increases in the 8-12 rep range',
            'Ability to complete more total sets',
        ),
        techniques=('supersets', 'drop sets', 'time under tension', 'high-rep finishers'),
        progression_models=(
            'Linear progression with focus on adding reps',
            'Double progression (reps then weight)',
            'Undulating periodization with volume focus',
        ),
    ),
    TrainingPhase.HYPERTROPHY_VOLUME: PhaseDescriptor(
        description="High volume training phase focused on muscle growth through "
                    "accumulated training volume. Emphasizes time under tension and "
                    "metabolic stress.",
        primary_focus=('muscle growth', 'volume accumulation', 'time under tension'),
        secondary_focus=('strength foundation', 'metabolic conditioning', 'recovery capacity'),
        adaptation_markers=(
            'Increased muscle fullness',
            'Better pumps during training',
            'Improved work capacity',
            'Reduced soreness after similar volume',
            'Ability to complete more total sets',
        ),
        techniques=('supersets', 'giant sets', 'time under tension', 'high-rep finishers'),
        progression_models=(
            'Linear progression with focus on adding reps',
            'Double progression (reps then weight)',
            'Undulating periodization with volume focus',
        ),
    ),
    TrainingPhase.HYPERTROPHY_INTENSITY: PhaseDescriptor(
        description="Intensity-focused hypertrophy phase emphasizing mechanical tension "
                    "and progressive overload for muscle growth.",
        primary_focus=('muscle growth', 'mechanical tension', 'progressive overload'),
        secondary_focus=('strength development', 'neural efficiency', 'muscle density'),
        adaptation_markers=(
            'Strength increases at same rep ranges',
            'Improved mind-muscle connection',
            'Better muscle density and hardness',
            'Ability to generate more tension',
            'Improved recovery between sets',
        ),
        techniques=('drop sets', 'rest-pause', 'mechanical drop sets', 'partial reps'),
        progression_models=(
            'Linear progression with focus on adding weight',
            'Double progression (weight then reps)',
            'Undulating periodization with intensity focus',
        ),
    ),
    TrainingPhase.PROGRESSIVE_OVERLOAD: PhaseDescriptor(
        description="Systematic progression phase focused on gradually increasing "
                    "training demands for continued adaptation.",
        primary_focus=('systematic progression', 'adaptation', 'performance improvement'),
        secondary_focus=('technique consistency', 'recovery optimization', 'mental focus'),
        adaptation_markers=(
            'Consistent performance improvements',
            'Better recovery between sessions',
            'Improved work capacity',
            'Strength increases across rep ranges',
            'Reduced perceived effort at same loads',
        ),
        techniques=('double progression', 'micro-loading', 'density training', 'volume landmarks'),
        progression_models=(
            'Linear progression',
            'Double progression',
            'Triple progression (reps, sets, weight)',
        ),
    ),
    TrainingPhase.STRENGTH: PhaseDescriptor(
        description="Strength development phase focusing on neural adaptations and "
                    "force production capabilities.",
        primary_focus=('neural efficiency', 'force production', 'strength development'),
        secondary_focus=('hypertrophy maintenance', 'technique refinement', 'joint health'),
        adaptation_markers=(
            'Increased 1-5 rep maxes',
            'Improved bar speed with submaximal weights',
            'Better technique under heavy loads',
            'Reduced perceived effort at same loads',
            'Improved neural efficiency',
        ),
        techniques=('cluster sets', 'wave loading', 'accommodating resistance', 'heavy negatives'),
        progression_models=(
            'Linear progression with fixed sets and reps',
            'Wave loading (3-2-1 rep scheme)',
            'Block periodization with intensity emphasis',
        ),
    ),
    TrainingPhase.STRENGTH_PEAKING: PhaseDescriptor(
        description="Peaking phase designed to maximize strength expression and "
                    "prepare for testing maximal strength.",
        primary_focus=('maximal strength', 'neural drive', 'technique perfection'),
        secondary_focus=('neural efficiency', 'psychological preparation', 'technique mastery'),
        adaptation_markers=(
            'New 1RM personal records',
            'Improved performance consistency',
            'Better psychological readiness',
            'Reduced perceived effort at near-maximal loads',
            'Improved technique under maximal loads',
        ),
        techniques=('post-activation potentiation', 'contrast method', 'wave loading',
                    'heavy singles'),
        progression_models=_same_for_all('Intensity-based progression with reduced volume'),
    ),
    TrainingPhase.METABOLIC_PHASE: PhaseDescriptor(
        description="Metabolic conditioning phase focused on calorie expenditure, work "
                    "capacity, and cardiovascular health.",
        primary_focus=('calorie expenditure', 'metabolic stress', 'conditioning'),
        secondary_focus=('muscle preservation', 'cardiovascular health', 'recovery enhancement'),
        adaptation_markers=(
            'Improved work capacity',
            'Reduced rest times needed',
            'Better recovery between sessions',
            'Increased caloric expenditure',
            'Improved cardiovascular markers',
        ),
        techniques=('circuit training', 'EMOM', 'AMRAP', 'tabata intervals'),
        progression_models=_same_for_all('Density-based progression (more work in less time)'),
    ),
    TrainingPhase.INTENSITY_PHASE: PhaseDescriptor(
        description="Intensity phase preserving muscle and strength with heavier loads "
                    "while total volume stays moderate.",
        primary_focus=('muscle preservation', 'mechanical tension', 'strength retention'),
        secondary_focus=('neural efficiency', 'metabolic conditioning', 'recovery management'),
        adaptation_markers=(
            'Strength maintained or increasing',
            'Stable performance under fatigue',
            'Better muscle density and hardness',
            'Improved recovery between sets',
            'Consistent bar speed at working weights',
        ),
        techniques=('rest-pause', 'cluster sets', 'heavy negatives', 'density training'),
        progression_models=(
            'Linear progression with focus on adding weight',
            'Double progression (weight then reps)',
            'Undulating periodization with intensity focus',
        ),
    ),
    TrainingPhase.MAINTENANCE: PhaseDescriptor(
        description="Maintenance phase holding recent adaptations with moderate volume "
                    "and intensity.",
        primary_focus=('adaptation retention', 'consistency', 'movement quality'),
        secondary_focus=('recovery capacity', 'joint health', 'balanced development'),
        adaptation_markers=(
            'Stable strength across main lifts',
            'Consistent session quality',
            'Low residual fatigue',
            'Maintained body composition',
            'Good motivation and readiness',
        ),
        techniques=('autoregulated loading', 'skill practice', 'mobility training'),
        progression_models=_same_for_all('Maintenance loading with autoregulated effort'),
    ),
    TrainingPhase.DELOAD: PhaseDescriptor(
        description="Recovery-focused phase with reduced training demands to allow for "
                    "supercompensation and fatigue dissipation.",
        primary_focus=('recovery', 'supercompensation', 'fatigue reduction'),
        secondary_focus=('technique refinement', 'mental recovery', 'injury prevention'),
        adaptation_markers=(
            'Reduced overall fatigue',
            'Improved motivation and readiness',
            'Reduced joint pain/discomfort',
            'Improved sleep quality',
            'Mental refreshment',
        ),
        techniques=('light technique work', 'active recovery', 'mobility training',
                    'skill practice'),
        progression_models=_same_for_all(
            'Reduced volume and/or intensity with focus on recovery'
        ),
    ),
}

BASE_TECHNIQUES = ('progressive overload', 'proper warm-up', 'controlled eccentrics')

LEVEL_TECHNIQUES: Dict[TrainingLevel, Tuple[str, ...]] = {
    TrainingLevel.BEGINNER: (),
    TrainingLevel.INTERMEDIATE: ('supersets', 'drop sets', 'tempo training'),
    TrainingLevel.ADVANCED: ('rest-pause', 'mechanical drop sets', 'partial reps', 'cluster sets'),
    TrainingLevel.ELITE: ('intra-set stretching', 'accommodating resistance', 'pre-exhaustion',
                          'post-activation potentiation'),
}

MAX_TECHNIQUES: Dict[TrainingLevel, int] = {
    TrainingLevel.BEGINNER: 3,
    TrainingLevel.INTERMEDIATE: 5,
    TrainingLevel.ADVANCED: 7,
    TrainingLevel.ELITE: 10,
}


def get_phase_descriptor(phase: TrainingPhase) -> PhaseDescriptor:
    return PHASE_DESCRIPTORS.get(phase, BALANCED_DESCRIPTOR)


def describe_phase(phase: TrainingPhase, goal: TrainingGoal) -> str:
    return get_phase_descriptor(phase).description.format(goal=goal.value.replace("_", " "))


def get_special_techniques(phase: TrainingPhase, training_level: TrainingLevel) -> List[str]:
    """Base, level and phase techniques, de-duplicated and capped by training level."""
    techniques = list(BASE_TECHNIQUES)
    techniques.extend(LEVEL_TECHNIQUES.get(training_level, ()))
    techniques.extend(get_phase_descriptor(phase).techniques)

    limit = MAX_TECHNIQUES.get(training_level, 5)
    return list(dict.fromkeys(techniques))[:limit]
