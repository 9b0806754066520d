from feedbrain.core.constants import (
    BINGER_MIN_INTERACTIONS,
    BINGER_MIN_PACING,
    DEEP_DIVER_MIN_DURATION,
    LIVE_DOMINANCE,
    MUSIC_DOMINANCE_SHARE,
    MUSIC_KEYWORDS,
    NOCTURNAL_MIN_WEIGHT,
    NOCTURNAL_RATIO,
    PERSONA_MIN_INTERACTIONS,
    SCHOLAR_MIN_COMPLEXITY,
    SKIMMER_MAX_DURATION,
    SKIMMER_MIN_PACING,
    SPECIALIST_MAX_DIVERSITY,
)
from feedbrain.models.brain import UserBrain
from feedbrain.models.persona import Persona


class PersonaClassifier:
    """
    Maps a profile to a discrete persona label.

    Pure function of the brain: rules are evaluated in order and the first
    match wins, so content-type signals override behavioural ones.
    """

    @staticmethod
    def music_score(brain: UserBrain) -> float:
        return sum(
            weight
            for key, weight in brain.global_vector.topics.items()
            if key in MUSIC_KEYWORDS or "feat" in key
        )

    @staticmethod
    def diversity_index(brain: UserBrain) -> float:
        """Strength of the 5th topic relative to the 1st; 0 with fewer than five topics."""
        weights = sorted(brain.global_vector.topics.values(), reverse=True)
        if len(weights) < 5 or weights[0] <= 0:
            return 0.0
        return weights[4] / weights[0]

    @staticmethod
    def is_nocturnal(brain: UserBrain) -> bool:
        night = brain.night_vector.total_weight()
        morning = brain.morning_vector.total_weight()
        return night > morning * NOCTURNAL_RATIO and night > NOCTURNAL_MIN_WEIGHT

    @classmethod
    def classify(cls, brain: UserBrain) -> Persona:
        if brain.total_interactions < PERSONA_MIN_INTERACTIONS:
            return Persona.INITIATE

        v = brain.global_vector

        if cls.music_score(brain) > v.total_weight() * MUSIC_DOMINANCE_SHARE:
            return Persona.AUDIOPHILE
        if v.is_live > LIVE_DOMINANCE:
            return Persona.LIVEWIRE
        if cls.is_nocturnal(brain):
            return Persona.NIGHT_OWL
        if brain.total_interactions > BINGER_MIN_INTERACTIONS and v.pacing > BINGER_MIN_PACING:
            return Persona.BINGER
        if v.complexity > SCHOLAR_MIN_COMPLEXITY:
            return Persona.SCHOLAR
        if v.duration > DEEP_DIVER_MIN_DURATION:
            return Persona.DEEP_DIVER
        if v.duration < SKIMMER_MAX_DURATION and v.pacing > SKIMMER_MIN_PACING:
            return Persona.SKIMMER
        if cls.diversity_index(brain) < SPECIALIST_MAX_DIVERSITY:
            return Persona.SPECIALIST
        return Persona.EXPLORER


def get_persona(brain: UserBrain) -> Persona:
    return PersonaClassifier.classify(brain)
