from enum import Enum

from pydantic import BaseModel


class Persona(str, Enum):
    INITIATE = "initiate"
    AUDIOPHILE = "audiophile"
    LIVEWIRE = "livewire"
    NIGHT_OWL = "night_owl"
    BINGER = "binger"
    SCHOLAR = "scholar"
    DEEP_DIVER = "deep_diver"
    SKIMMER = "skimmer"
    SPECIALIST = "specialist"
    EXPLORER = "explorer"

    @property
    def info(self) -> "PersonaInfo":
        return PERSONA_INFO[self]


class PersonaInfo(BaseModel):
    title: str
    description: str
    icon: str


PERSONA_INFO: dict[Persona, PersonaInfo] = {
    Persona.INITIATE: PersonaInfo(
        title="The Initiate", description="Just getting started. Your profile is still forming.", icon="🌱"
    ),
    Persona.AUDIOPHILE: PersonaInfo(
        title="The Audiophile", description="You are mostly here for music. The vibe is everything.", icon="🎧"
    ),
    Persona.LIVEWIRE: PersonaInfo(
        title="The Livewire", description="You love the raw energy of livestreams and premieres.", icon="🔴"
    ),
    Persona.NIGHT_OWL: PersonaInfo(
        title="The Night Owl", description="Most of your watching happens after midnight.", icon="🦉"
    ),
    Persona.BINGER: PersonaInfo(
        title="The Binger", description="Once you start, you can't stop. You watch in massive waves.", icon="🍿"
    ),
    Persona.SCHOLAR: PersonaInfo(
        title="The Scholar", description="High-complexity content. You are here to learn.", icon="🎓"
    ),
    Persona.DEEP_DIVER: PersonaInfo(
        title="The Deep Diver", description="You prefer long-form essays and documentaries.", icon="🤿"
    ),
    Persona.SKIMMER: PersonaInfo(
        title="The Skimmer", description="Fast-paced, short content. You want it now.", icon="⚡"
    ),
    Persona.SPECIALIST: PersonaInfo(
        title="The Specialist", description="Laser-focused on a few niches. You know what you like.", icon="🎯"
    ),
    Persona.EXPLORER: PersonaInfo(
        title="The Explorer", description="You watch a bit of everything.", icon="🧭"
    ),
}

# Appended to the strongest interest when building discovery queries
PERSONA_QUERY_SUFFIX: dict[Persona, str | None] = {
    Persona.INITIATE: None,
    Persona.AUDIOPHILE: "mix",
    Persona.LIVEWIRE: "live",
    Persona.NIGHT_OWL: "chill",
    Persona.BINGER: "series",
    Persona.SCHOLAR: "explained",
    Persona.DEEP_DIVER: "documentary",
    Persona.SKIMMER: "shorts",
    Persona.SPECIALIST: "deep dive",
    Persona.EXPLORER: "compilation",
}
