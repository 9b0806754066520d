"""
Profile System - feature extraction, similarity and online learning.

Everything in this package is synchronous and free of I/O. Locking and
persistence are the engine's job.
"""

from feedbrain.services.profile.learning import adjust_vector, apply_interaction, mark_not_interested
from feedbrain.services.profile.persona import PersonaClassifier, get_persona
from feedbrain.services.profile.similarity import cosine_similarity, title_similarity
from feedbrain.services.profile.tokenizer import Tokenizer
from feedbrain.services.profile.vectorizer import ItemVectorizer

__all__ = [
    "ItemVectorizer",
    "PersonaClassifier",
    "Tokenizer",
    "adjust_vector",
    "apply_interaction",
    "cosine_similarity",
    "get_persona",
    "mark_not_interested",
    "title_similarity",
]
