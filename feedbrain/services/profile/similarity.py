from feedbrain.core.constants import DURATION_FALLBACK_WEIGHT
from feedbrain.models.content import ContentVector
from feedbrain.services.profile.tokenizer import Tokenizer


def jaccard_similarity(set_a: set[str], set_b: set[str]) -> float:
    """Calculate Jaccard similarity between two sets."""
    if not set_a or not set_b:
        return 0.0

    intersection = len(set_a & set_b)
    union = len(set_a | set_b)
    return intersection / union if union > 0 else 0.0


def title_words(title: str) -> set[str]:
    """Whitespace-separated words, edge punctuation trimmed; contractions stay whole."""
    words = (Tokenizer.strip_edges(part) for part in title.lower().split())
    return {w for w in words if len(w) > 2}


def title_similarity(title_a: str, title_b: str) -> float:
    """Word-level Jaccard similarity of two titles."""
    return jaccard_similarity(title_words(title_a), title_words(title_b))


def cosine_similarity(a: ContentVector, b: ContentVector) -> float:
    """
    Cosine similarity of the topic maps.

    When the maps share no key, falls back to a weak duration-only proxy so
    that cold profiles still produce a usable ordering.
    """
    smaller, larger = (a.topics, b.topics) if len(a.topics) <= len(b.topics) else (b.topics, a.topics)

    dot_product = 0.0
    has_overlap = False
    for key, weight in smaller.items():
        other = larger.get(key)
        if other is None:
            continue
        has_overlap = True
        dot_product += weight * other

    if not has_overlap:
        return DURATION_FALLBACK_WEIGHT * (1.0 - abs(a.duration - b.duration))

    mag_a = a.magnitude()
    mag_b = b.magnitude()
    if mag_a <= 0 or mag_b <= 0:
        return 0.0
    return dot_product / (mag_a * mag_b)
