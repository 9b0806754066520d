"""
Schema upgrades for the persisted brain document.

Each upgrader maps version N to N + 1. Documents written before the version
tag existed are recognised by their shape:

- v1: two vectors, ``longTerm`` and ``shortTerm``
- v2: five camelCase vectors (``morning`` ... ``global``) plus
  ``channelScores`` and ``interactions``
- v3: current snake_case layout with blocklists, preferences and onboarding
"""

from collections.abc import Callable
from typing import Any

from loguru import logger

from feedbrain.core.constants import BRAIN_SCHEMA_VERSION

Document = dict[str, Any]

_BUCKET_KEYS = ("morning", "afternoon", "evening", "night")


def detect_version(document: Document) -> int:
    version = document.get("version")
    if isinstance(version, int) and not isinstance(version, bool):
        return version
    if isinstance(version, float) and version.is_integer():
        return int(version)
    if "global_vector" in document:
        return BRAIN_SCHEMA_VERSION
    if "longTerm" in document and "global" not in document:
        return 1
    return 2


def _legacy_vector(raw: Any) -> dict[str, Any]:
    return dict(raw) if isinstance(raw, dict) else {}


def upgrade_v1_to_v2(document: Document) -> Document:
    """Promote the long-term vector to the global one; seed every time bucket from the short-term one."""
    short_term = _legacy_vector(document.get("shortTerm"))
    upgraded: Document = {
        "global": _legacy_vector(document.get("longTerm")),
        "channelScores": document.get("channelScores") or {},
        "interactions": document.get("interactions", 0),
    }
    for key in _BUCKET_KEYS:
        upgraded[key] = dict(short_term)
    return upgraded


def _vector_v2_to_v3(raw: Any) -> dict[str, Any]:
    vector = _legacy_vector(raw)
    return {
        "topics": vector.get("topics") or {},
        "duration": vector.get("duration", 0.5),
        "pacing": vector.get("pacing", 0.5),
        "complexity": vector.get("complexity", 0.5),
        "is_live": vector.get("isLive", vector.get("is_live", 0.0)),
    }


def upgrade_v2_to_v3(document: Document) -> Document:
    """Rename to the current field names and default the fields v2 did not have."""
    upgraded: Document = {
        "version": 3,
        "global_vector": _vector_v2_to_v3(document.get("global")),
        "channel_scores": document.get("channelScores") or {},
        "total_interactions": document.get("interactions", 0),
        "consecutive_skips": document.get("consecutiveSkips", 0),
        "blocked_topics": document.get("blockedTopics") or [],
        "blocked_channels": document.get("blockedChannels") or [],
        "preferred_topics": document.get("preferredTopics") or [],
        "has_completed_onboarding": bool(document.get("hasCompletedOnboarding", False)),
    }
    for key in _BUCKET_KEYS:
        upgraded[f"{key}_vector"] = _vector_v2_to_v3(document.get(key))
    return upgraded


UPGRADERS: dict[int, Callable[[Document], Document]] = {
    1: upgrade_v1_to_v2,
    2: upgrade_v2_to_v3,
}


def migrate_document(document: Document) -> Document:
    """
    Run every upgrade needed to bring a document to the current version.

    Raises:
        ValueError: if the document claims a version this build cannot read
    """
    version = detect_version(document)
    if version > BRAIN_SCHEMA_VERSION:
        raise ValueError(f"Brain document version {version} is newer than supported {BRAIN_SCHEMA_VERSION}")

    while version < BRAIN_SCHEMA_VERSION:
        upgrader = UPGRADERS.get(version)
        if upgrader is None:
            raise ValueError(f"No upgrade path from brain document version {version}")
        logger.info(f"Migrating brain document from v{version} to v{version + 1}")
        document = upgrader(document)
        version += 1

    document["version"] = BRAIN_SCHEMA_VERSION
    return document
