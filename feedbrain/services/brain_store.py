import json
import os
import tempfile
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from feedbrain.core.constants import BRAIN_SCHEMA_VERSION
from feedbrain.models.brain import UserBrain
from feedbrain.services.migration import migrate_document


class BrainStore:
    """
    File-backed store for the user brain.

    Failures never propagate: a failed load yields a fresh brain, a failed save
    returns False and the in-memory brain stays authoritative until the next
    successful write.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def export_document(self, brain: UserBrain) -> str:
        """Serialize a brain to the current versioned JSON document."""
        document = {"version": BRAIN_SCHEMA_VERSION, **brain.model_dump(mode="json")}
        return json.dumps(document, ensure_ascii=False, sort_keys=True)

    def import_document(self, raw: str) -> UserBrain | None:
        """
        Parse a document of any known version into a brain.

        Returns:
            UserBrain, or None if the document cannot be read
        """
        try:
            document = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Failed to decode brain document: {e}")
            return None

        if not isinstance(document, dict):
            logger.warning(f"Brain document must be a JSON object, got {type(document).__name__}")
            return None

        try:
            return UserBrain.model_validate(migrate_document(document))
        except (ValidationError, ValueError, TypeError) as e:
            logger.warning(f"Failed to migrate brain document: {e}")
            return None

    def load(self) -> UserBrain:
        if not self.path.exists():
            logger.info(f"No brain found at {self.path}, starting fresh")
            return UserBrain()

        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read brain from {self.path}: {e}")
            return UserBrain()

        brain = self.import_document(raw)
        if brain is None:
            logger.error(f"Brain at {self.path} is unreadable, starting fresh")
            return UserBrain()

        logger.info(f"Loaded brain with {brain.total_interactions} interactions from {self.path}")
        return brain

    def save(self, brain: UserBrain) -> bool:
        """Atomically write the brain. Returns True on success."""
        tmp_name: str | None = None
        try:
            payload = self.export_document(brain)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=".brain-", suffix=".tmp", dir=self.path.parent)
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, self.path)
            tmp_name = None
            logger.debug(f"Saved brain to {self.path}")
            return True
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Failed to save brain to {self.path}: {e}")
            return False
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError as e:
                    logger.debug(f"Silent failure removing temp brain file {tmp_name}: {e}")
