"""Persistence for the calculator's durable preferences."""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger("scicalc.storage")


class PersistedPreferences(BaseModel):
    """The only state that survives a restart."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    memory: float
    dark_mode: bool = Field(alias="isDarkMode")


class StateStore:
    """Reads and writes preferences as a small JSON document.

    Both directions are best effort: failures are logged and reported as
    "nothing loaded" / "not saved", never raised.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> PersistedPreferences | None:
        """Load saved preferences, or None when absent or unreadable."""
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return PersistedPreferences.model_validate(data)
        except (OSError, ValueError, ValidationError) as e:
            logger.warning(f"Error loading calculator state from {self.path}: {e}")
            return None

    def save(self, preferences: PersistedPreferences) -> bool:
        """Write preferences; returns False if the write failed."""
        try:
            # Infinity/NaN are not JSON; refuse them rather than write an unreadable record
            document = json.dumps(preferences.model_dump(by_alias=True), allow_nan=False)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(document, encoding="utf-8")
        except (OSError, ValueError) as e:
            logger.warning(f"Error saving calculator state to {self.path}: {e}")
            return False
        logger.debug(f"Saved calculator state to {self.path}")
        return True
