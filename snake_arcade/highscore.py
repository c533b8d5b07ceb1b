"""File-backed high score persistence."""

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class HighScoreStore:
    def __init__(self, path):
        self.path = Path(path)

    def load(self) -> int:
        """Return the stored high score, or 0 if there is none usable."""
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as e:
            logger.warning("Unable to read high score from %s: %s", self.path, e)
            return 0

        value = data.get("high_score") if isinstance(data, dict) else None
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            logger.warning("Ignoring invalid high score in %s: %r", self.path, value)
            return 0
        return value

    def save(self, value: int) -> None:
        """Write ``value`` atomically.

        Runs synchronously on the caller's thread; as a high score listener it
        blocks the event loop for one small file write at game over.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(json.dumps({"high_score": value}), encoding="utf-8")
        os.replace(tmp, self.path)
        logger.info("saved high score %d to %s", value, self.path)
