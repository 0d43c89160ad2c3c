"""Single-integer high score persistence."""

import logging
from pathlib import Path
from typing import Protocol, Union

from .config import HIGHSCORE_FILE

logger = logging.getLogger(__name__)


class HighScoreStore(Protocol):
    def load(self) -> int: ...
    def save(self, value: int) -> None: ...


class MemoryHighScoreStore:
    """Keeps the high score in process; used headless and in tests"""

    def __init__(self, value: int = 0):
        self.value = value
        self.saves = 0

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.value = value
        self.saves += 1


class FileHighScoreStore:
    """High score as a plain-text integer file"""

    def __init__(self, path: Union[str, Path] = HIGHSCORE_FILE):
        self.path = Path(path)

    def load(self) -> int:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return 0
        except OSError as e:
            logger.warning("Could not read high score from %s: %s", self.path, e)
            return 0

        try:
            value = int(text.strip() or "0")
        except ValueError:
            logger.warning("Ignoring corrupt high score file %s", self.path)
            return 0
        return max(0, value)

    def save(self, value: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(str(int(value)), encoding="utf-8")
        except OSError as e:
            logger.error("Could not save high score to %s: %s", self.path, e)
            return
        logger.info("High score %d saved to %s", value, self.path)
