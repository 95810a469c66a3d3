"""
Best-score persistence.

Both stores are best-effort: a missing or corrupt file reads as 0 and write
failures are logged, never raised.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class BestScoreStore:
    """Keeps the best score as plain text in a single file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> int:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return 0
        except OSError as e:
            logger.warning(f"Could not read best score from {self.path}: {e}")
            return 0
        try:
            value = int(text.strip() or "0")
        except ValueError:
            logger.warning(f"Ignoring unparseable best score in {self.path}: {text[:20]!r}")
            return 0
        return max(0, value)

    def save(self, score: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(str(score), encoding="utf-8")
        except OSError as e:
            logger.warning(f"Could not save best score to {self.path}: {e}")


class MemoryBestScoreStore:
    def __init__(self, value: int = 0):
        self.value = value

    def load(self) -> int:
        return self.value

    def save(self, score: int) -> None:
        self.value = score
