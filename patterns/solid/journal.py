"""
Single responsibility: a journal keeps entries, a saver persists them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

LOG = logging.getLogger(__name__)


@dataclass
class Journal:
    title: str = ""
    _entries: List[str] = field(default_factory=list, init=False, repr=False)

    def add_entry(self, entry: str) -> None:
        self._entries.append(entry)

    @property
    def entries(self) -> List[str]:
        return list(self._entries)


class JournalSaver:
    """
    Writes a journal to disk as plain text, one entry per line.

    Storage concerns live here so :class:`Journal` only changes for reasons
    related to journaling.
    """

    @staticmethod
    def save(journal: Journal, path: str | Path) -> Path:
        target = Path(path)
        with target.open("w", encoding="utf-8") as handle:
            for entry in journal.entries:
                handle.write(f"{entry}\n")
        LOG.info("Saved %d journal entries to %s", len(journal.entries), target)
        return target
