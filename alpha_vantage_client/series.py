"""Shared helpers for records that hold a list of timestamped entries."""

from __future__ import annotations

from typing import Any, List, Optional

import pandas as pd

from .errors import AlphaVantageConfigError, AlphaVantageNotEnoughEntriesError


class EntrySeriesMixin:
    """Adds lookup helpers to records exposing ``entries``.

    Every entry carries a ``time`` string in the vendor's ISO format
    (``YYYY-MM-DD`` or ``YYYY-MM-DD HH:MM:SS``), so string order is
    chronological order.
    """

    def find(self, time: str) -> Optional[Any]:
        """Return the entry stamped ``time``, or ``None``."""
        for entry in self.entries:
            if entry.time == time:
                return entry
        return None

    def latest(self) -> Optional[Any]:
        if not self.entries:
            return None
        return max(self.entries, key=lambda entry: entry.time)

    def latest_n(self, n: int) -> List[Any]:
        """Return the ``n`` most recent entries, newest first.

        Raises
        ------
        AlphaVantageConfigError
            If ``n`` is negative.
        AlphaVantageNotEnoughEntriesError
            If fewer than ``n`` entries are present.
        """
        if n < 0:
            raise AlphaVantageConfigError(f"latest_n needs a non-negative count, got {n!r}.")
        if n > len(self.entries):
            raise AlphaVantageNotEnoughEntriesError(requested=n, available=len(self.entries))
        ordered = sorted(self.entries, key=lambda entry: entry.time, reverse=True)
        return ordered[:n]

    def to_frame(self) -> pd.DataFrame:
        """Return the entries as a numeric DataFrame indexed by time (ascending)."""
        rows = [entry.model_dump(exclude={"time"}) for entry in self.entries]
        index = pd.to_datetime([entry.time for entry in self.entries])
        frame = pd.DataFrame(rows, index=index)
        frame.index.name = "time"
        frame = frame.apply(pd.to_numeric, errors="coerce")
        return frame.sort_index()
