# app/domain/policies.py
from __future__ import annotations

from datetime import datetime

RELEVANCE_THRESHOLD = 40


def is_relevant(score: int) -> bool:
    return score >= RELEVANCE_THRESHOLD


def irrelevant_since(score: int, now: datetime) -> datetime | None:
    """
    Snapshot marker: `now` for ads under the threshold, None otherwise.
    Not a tracked transition; every pass stamps it again.
    """
    if is_relevant(score):
        return None
    return now
