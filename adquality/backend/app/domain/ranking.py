# app/domain/ranking.py
from __future__ import annotations

from typing import Iterable, Protocol, Sequence, TypeVar

from .policies import is_relevant


class Scored(Protocol):
    id: int
    score: int


S = TypeVar("S", bound=Scored)


def sort_by_score(records: Iterable[S]) -> list[S]:
    # sorted() is stable: equal scores keep their input order
    return sorted(records, key=lambda r: r.score, reverse=True)


def relevant_ids(records: Sequence[Scored]) -> list[int]:
    """Ids of relevant records, best score first."""
    return [r.id for r in sort_by_score(records) if is_relevant(r.score)]
