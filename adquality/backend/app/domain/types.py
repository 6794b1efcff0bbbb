# app/domain/types.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Typology(str, Enum):
    FLAT = "FLAT"
    CHALET = "CHALET"
    GARAGE = "GARAGE"


class PictureQuality(str, Enum):
    HD = "HD"
    SD = "SD"


@dataclass(frozen=True)
class RawAd:
    id: int
    typology: Typology
    description: str = ""
    pictures: tuple[int, ...] = field(default_factory=tuple)
    house_size: int | None = None
    garden_size: int | None = None


@dataclass(frozen=True)
class AdSnapshot:
    """
    A raw ad plus whatever picture metadata the repository returned for it.
    picture_urls / picture_qualities stay None when the ad has no pictures.
    """
    ad: RawAd
    picture_urls: list[str] | None = None
    picture_qualities: list[PictureQuality | str | None] | None = None


@dataclass(frozen=True)
class ScoreBreakdown:
    pictures: int
    description: int
    keywords: int
    completeness: int

    @property
    def raw(self) -> int:
        return self.pictures + self.description + self.keywords + self.completeness

    @property
    def total(self) -> int:
        return max(0, min(100, self.raw))

    def explain(self) -> str:
        return (
            f"pictures={self.pictures} | description={self.description} | "
            f"keywords={self.keywords} | completeness={self.completeness} | "
            f"raw={self.raw} | total={self.total}"
        )


@dataclass(frozen=True)
class PublicAd:
    id: int
    typology: Typology
    description: str
    picture_urls: list[str] | None
    house_size: int | None
    garden_size: int | None


@dataclass(frozen=True)
class QualityAd:
    id: int
    typology: Typology
    description: str
    picture_urls: list[str] | None
    house_size: int | None
    garden_size: int | None
    score: int
    irrelevant_since: datetime | None = None
