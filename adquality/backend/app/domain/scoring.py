# app/domain/scoring.py
from __future__ import annotations

from typing import Iterable

from .parsing import count_words, normalize_description
from .types import PictureQuality, RawAd, ScoreBreakdown, Typology

NO_PICTURES_PENALTY = -10
HD_PICTURE_POINTS = 20
SD_PICTURE_POINTS = 10

DESCRIPTION_POINTS = 5
FLAT_MEDIUM_DESCRIPTION_POINTS = 10
FLAT_LONG_DESCRIPTION_POINTS = 30
CHALET_LONG_DESCRIPTION_POINTS = 20

KEYWORDS = ("luminoso", "nuevo", "céntrico", "reformado", "ático")
KEYWORD_POINTS = 5

COMPLETE_AD_POINTS = 40


def picture_points(ad: RawAd, picture_qualities: Iterable[PictureQuality | str | None] | None) -> int:
    if not ad.pictures:
        return NO_PICTURES_PENALTY
    if picture_qualities is None:
        return 0
    points = 0
    for quality in picture_qualities:
        if quality == PictureQuality.HD:
            points += HD_PICTURE_POINTS
        else:
            points += SD_PICTURE_POINTS
    return points


def description_points(ad: RawAd) -> int:
    if not ad.description:
        return 0

    words = count_words(ad.description)
    points = DESCRIPTION_POINTS
    if ad.typology is Typology.FLAT:
        if 20 <= words <= 49:
            points += FLAT_MEDIUM_DESCRIPTION_POINTS
        elif words >= 50:
            points += FLAT_LONG_DESCRIPTION_POINTS
    elif ad.typology is Typology.CHALET:
        if words > 50:
            points += CHALET_LONG_DESCRIPTION_POINTS
    return points


def keyword_points(description: str) -> int:
    if not description:
        return 0
    normalized = normalize_description(description)
    return sum(KEYWORD_POINTS for kw in KEYWORDS if kw in normalized)


def completeness_points(ad: RawAd) -> int:
    if ad.typology is Typology.GARAGE:
        return COMPLETE_AD_POINTS if ad.pictures else 0

    # garden_size never earns the bonus: only complete flats do.
    if (
        ad.typology is Typology.FLAT
        and ad.pictures is not None
        and ad.description
        and ad.house_size is not None
    ):
        return COMPLETE_AD_POINTS
    return 0


def score_breakdown(
    ad: RawAd,
    picture_qualities: Iterable[PictureQuality | str | None] | None,
) -> ScoreBreakdown:
    return ScoreBreakdown(
        pictures=picture_points(ad, picture_qualities),
        description=description_points(ad),
        keywords=keyword_points(ad.description),
        completeness=completeness_points(ad),
    )


def score_ad(ad: RawAd, picture_qualities: Iterable[PictureQuality | str | None] | None) -> int:
    """
    Additive point system clamped to [0, 100].

    picture_qualities is None when the ad has no pictures or the repository
    returned no tags for them.
    """
    return score_breakdown(ad, picture_qualities).total
