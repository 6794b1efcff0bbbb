# app/service_layer/listings.py
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Sequence

from ..adapters.repos.base import AdRepository
from ..domain.policies import irrelevant_since
from ..domain.ranking import relevant_ids, sort_by_score
from ..domain.scoring import score_breakdown
from ..domain.types import AdSnapshot, PublicAd, QualityAd

log = logging.getLogger(__name__)


async def load_snapshots(repository: AdRepository) -> list[AdSnapshot]:
    """
    Reads every ad and, only for ads that have pictures, their urls and quality tags.
    """
    out: list[AdSnapshot] = []
    for ad in await repository.get_ads():
        if ad.pictures:
            urls = await repository.get_ad_pictures_urls(ad)
            qualities = await repository.get_ad_pictures_quality(ad)
            out.append(AdSnapshot(ad=ad, picture_urls=urls, picture_qualities=qualities))
        else:
            out.append(AdSnapshot(ad=ad))
    return out


def build_quality_views(snapshots: Sequence[AdSnapshot], *, now: datetime | None = None) -> list[QualityAd]:
    now = now or datetime.now(timezone.utc)

    out: list[QualityAd] = []
    for snap in snapshots:
        ad = snap.ad
        breakdown = score_breakdown(ad, snap.picture_qualities)
        log.debug("ad %s scored: %s", ad.id, breakdown.explain())

        score = breakdown.total
        out.append(
            QualityAd(
                id=ad.id,
                typology=ad.typology,
                description=ad.description,
                picture_urls=snap.picture_urls,
                house_size=ad.house_size,
                garden_size=ad.garden_size,
                score=score,
                irrelevant_since=irrelevant_since(score, now),
            )
        )
    return out


def build_public_views(snapshots: Sequence[AdSnapshot]) -> list[PublicAd]:
    return [
        PublicAd(
            id=snap.ad.id,
            typology=snap.ad.typology,
            description=snap.ad.description,
            picture_urls=snap.picture_urls,
            house_size=snap.ad.house_size,
            garden_size=snap.ad.garden_size,
        )
        for snap in snapshots
    ]


def sort_public_by_quality(public_ads: Sequence[PublicAd], quality_ads: Sequence[QualityAd]) -> list[PublicAd]:
    """
    Public ads ordered by their quality score, best first.

    Ads under the relevance threshold are left out. Ids that have no public
    counterpart are skipped.
    """
    out: list[PublicAd] = []
    for ad_id in relevant_ids(quality_ads):
        for ad in public_ads:
            if ad.id == ad_id:
                out.append(ad)
    return out


# ----- use cases -----

async def quality_listing(repository: AdRepository) -> list[QualityAd]:
    snapshots = await load_snapshots(repository)
    return sort_by_score(build_quality_views(snapshots))


async def public_listing(repository: AdRepository) -> list[PublicAd]:
    snapshots = await load_snapshots(repository)
    return sort_public_by_quality(build_public_views(snapshots), build_quality_views(snapshots))


async def calculate_scores(repository: AdRepository) -> int:
    quality_ads = build_quality_views(await load_snapshots(repository))
    irrelevant = sum(1 for q in quality_ads if q.irrelevant_since is not None)
    log.info("scoring pass done: scored=%d irrelevant=%d", len(quality_ads), irrelevant)
    return len(quality_ads)
