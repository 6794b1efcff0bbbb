# app/adapters/repos/ads.py
from __future__ import annotations

from collections import defaultdict

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ...domain.types import PictureQuality, RawAd
from ...models import Ad, AdPicture, Picture
from .base import AdRepository, AdRepositoryError


class SqlAlchemyAdRepository(AdRepository):
    """
    Ads backed by the `ads` / `pictures` / `ad_pictures` tables.

    Holds a session factory rather than a session so one instance can live for
    the whole process; every call reads in its own short session.
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self.session_maker = session_maker

    async def get_ads(self) -> list[RawAd]:
        try:
            async with self.session_maker() as session:
                ads = (await session.execute(select(Ad).order_by(Ad.id.asc()))).scalars().all()
                links = (
                    await session.execute(
                        select(AdPicture.ad_id, AdPicture.picture_id).order_by(AdPicture.ad_id, AdPicture.position)
                    )
                ).all()
        except SQLAlchemyError as e:
            raise AdRepositoryError(f"failed to read ads: {e}") from e

        pictures_by_ad: dict[int, list[int]] = defaultdict(list)
        for ad_id, picture_id in links:
            pictures_by_ad[ad_id].append(picture_id)

        return [
            RawAd(
                id=a.id,
                typology=a.typology,
                description=a.description or "",
                pictures=tuple(pictures_by_ad.get(a.id, ())),
                house_size=a.house_size,
                garden_size=a.garden_size,
            )
            for a in ads
        ]

    async def _pictures_for(self, ad: RawAd) -> list[Picture]:
        try:
            async with self.session_maker() as session:
                rows = (
                    await session.execute(select(Picture).where(Picture.id.in_(ad.pictures)))
                ).scalars().all()
        except SQLAlchemyError as e:
            raise AdRepositoryError(f"failed to read pictures of ad {ad.id}: {e}") from e

        by_id = {p.id: p for p in rows}
        return [by_id[pid] for pid in ad.pictures if pid in by_id]

    async def get_ad_pictures_urls(self, ad: RawAd) -> list[str]:
        return [p.url for p in await self._pictures_for(ad)]

    async def get_ad_pictures_quality(self, ad: RawAd) -> list[PictureQuality | None]:
        return [p.quality for p in await self._pictures_for(ad)]
