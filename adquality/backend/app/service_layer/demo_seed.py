# app/service_layer/demo_seed.py
from __future__ import annotations

from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..adapters.ingestion.seed_json import AdCatalogue
from ..models import Ad, AdPicture, Picture


async def seed_ads(session: AsyncSession, catalogue: AdCatalogue) -> dict[str, Any]:
    """
    Idempotent seed:
    - creates/updates every picture and ad of the catalogue
    - rewrites each seeded ad's picture links in catalogue order
    - safe to run multiple times
    """
    for pic in catalogue.pictures.values():
        row = (await session.execute(select(Picture).where(Picture.id == pic.id))).scalars().first()
        if row:
            row.url = pic.url
            row.quality = pic.quality
        else:
            session.add(Picture(id=pic.id, url=pic.url, quality=pic.quality))
    await session.flush()

    created = updated = 0
    for ad in catalogue.ads:
        row = (await session.execute(select(Ad).where(Ad.id == ad.id))).scalars().first()
        if row:
            updated += 1
        else:
            row = Ad(id=ad.id)
            session.add(row)
            created += 1
        row.typology = ad.typology
        row.description = ad.description
        row.house_size = ad.house_size
        row.garden_size = ad.garden_size

        await session.execute(delete(AdPicture).where(AdPicture.ad_id == ad.id))
        for position, picture_id in enumerate(ad.pictures):
            session.add(AdPicture(ad_id=ad.id, picture_id=picture_id, position=position))
        await session.flush()

    return {"created_ads": created, "updated_ads": updated, "pictures": len(catalogue.pictures)}
