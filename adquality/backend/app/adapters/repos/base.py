# app/adapters/repos/base.py
from __future__ import annotations

from typing import Protocol

from ...domain.types import PictureQuality, RawAd


class AdRepositoryError(RuntimeError):
    """Storage failure or malformed ad data."""


class AdRepository(Protocol):
    """
    Read-only source of ads.

    Picture lookups are only made for ads whose `pictures` is non-empty, and
    return one entry per picture id, in the ad's order.
    """

    async def get_ads(self) -> list[RawAd]:
        raise NotImplementedError

    async def get_ad_pictures_urls(self, ad: RawAd) -> list[str]:
        raise NotImplementedError

    async def get_ad_pictures_quality(self, ad: RawAd) -> list[PictureQuality | None]:
        raise NotImplementedError
