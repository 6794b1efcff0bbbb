# app/adapters/repos/memory.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ...domain.types import PictureQuality, RawAd
from ..ingestion.seed_json import AdCatalogue, load_catalogue
from .base import AdRepository


@dataclass
class InMemoryAdRepository(AdRepository):
    """
    Demo catalogue kept in memory. Read-only once built, so one instance can
    serve every request.
    """

    catalogue: AdCatalogue

    @classmethod
    def from_seed_file(cls, path: Path | str | None = None) -> "InMemoryAdRepository":
        return cls(catalogue=load_catalogue(path))

    async def get_ads(self) -> list[RawAd]:
        return list(self.catalogue.ads)

    async def get_ad_pictures_urls(self, ad: RawAd) -> list[str]:
        return [self.catalogue.pictures[pid].url for pid in ad.pictures if pid in self.catalogue.pictures]

    async def get_ad_pictures_quality(self, ad: RawAd) -> list[PictureQuality | None]:
        return [self.catalogue.pictures[pid].quality for pid in ad.pictures if pid in self.catalogue.pictures]
