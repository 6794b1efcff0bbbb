from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .domain.types import PublicAd, QualityAd, Typology


class PublicAdOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    typology: Typology
    description: str
    picture_urls: list[str] | None = None
    house_size: int | None = None
    garden_size: int | None = None

    @classmethod
    def from_domain(cls, ad: PublicAd) -> "PublicAdOut":
        return cls(
            id=ad.id,
            typology=ad.typology,
            description=ad.description,
            picture_urls=ad.picture_urls,
            house_size=ad.house_size,
            garden_size=ad.garden_size,
        )


class QualityAdOut(PublicAdOut):
    score: int
    irrelevant_since: datetime | None = None

    @classmethod
    def from_domain(cls, ad: QualityAd) -> "QualityAdOut":
        return cls(
            id=ad.id,
            typology=ad.typology,
            description=ad.description,
            picture_urls=ad.picture_urls,
            house_size=ad.house_size,
            garden_size=ad.garden_size,
            score=ad.score,
            irrelevant_since=ad.irrelevant_since,
        )
