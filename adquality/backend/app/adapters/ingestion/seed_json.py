# app/adapters/ingestion/seed_json.py
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ...domain.parsing import to_int
from ...domain.types import PictureQuality, RawAd, Typology
from ..repos.base import AdRepositoryError

DEFAULT_SEED_FILE = Path(__file__).resolve().parents[2] / "data" / "ads.json"


@dataclass(frozen=True)
class PictureEntry:
    id: int
    url: str
    quality: PictureQuality | None = None


@dataclass
class AdCatalogue:
    ads: list[RawAd] = field(default_factory=list)
    pictures: dict[int, PictureEntry] = field(default_factory=dict)


def _as_list_of_dicts(payload: Any) -> list[dict[str, Any]]:
    if isinstance(payload, list):
        return [x for x in payload if isinstance(x, dict)]
    return []


def _coerce_quality(x: Any) -> PictureQuality | None:
    if x is None:
        return None
    try:
        return PictureQuality(str(x).strip().upper())
    except ValueError:
        # unknown tags are scored like any other non-HD picture
        return None


def _parse_typology(x: Any, ad_id: int) -> Typology:
    try:
        return Typology(str(x).strip().upper())
    except ValueError:
        raise AdRepositoryError(f"ad {ad_id}: unknown typology {x!r}") from None


def _parse_picture(it: dict[str, Any]) -> PictureEntry:
    pic_id = to_int(it.get("id"))
    url = it.get("url")
    if pic_id is None or not url:
        raise AdRepositoryError(f"picture without id/url: {it!r}")
    return PictureEntry(id=pic_id, url=str(url), quality=_coerce_quality(it.get("quality")))


def _parse_ad(it: dict[str, Any], pictures: dict[int, PictureEntry]) -> RawAd:
    ad_id = to_int(it.get("id"))
    if ad_id is None:
        raise AdRepositoryError(f"ad without id: {it!r}")

    picture_ids: list[int] = []
    for raw in it.get("pictures") or []:
        pic_id = to_int(raw)
        if pic_id is None or pic_id not in pictures:
            raise AdRepositoryError(f"ad {ad_id}: unknown picture {raw!r}")
        picture_ids.append(pic_id)

    return RawAd(
        id=ad_id,
        typology=_parse_typology(it.get("typology"), ad_id),
        description=str(it.get("description") or ""),
        pictures=tuple(picture_ids),
        house_size=to_int(it.get("houseSize", it.get("house_size"))),
        garden_size=to_int(it.get("gardenSize", it.get("garden_size"))),
    )


def parse_catalogue(payload: Any) -> AdCatalogue:
    """
    Accepts {"ads": [...], "pictures": [...]} with camelCase or snake_case ad keys.
    Raises AdRepositoryError on unknown typologies, dangling picture ids and duplicate ad ids.
    """
    if not isinstance(payload, dict):
        raise AdRepositoryError("seed payload must be an object with 'ads' and 'pictures'")

    pictures: dict[int, PictureEntry] = {}
    for it in _as_list_of_dicts(payload.get("pictures")):
        pic = _parse_picture(it)
        pictures[pic.id] = pic

    ads: list[RawAd] = []
    seen: set[int] = set()
    for it in _as_list_of_dicts(payload.get("ads")):
        ad = _parse_ad(it, pictures)
        if ad.id in seen:
            raise AdRepositoryError(f"duplicate ad id {ad.id}")
        seen.add(ad.id)
        ads.append(ad)

    return AdCatalogue(ads=ads, pictures=pictures)


def load_catalogue(path: Path | str | None = None) -> AdCatalogue:
    path = Path(path) if path else DEFAULT_SEED_FILE
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise AdRepositoryError(f"cannot read seed file {path}: {e}") from e
    return parse_catalogue(raw)
