# app/entrypoints/api/routers/listings.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from ..deps import get_repository
from ....adapters.repos.base import AdRepository
from ....schemas import PublicAdOut, QualityAdOut
from ....service_layer.listings import calculate_scores, public_listing, quality_listing

log = logging.getLogger(__name__)

router = APIRouter(tags=["listings"])


@router.get("/quality-listing", response_model=list[QualityAdOut])
async def get_quality_listing(repository: AdRepository = Depends(get_repository)) -> list[QualityAdOut]:
    try:
        ads = await quality_listing(repository)
    except Exception:
        log.exception("quality listing failed")
        raise HTTPException(status_code=404, detail="Not Found")
    return [QualityAdOut.from_domain(a) for a in ads]


@router.get("/public-listing", response_model=list[PublicAdOut])
async def get_public_listing(repository: AdRepository = Depends(get_repository)) -> list[PublicAdOut]:
    try:
        ads = await public_listing(repository)
    except Exception:
        log.exception("public listing failed")
        raise HTTPException(status_code=404, detail="Not Found")
    return [PublicAdOut.from_domain(a) for a in ads]


@router.get("/calculate-score")
async def calculate_score(repository: AdRepository = Depends(get_repository)) -> Response:
    try:
        await calculate_scores(repository)
    except Exception:
        log.exception("scoring pass failed")
        raise HTTPException(status_code=404, detail="Not Found")
    return Response(status_code=200)
