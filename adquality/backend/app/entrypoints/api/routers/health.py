# app/entrypoints/api/routers/health.py
from __future__ import annotations

from fastapi import APIRouter, Request

from ....config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health(request: Request) -> dict[str, str]:
    repo = getattr(request.app.state, "repository", None)
    return {
        "status": "ok",
        "env": settings.ENV,
        "repository": type(repo).__name__ if repo is not None else "none",
    }
