# app/entrypoints/api/deps.py
from __future__ import annotations

from fastapi import Request

from ...adapters.repos.base import AdRepository


def get_repository(request: Request) -> AdRepository:
    # Built once at startup (see fastapi_app.create_app); read-only afterwards.
    return request.app.state.repository
