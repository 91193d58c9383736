"""
Routes API: 페이지 목록.

- GET /api/v0/routes → routes.json 내용 (JSON)
- 실패 → 500, detail = RouteIndexError.to_dict()
"""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request

from src.app.services.route_index import RouteIndexService
from src.domain.constants import ROUTES_API_PATH
from src.domain.errors import RouteIndexError

logger = logging.getLogger(__name__)

api_router = APIRouter()


def get_route_index(request: Request) -> RouteIndexService:
    """Request에서 RouteIndexService 가져오기."""
    return request.app.state.route_index


@api_router.get(ROUTES_API_PATH)
def list_routes(request: Request) -> dict[str, Any]:
    """
    페이지 목록.

    stale이면 응답 전에 캐시를 동기적으로 rebuild.
    """
    service = get_route_index(request)
    try:
        cache = service.list_routes()
    except RouteIndexError as e:
        logger.error(f"Route index request failed: {e}")
        raise HTTPException(
            status_code=500,
            detail=e.to_dict(),
        ) from e

    return cache.to_dict()
