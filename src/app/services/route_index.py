"""
Route Index Service: GET /api/v0/routes 처리 로직.

요청마다:
    CheckStale → {Fresh: skip | Stale: Rebuild} → ReadCache → Respond

- 락 없음 (기본): 동시 stale 요청은 각각 rebuild, last-writer-wins
- lock_rebuild: 락 안에서 재확인, 먼저 끝난 writer만 rebuild
- 응답은 항상 디스크에 저장된 내용 (fresh 경로에서도 재계산하지 않음)
"""

import logging

from src.core.cache_store import RouteCacheStore
from src.core.discovery import count_pages
from src.domain.schemas import RouteCache

logger = logging.getLogger(__name__)


class RouteIndexService:
    """Staleness check + lazy rebuild over a RouteCacheStore."""

    def __init__(self, store: RouteCacheStore):
        self.store = store

    def is_stale(self) -> tuple[bool, int, int]:
        """
        현재 페이지 수와 저장된 length 비교.

        Returns:
            (stale 여부, live count, stored count)
        """
        live = count_pages(self.store.pages_root, self.store.marker_filename)
        stored = self.store.read_count()
        return live != stored, live, stored

    def list_routes(self) -> RouteCache:
        """
        필요 시 rebuild 후 캐시 전체 반환.

        Raises:
            RouteIndexError: rebuild/read_all 실패 (호출자에서 처리)
        """
        stale, live, stored = self.is_stale()
        if stale:
            logger.info(f"Route cache stale (stored={stored}, live={live}), rebuilding")
            self.store.rebuild_if_stale()

        return self.store.read_all()
