"""
Core layer: route discovery + route cache.

역할:
- 페이지 트리 walk, title/route 추출
- routes.json 읽기/쓰기, staleness 신호 (length)
"""

from .cache_store import RouteCacheStore, atomic_write_json
from .discovery import (
    count_pages,
    derive_route,
    discover_pages,
    extract_title,
    iter_marker_files,
)
from .logging import configure_logging, resolve_log_level

__all__ = [
    # discovery
    "iter_marker_files",
    "count_pages",
    "extract_title",
    "derive_route",
    "discover_pages",
    # cache_store
    "RouteCacheStore",
    "atomic_write_json",
    # logging
    "configure_logging",
    "resolve_log_level",
]
