"""
Application Services.

역할:
- route_index: staleness 판단 + lazy rebuild + 캐시 읽기
"""

from .route_index import RouteIndexService

__all__ = ["RouteIndexService"]
