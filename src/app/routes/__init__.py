"""
FastAPI Routes.

API 라우트 (JSON). 정적 페이지는 src.app.static에서 마운트.
"""

from . import routes_api

__all__ = ["routes_api"]
