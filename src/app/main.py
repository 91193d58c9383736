"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 프로덕션: uv run python -m src.app.main
"""

import logging
import time
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from fastapi import FastAPI, Request, Response

from src.app.routes import routes_api
from src.app.services.route_index import RouteIndexService
from src.app.static import PageFiles
from src.core.cache_store import RouteCacheStore
from src.core.logging import configure_logging
from src.domain.constants import (
    API_PREFIX,
    CACHE_LOCK_TIMEOUT,
    DEFAULT_CACHE_FILENAME,
    DEFAULT_HOST,
    DEFAULT_PAGES_ROOT,
    DEFAULT_PORT,
    MARKER_FILENAME,
    NOT_FOUND_FILENAME,
)

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent

# =============================================================================
# Configuration
# =============================================================================

DEFAULT_CONFIG: dict[str, dict[str, Any]] = {
    "server": {"host": DEFAULT_HOST, "port": DEFAULT_PORT},
    "paths": {
        "pages_root": DEFAULT_PAGES_ROOT,
        "cache_file": DEFAULT_CACHE_FILENAME,
        "not_found_page": NOT_FOUND_FILENAME,
    },
    "pages": {"marker_filename": MARKER_FILENAME},
    "cache": {"lock_rebuild": False, "lock_timeout": CACHE_LOCK_TIMEOUT},
    "logging": {"level": "INFO"},
}


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """
    설정 파일 로드.

    파일에 없는 섹션/키는 DEFAULT_CONFIG 값 사용.
    """
    if config_path is None:
        # 프로젝트 루트의 default.yaml
        config_path = PROJECT_ROOT / "default.yaml"

    data: dict[str, Any] = {}
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    merged: dict[str, Any] = {}
    for section, defaults in DEFAULT_CONFIG.items():
        merged[section] = {**defaults, **(data.get(section) or {})}
    return merged


@dataclass
class Settings:
    """Resolved paths and options."""
    pages_root: Path
    cache_path: Path
    not_found_page: Path
    marker_filename: str
    lock_rebuild: bool
    lock_timeout: float
    host: str
    port: int

    @classmethod
    def from_config(
        cls, config: dict[str, Any], base_dir: Path = PROJECT_ROOT
    ) -> "Settings":
        """상대 경로는 base_dir 기준, not_found_page는 pages_root 기준."""
        paths = config["paths"]
        pages_root = base_dir / paths["pages_root"]
        return cls(
            pages_root=pages_root,
            cache_path=base_dir / paths["cache_file"],
            not_found_page=pages_root / paths["not_found_page"],
            marker_filename=config["pages"]["marker_filename"],
            lock_rebuild=bool(config["cache"]["lock_rebuild"]),
            lock_timeout=float(config["cache"]["lock_timeout"]),
            host=config["server"]["host"],
            port=int(config["server"]["port"]),
        )


# =============================================================================
# App Factory
# =============================================================================


def create_app(config: dict[str, Any] | None = None, base_dir: Path = PROJECT_ROOT) -> FastAPI:
    """
    FastAPI 앱 생성.

    Args:
        config: 설정 dict (None이면 .env + default.yaml 로드)
        base_dir: 상대 경로 기준 디렉터리
    """
    if config is None:
        load_dotenv()
        config = load_config()
    settings = Settings.from_config(config, base_dir)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """
        애플리케이션 생명주기 관리.

        시작 시: 로깅 설정, 페이지 루트 확인
        """
        configure_logging(config)
        if not settings.pages_root.is_dir():
            logger.warning(f"Pages root {settings.pages_root} does not exist")
        logger.info(
            f"Serving pages from {settings.pages_root} "
            f"(route cache: {settings.cache_path})"
        )

        yield

    app = FastAPI(
        title="Route Index",
        description="Static HTML pages + JSON listing of page titles and routes",
        version="0.1.0",
        lifespan=lifespan,
    )

    store = RouteCacheStore(
        cache_path=settings.cache_path,
        pages_root=settings.pages_root,
        marker_filename=settings.marker_filename,
        lock_rebuild=settings.lock_rebuild,
        lock_timeout=settings.lock_timeout,
    )
    app.state.config = config
    app.state.settings = settings
    app.state.route_index = RouteIndexService(store)

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """요청 단위 접근 로그."""
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.debug(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"({elapsed_ms:.1f}ms)"
        )
        return response

    # API 라우트
    app.include_router(routes_api.api_router, prefix=API_PREFIX, tags=["Routes API"])

    @app.get("/health")
    async def health() -> dict[str, str]:
        """헬스 체크."""
        return {"status": "ok"}

    # 정적 페이지 (마지막에 마운트: 나머지 모든 경로)
    app.mount(
        "/",
        PageFiles(directory=settings.pages_root, not_found_page=settings.not_found_page),
        name="pages",
    )

    return app


# =============================================================================
# App Instance
# =============================================================================

app = create_app()


# =============================================================================
# CLI Entry Point
# =============================================================================


def run() -> None:
    """uvicorn으로 서버 실행."""
    import uvicorn

    settings: Settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
