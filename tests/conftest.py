"""
Pytest fixtures for the route index tests.

테스트 구성:
- 페이지 트리 (tmp_path 기반)
- RouteCacheStore / 설정 / TestClient
"""

from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from src.core.cache_store import RouteCacheStore

# =============================================================================
# Page Tree Fixtures
# =============================================================================


def page_html(title: str) -> str:
    """title 한 줄을 포함한 HTML 문서."""
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        f"    <title>{title}</title>\n"
        "</head>\n"
        "<body></body>\n"
        "</html>\n"
    )


@pytest.fixture
def pages_root(tmp_path: Path) -> Path:
    """빈 페이지 루트."""
    root = tmp_path / "routes"
    root.mkdir()
    return root


@pytest.fixture
def make_page(pages_root: Path) -> Callable[..., Path]:
    """
    페이지 생성 헬퍼.

    make_page("a/b", "Title") → routes/a/b/index.html
    make_page("c", content="...") → 임의 내용
    """

    def _make(relative_dir: str, title: str | None = None, content: str | None = None) -> Path:
        page_dir = pages_root / relative_dir if relative_dir else pages_root
        page_dir.mkdir(parents=True, exist_ok=True)
        page = page_dir / "index.html"
        if content is None:
            content = page_html(title or relative_dir)
        page.write_text(content, encoding="utf-8")
        return page

    return _make


@pytest.fixture
def two_pages(make_page: Callable[..., Path], pages_root: Path) -> Path:
    """x/ (X) + y/z/ (Z) 트리."""
    make_page("x", "X")
    make_page("y/z", "Z")
    return pages_root


# =============================================================================
# Store / Config Fixtures
# =============================================================================


@pytest.fixture
def cache_path(tmp_path: Path) -> Path:
    """캐시 파일 경로 (생성하지 않음)."""
    return tmp_path / "routes.json"


@pytest.fixture
def store(cache_path: Path, pages_root: Path) -> RouteCacheStore:
    """RouteCacheStore 인스턴스."""
    return RouteCacheStore(cache_path=cache_path, pages_root=pages_root)


@pytest.fixture
def test_config() -> dict[str, Any]:
    """테스트용 설정 (tmp_path 기준 상대 경로)."""
    return {
        "server": {"host": "127.0.0.1", "port": 8080},
        "paths": {
            "pages_root": "routes",
            "cache_file": "routes.json",
            "not_found_page": "not_found.html",
        },
        "pages": {"marker_filename": "index.html"},
        "cache": {"lock_rebuild": False, "lock_timeout": 1.0},
        "logging": {"level": "DEBUG"},
    }


@pytest.fixture
def client(tmp_path: Path, pages_root: Path, test_config: dict) -> Generator[TestClient, None, None]:
    """tmp_path 트리를 서빙하는 FastAPI TestClient."""
    from src.app.main import create_app

    app = create_app(test_config, base_dir=tmp_path)
    with TestClient(app) as client:
        yield client
