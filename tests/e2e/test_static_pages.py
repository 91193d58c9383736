"""
test_static_pages.py - 정적 페이지 서빙 E2E 테스트

- /x/ → routes/x/index.html
- 매칭 실패 → routes/not_found.html (404)
"""

from pathlib import Path

from fastapi.testclient import TestClient


class TestStaticPages:
    """정적 페이지 서빙 테스트."""

    def test_directory_serves_index(self, two_pages: Path, client: TestClient):
        response = client.get("/x/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "<title>X</title>" in response.text

    def test_nested_directory(self, two_pages: Path, client: TestClient):
        response = client.get("/y/z/")

        assert response.status_code == 200
        assert "<title>Z</title>" in response.text

    def test_explicit_file_path(self, two_pages: Path, client: TestClient):
        response = client.get("/x/index.html")

        assert response.status_code == 200
        assert "<title>X</title>" in response.text

    def test_other_static_assets(self, pages_root: Path, client: TestClient):
        (pages_root / "style.css").write_text("body { margin: 0; }", encoding="utf-8")

        response = client.get("/style.css")

        assert response.status_code == 200
        assert "text/css" in response.headers["content-type"]

    def test_unknown_path_serves_not_found_page(self, pages_root: Path, client: TestClient):
        (pages_root / "not_found.html").write_text(
            "<html><title>Missing</title></html>", encoding="utf-8"
        )

        response = client.get("/does/not/exist")

        assert response.status_code == 404
        assert "Missing" in response.text

    def test_unknown_path_without_not_found_page(self, pages_root: Path, client: TestClient):
        response = client.get("/nope.html")

        assert response.status_code == 404

    def test_api_route_not_shadowed(self, two_pages: Path, pages_root: Path, client: TestClient):
        """페이지 트리에 api/ 가 있어도 API 우선."""
        (pages_root / "api" / "v0" / "routes").mkdir(parents=True)

        response = client.get("/api/v0/routes")

        assert response.headers["content-type"].startswith("application/json")

    def test_static_unaffected_by_corrupt_cache(
        self, two_pages: Path, client: TestClient, tmp_path: Path
    ):
        """캐시 손상과 무관하게 정적 페이지 서빙."""
        (tmp_path / "routes.json").write_text("{broken", encoding="utf-8")

        assert client.get("/x/").status_code == 200
