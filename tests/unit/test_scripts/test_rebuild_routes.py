"""
test_rebuild_routes.py - rebuild_routes.py 스크립트 테스트

- 기본: rebuild
- --check: stale이면 exit 1
- --show: 캐시 출력
"""

import json
import sys
from pathlib import Path

import pytest

# scripts 모듈 임포트를 위한 경로 추가
sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent / "scripts"))

from rebuild_routes import main


def run(pages_root: Path, cache_path: Path, *extra: str) -> int:
    return main(["--root", str(pages_root), "--cache", str(cache_path), *extra])


class TestRebuildRoutesScript:
    """rebuild_routes.main 테스트."""

    def test_rebuild_writes_cache(self, two_pages: Path, cache_path: Path):
        assert run(two_pages, cache_path) == 0

        data = json.loads(cache_path.read_text(encoding="utf-8"))
        assert data["length"] == 2

    def test_check_stale(self, two_pages: Path, cache_path: Path):
        """캐시 없음 → stale → exit 1."""
        assert run(two_pages, cache_path, "--check") == 1

    def test_check_fresh(self, two_pages: Path, cache_path: Path):
        run(two_pages, cache_path)

        assert run(two_pages, cache_path, "--check") == 0

    def test_show(self, two_pages: Path, cache_path: Path, capsys: pytest.CaptureFixture):
        run(two_pages, cache_path)
        capsys.readouterr()

        assert run(two_pages, cache_path, "--show") == 0

        printed = json.loads(capsys.readouterr().out)
        assert printed["length"] == 2

    def test_show_missing_cache_fails(self, two_pages: Path, cache_path: Path):
        assert run(two_pages, cache_path, "--show") == 2

    def test_missing_root_fails(self, tmp_path: Path, cache_path: Path):
        assert run(tmp_path / "missing", cache_path) == 2

    def test_check_and_show_exclusive(self, two_pages: Path, cache_path: Path):
        with pytest.raises(SystemExit):
            run(two_pages, cache_path, "--check", "--show")
