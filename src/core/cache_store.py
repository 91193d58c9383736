"""
Route cache 관리: routes.json

규칙:
- read_count: 없으면 빈 캐시(length 0)로 생성, 디코드 실패 → 0 (rebuild 유도)
- read_all: 디코드 실패 → RouteIndexError (치명적)
- rebuild: discovery + count를 독립적으로 계산 후 전체 덮어쓰기
- 원자적 쓰기: temp → rename (부분 쓰기 없음, last-writer-wins)
- lock_rebuild=True일 때만 FileLock으로 단일 writer 보장,
  락 획득 후 staleness 재확인 (이미 갱신됐으면 skip)
"""

import json
import logging
import os
import tempfile
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from filelock import FileLock, Timeout

from src.core.discovery import count_pages, discover_pages
from src.domain.constants import CACHE_LOCK_SUFFIX, CACHE_LOCK_TIMEOUT, MARKER_FILENAME
from src.domain.errors import ErrorCodes, RouteIndexError
from src.domain.schemas import RouteCache

logger = logging.getLogger(__name__)

# =============================================================================
# Atomic Write
# =============================================================================


def _fsync_dir(dir_path: Path) -> None:
    """
    디렉토리 fsync (가능한 환경에서).

    rename 후 디렉토리 엔트리까지 내구성 강화. 실패 시 경고만 남김.

    Args:
        dir_path: fsync할 디렉토리 경로
    """
    try:
        dir_fd = os.open(str(dir_path), os.O_RDONLY | os.O_DIRECTORY)
        try:
            os.fsync(dir_fd)
        finally:
            os.close(dir_fd)
    except (OSError, AttributeError) as e:
        # O_DIRECTORY 미지원, 권한 문제 등
        logger.warning(
            f"Directory fsync failed for {dir_path}: {e}. "
            f"Cache replace may not survive power loss."
        )


def atomic_write_json(path: Path, data: dict[str, Any]) -> None:
    """
    원자적 JSON 쓰기.

    동작:
    - 중간 상태 없음: temp → rename
    - fsync 실패 시 경고 남기고 계속 진행
    - 실패 시 cleanup: temp 파일 삭제, 기존 파일 보존

    Args:
        path: 저장할 파일 경로
        data: JSON 직렬화할 데이터
    """
    dir_path = path.parent
    dir_path.mkdir(parents=True, exist_ok=True)

    temp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=dir_path,
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        ) as f:
            temp_path = Path(f.name)
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.flush()
            try:
                os.fsync(f.fileno())
            except OSError as e:
                logger.warning(
                    f"File fsync failed for {path}: {e}. "
                    f"Data may not be durable on power loss."
                )

        os.replace(temp_path, path)
        _fsync_dir(dir_path)

    except Exception:
        if temp_path and temp_path.exists():
            try:
                temp_path.unlink()
            except OSError:
                pass
        raise


# =============================================================================
# Route Cache Store
# =============================================================================


class RouteCacheStore:
    """
    routes.json 읽기/쓰기.

    매 호출마다 디스크에서 다시 읽음 (메모리 캐시 없음).
    """

    def __init__(
        self,
        cache_path: Path,
        pages_root: Path,
        marker_filename: str = MARKER_FILENAME,
        lock_rebuild: bool = False,
        lock_timeout: float = CACHE_LOCK_TIMEOUT,
    ):
        """
        Args:
            cache_path: 캐시 파일 경로
            pages_root: 페이지 트리 루트
            marker_filename: 페이지 파일명
            lock_rebuild: rebuild를 FileLock으로 직렬화할지 여부
            lock_timeout: 락 대기 시간 (초)
        """
        self.cache_path = cache_path
        self.pages_root = pages_root
        self.marker_filename = marker_filename
        self.lock_rebuild = lock_rebuild
        self.lock_timeout = lock_timeout
        self._lock_path = cache_path.with_name(cache_path.name + CACHE_LOCK_SUFFIX)

    # =========================================================================
    # Read
    # =========================================================================

    def _create_empty(self) -> None:
        """캐시 파일이 없을 때만 빈 캐시 기록 (x 모드: 기존 파일은 건드리지 않음)."""
        try:
            with open(self.cache_path, "x", encoding="utf-8") as f:
                json.dump(RouteCache().to_dict(), f)
        except FileExistsError:
            pass

    def read_count(self) -> int:
        """
        저장된 length 반환.

        파일이 없으면 빈 캐시로 생성. 디코드 실패 시 0.
        """
        try:
            self._create_empty()
            raw = self.cache_path.read_bytes()
        except OSError as e:
            logger.warning(f"Route cache {self.cache_path} unavailable: {e}")
            return 0

        try:
            return RouteCache.from_dict(json.loads(raw.decode("utf-8"))).length
        except (ValueError, KeyError, TypeError) as e:
            logger.debug(f"Route cache {self.cache_path} undecodable, using empty: {e}")
            return RouteCache().length

    def read_all(self) -> RouteCache:
        """
        캐시 전체 디코드.

        Raises:
            RouteIndexError: CACHE_UNREADABLE, CACHE_CORRUPT
        """
        try:
            raw = self.cache_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise RouteIndexError(
                ErrorCodes.CACHE_UNREADABLE,
                path=str(self.cache_path),
                error=str(e),
            ) from e

        try:
            return RouteCache.from_dict(json.loads(raw))
        except (ValueError, KeyError, TypeError) as e:
            raise RouteIndexError(
                ErrorCodes.CACHE_CORRUPT,
                path=str(self.cache_path),
                error=str(e),
            ) from e

    # =========================================================================
    # Rebuild
    # =========================================================================

    @contextmanager
    def _writer_lock(self) -> Generator[None, None, None]:
        """
        rebuild 직렬화 락 (lock_rebuild=False면 no-op).

        Raises:
            RouteIndexError: CACHE_LOCK_TIMEOUT
        """
        if not self.lock_rebuild:
            yield
            return

        lock = FileLock(self._lock_path, timeout=self.lock_timeout)
        try:
            lock.acquire()
        except Timeout as e:
            raise RouteIndexError(
                ErrorCodes.CACHE_LOCK_TIMEOUT,
                path=str(self._lock_path),
                timeout=self.lock_timeout,
            ) from e

        try:
            yield
        finally:
            lock.release()

    def _write_fresh(self) -> RouteCache:
        """discovery + count 후 원자적 덮어쓰기 (락은 호출자 책임)."""
        routes = discover_pages(self.pages_root, self.marker_filename)
        length = count_pages(self.pages_root, self.marker_filename)
        cache = RouteCache(length=length, routes=routes)

        try:
            atomic_write_json(self.cache_path, cache.to_dict())
        except (OSError, TypeError, ValueError) as e:
            raise RouteIndexError(
                ErrorCodes.CACHE_WRITE_FAILED,
                path=str(self.cache_path),
                error=str(e),
            ) from e

        logger.info(
            f"Route cache rebuilt: {self.cache_path} "
            f"(length={cache.length}, routes={len(cache.routes)})"
        )
        return cache

    def rebuild(self) -> RouteCache:
        """
        페이지 트리를 다시 스캔하고 캐시 전체를 덮어씀.

        Returns:
            기록된 RouteCache

        Raises:
            RouteIndexError: ROOT_WALK_FAILED, CACHE_WRITE_FAILED, CACHE_LOCK_TIMEOUT
        """
        with self._writer_lock():
            return self._write_fresh()

    def rebuild_if_stale(self) -> RouteCache | None:
        """
        stale 판정 이후 호출되는 rebuild.

        lock_rebuild=True면 락 획득 후 live count와 저장된 length를 다시 비교,
        대기 중 다른 writer가 이미 갱신했으면 skip. 락이 없으면 항상 rebuild.

        Returns:
            기록된 RouteCache, skip 시 None

        Raises:
            RouteIndexError: ROOT_WALK_FAILED, CACHE_WRITE_FAILED, CACHE_LOCK_TIMEOUT
        """
        with self._writer_lock():
            if self.lock_rebuild:
                live = count_pages(self.pages_root, self.marker_filename)
                if live == self.read_count():
                    logger.info(
                        f"Route cache {self.cache_path} already rebuilt by another writer "
                        f"(length={live}), skipping"
                    )
                    return None
            return self._write_fresh()
