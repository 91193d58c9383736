"""
Page discovery: 디렉터리 트리 → 페이지 목록.

규칙:
- 페이지 = marker 파일명(index.html)과 정확히 일치하는 파일
- title: 위→아래 줄 단위 스캔, 첫 번째 매칭 줄의 캡처
- route: root 기준 디렉터리 세그먼트마다 "/" 접미 (root 자신 제외)
- 페이지 단위 실패 → 조용히 제외 (DEBUG 로그만)
- root 자체 walk 실패만 RouteIndexError
"""

import logging
import os
import re
from collections.abc import Iterator
from pathlib import Path

from src.domain.constants import MARKER_FILENAME, ROUTE_SEPARATOR
from src.domain.errors import ErrorCodes, RouteIndexError
from src.domain.schemas import PageRoute

logger = logging.getLogger(__name__)

# anything, <title>, captured text, </title>, anything up to end of line
TITLE_PATTERN = re.compile(r"^.*<title>(.*)</title>.*$")


# =============================================================================
# Directory Walk
# =============================================================================


def iter_marker_files(
    root: Path, marker_filename: str = MARKER_FILENAME
) -> Iterator[Path]:
    """
    root 아래의 모든 marker 파일 경로.

    하위 디렉터리 walk 에러는 건너뜀. 디렉터리/파일은 이름순으로 방문.

    Args:
        root: 페이지 트리 루트
        marker_filename: 페이지 파일명

    Yields:
        marker 파일 경로

    Raises:
        RouteIndexError: ROOT_WALK_FAILED (root 자체를 읽을 수 없음)
    """
    top = os.fspath(root)

    def on_error(err: OSError) -> None:
        if err.filename is not None and os.fspath(err.filename) == top:
            raise RouteIndexError(
                ErrorCodes.ROOT_WALK_FAILED,
                root=top,
                error=str(err),
            ) from err
        logger.debug(f"Skipping unreadable directory {err.filename}: {err}")

    for dirpath, dirnames, filenames in os.walk(top, onerror=on_error):
        dirnames.sort()
        for filename in sorted(filenames):
            if filename == marker_filename:
                yield Path(dirpath) / filename


def count_pages(root: Path, marker_filename: str = MARKER_FILENAME) -> int:
    """
    marker 파일 개수 (내용 유효성과 무관).

    Staleness 판단 전용.
    """
    return sum(1 for _ in iter_marker_files(root, marker_filename))


# =============================================================================
# Title / Route Extraction
# =============================================================================


def extract_title(page_path: Path) -> str | None:
    """
    HTML 파일에서 title 추출.

    Args:
        page_path: 페이지 파일 경로

    Returns:
        첫 번째 매칭 줄의 title, 없으면 None
    """
    with open(page_path, encoding="utf-8") as f:
        for line in f:
            match = TITLE_PATTERN.match(line.rstrip("\r\n"))
            if match:
                return match.group(1)
    return None


def derive_route(root: Path, page_path: Path) -> str:
    """
    페이지 위치 → route 문자열.

    root/a/b/index.html → "a/b/"
    root/index.html → ""

    Raises:
        ValueError: page_path가 root 밖이거나 세그먼트가 텍스트가 아님
    """
    segments = page_path.parent.relative_to(root).parts
    for segment in segments:
        # undecodable file-system bytes surface as lone surrogates
        segment.encode("utf-8")
    return "".join(f"{segment}{ROUTE_SEPARATOR}" for segment in segments)


def discover_pages(
    root: Path, marker_filename: str = MARKER_FILENAME
) -> list[PageRoute]:
    """
    트리 전체 페이지 목록 생성.

    title 추출/route 변환에 실패한 페이지는 결과에서 제외.

    Args:
        root: 페이지 트리 루트
        marker_filename: 페이지 파일명

    Returns:
        PageRoute 목록 (walk 순서)

    Raises:
        RouteIndexError: ROOT_WALK_FAILED
    """
    pages: list[PageRoute] = []

    for page_path in iter_marker_files(root, marker_filename):
        try:
            route = derive_route(root, page_path)
            title = extract_title(page_path)
        except (OSError, UnicodeError, ValueError) as e:
            logger.debug(f"Dropping page {page_path}: {e}")
            continue

        if title is None:
            logger.debug(f"Dropping page {page_path}: no <title> line")
            continue

        pages.append(PageRoute(name=title, route=route))

    return pages
