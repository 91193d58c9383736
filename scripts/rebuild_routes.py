#!/usr/bin/env python3
"""
rebuild_routes.py - routes.json 오프라인 관리 스크립트

서버 없이 route cache를 점검/재생성:
1. --check: live count vs 저장된 length 비교 (stale이면 exit 1)
2. 기본: 전체 rebuild
3. --show: 현재 캐시 내용 출력

사용법:
    # rebuild
    uv run python scripts/rebuild_routes.py

    # staleness 점검만
    uv run python scripts/rebuild_routes.py --check

    # 다른 트리/캐시 경로
    uv run python scripts/rebuild_routes.py --root site --cache site.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.app.services.route_index import RouteIndexService  # noqa: E402
from src.core.cache_store import RouteCacheStore  # noqa: E402
from src.domain.constants import (  # noqa: E402
    DEFAULT_CACHE_FILENAME,
    DEFAULT_PAGES_ROOT,
    MARKER_FILENAME,
)
from src.domain.errors import RouteIndexError  # noqa: E402

# 로깅 설정
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="routes.json 점검/재생성 스크립트",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--root",
        type=str,
        default=DEFAULT_PAGES_ROOT,
        help=f"페이지 루트 경로 (기본: {DEFAULT_PAGES_ROOT})",
    )
    parser.add_argument(
        "--cache",
        type=str,
        default=DEFAULT_CACHE_FILENAME,
        help=f"캐시 파일 경로 (기본: {DEFAULT_CACHE_FILENAME})",
    )
    parser.add_argument(
        "--marker",
        type=str,
        default=MARKER_FILENAME,
        help=f"페이지 파일명 (기본: {MARKER_FILENAME})",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--check",
        action="store_true",
        help="staleness 점검만 (stale이면 exit 1)",
    )
    mode.add_argument(
        "--show",
        action="store_true",
        help="현재 캐시 내용 출력",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    store = RouteCacheStore(
        cache_path=Path(args.cache),
        pages_root=Path(args.root),
        marker_filename=args.marker,
    )
    service = RouteIndexService(store)

    try:
        if args.check:
            stale, live, stored = service.is_stale()
            logger.info(f"live={live}, stored={stored}, stale={stale}")
            return 1 if stale else 0

        if args.show:
            print(json.dumps(store.read_all().to_dict(), indent=2, ensure_ascii=False))
            return 0

        cache = store.rebuild()
    except RouteIndexError as e:
        logger.error(f"Failed: {e}")
        return 2

    logger.info(f"Wrote {store.cache_path}: length={cache.length}, routes={len(cache.routes)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
