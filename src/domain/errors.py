"""
Error definitions for the route index.

규칙:
- 페이지 단위 실패 → 조용히 제외 (에러 아님)
- 캐시 쓰기/전체 읽기/루트 walk 실패 → RouteIndexError로 명시적 실패
- 요청 경계에서 500으로 변환, 프로세스는 계속 동작
"""

from typing import Any


class RouteIndexError(Exception):
    """
    Route index 처리 중 치명적 실패.

    요청 단위로 중단이 필요한 경우에만 사용:
    - 캐시 파일 쓰기 실패
    - 캐시 파일 전체 디코드 실패
    - 페이지 루트 walk 실패
    - rebuild 락 timeout

    Usage:
        raise RouteIndexError("CACHE_CORRUPT", path=str(path), error=str(e))
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    def to_dict(self) -> dict[str, Any]:
        """For logs and JSON error bodies."""
        return {
            "code": self.code,
            **self.context,
        }


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """Error code constants."""

    # === Discovery ===
    ROOT_WALK_FAILED = "ROOT_WALK_FAILED"

    # === Cache ===
    CACHE_WRITE_FAILED = "CACHE_WRITE_FAILED"
    CACHE_CORRUPT = "CACHE_CORRUPT"
    CACHE_UNREADABLE = "CACHE_UNREADABLE"
    CACHE_LOCK_TIMEOUT = "CACHE_LOCK_TIMEOUT"
