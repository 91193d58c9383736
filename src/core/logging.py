"""
Process logging setup.

레벨 결정 순서:
1. LOG_LEVEL 환경 변수 (.env 포함)
2. default.yaml의 logging.level
3. INFO
"""

import logging
import os
from typing import Any

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_LEVEL = "INFO"


def resolve_log_level(config: dict[str, Any]) -> int:
    """
    설정 + 환경 변수에서 로그 레벨 결정.

    알 수 없는 레벨 이름은 INFO로 처리.
    """
    name = os.getenv("LOG_LEVEL") or config.get("logging", {}).get(
        "level", DEFAULT_LOG_LEVEL
    )
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(config: dict[str, Any]) -> int:
    """
    루트 로거 설정.

    Returns:
        적용된 로그 레벨
    """
    level = resolve_log_level(config)
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    logging.getLogger("src").setLevel(level)
    return level
