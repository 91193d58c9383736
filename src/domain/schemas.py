"""
Data schemas for the route index.

Wire format (cache file and API body):
    {"length": 2, "routes": [{"name": "X", "route": "x/"}, ...]}

규칙:
- length는 staleness 신호일 뿐, len(routes)와 같을 필요 없음
  (title 추출 실패 페이지는 count에는 포함, routes에는 제외)
"""

from dataclasses import dataclass, field
from typing import Any

from src.domain.constants import CACHE_LENGTH_KEY, CACHE_ROUTES_KEY

# =============================================================================
# Page Route
# =============================================================================

@dataclass(frozen=True)
class PageRoute:
    """Discovered page: display title + route prefix."""
    name: str
    route: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "route": self.route}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PageRoute":
        name = data["name"]
        route = data["route"]
        if not isinstance(name, str) or not isinstance(route, str):
            raise TypeError("route entry fields must be strings")
        return cls(name=name, route=route)


# =============================================================================
# Route Cache
# =============================================================================

@dataclass
class RouteCache:
    """
    Persisted route index.

    length: marker file count at build time (serialized as "length")
    routes: entries in directory-walk order (rebuild 간 순서 보장 없음)
    """
    length: int = 0
    routes: list[PageRoute] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용."""
        return {
            CACHE_LENGTH_KEY: self.length,
            CACHE_ROUTES_KEY: [r.to_dict() for r in self.routes],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "RouteCache":
        """
        Wire dict → RouteCache.

        Raises:
            TypeError / KeyError / ValueError: 형식 불일치
        """
        if not isinstance(data, dict):
            raise TypeError("route cache must be a JSON object")

        length = data[CACHE_LENGTH_KEY]
        # bool은 int의 subclass라 별도로 거절
        if not isinstance(length, int) or isinstance(length, bool):
            raise TypeError("length must be an integer")
        if length < 0:
            raise ValueError("length must be non-negative")

        raw_routes = data[CACHE_ROUTES_KEY]
        if not isinstance(raw_routes, list):
            raise TypeError("routes must be an array")

        return cls(
            length=length,
            routes=[PageRoute.from_dict(r) for r in raw_routes],
        )

    def route_set(self) -> set[tuple[str, str]]:
        """Unordered (name, route) pairs, for comparing rebuilds."""
        return {(r.name, r.route) for r in self.routes}
