"""
Domain Constants: service-wide constants.

Filenames, URL paths and defaults shared by the route index,
the HTTP glue and the CLI.
"""

# =============================================================================
# Page Tree (페이지 트리 구조)
# =============================================================================
# routes/
# ├── index.html          # route ""
# ├── not_found.html      # fallback page
# ├── about/index.html    # route "about/"
# └── docs/intro/index.html  # route "docs/intro/"

MARKER_FILENAME = "index.html"
NOT_FOUND_FILENAME = "not_found.html"
DEFAULT_PAGES_ROOT = "routes"

# Separator appended after every directory segment of a route
ROUTE_SEPARATOR = "/"

# =============================================================================
# Route Cache (캐시 파일)
# =============================================================================
# {"length": <int>, "routes": [{"name": <str>, "route": <str>}, ...]}

DEFAULT_CACHE_FILENAME = "routes.json"
CACHE_LENGTH_KEY = "length"
CACHE_ROUTES_KEY = "routes"
CACHE_LOCK_SUFFIX = ".lock"
CACHE_LOCK_TIMEOUT = 10.0

# =============================================================================
# HTTP
# =============================================================================

API_PREFIX = "/api/v0"
ROUTES_API_PATH = "/routes"  # API_PREFIX 기준
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
