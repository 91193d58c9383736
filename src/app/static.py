"""
Static page serving.

- /about/ → routes/about/index.html
- 매칭 실패 → routes/not_found.html (404)
- not_found.html도 없으면 기본 404 응답
"""

from pathlib import Path

from starlette.exceptions import HTTPException
from starlette.responses import FileResponse, PlainTextResponse, Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope


class PageFiles(StaticFiles):
    """StaticFiles with a fixed not-found page fallback."""

    def __init__(self, directory: Path, not_found_page: Path):
        super().__init__(directory=directory, html=True, check_dir=False)
        self.not_found_page = not_found_page

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            response = await super().get_response(path, scope)
        except HTTPException as e:
            if e.status_code != 404:
                raise
            return self._not_found()

        if response.status_code == 404:
            return self._not_found()
        return response

    def _not_found(self) -> Response:
        if self.not_found_page.is_file():
            return FileResponse(self.not_found_page, status_code=404, media_type="text/html")
        return PlainTextResponse("Not Found", status_code=404)
