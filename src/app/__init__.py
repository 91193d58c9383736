"""
App layer: HTTP 서버 (FastAPI).

역할:
- GET /api/v0/routes → route index (services에 위임)
- 나머지 경로 → 페이지 루트에서 정적 파일 서빙
- ⚠️ 캐시/discovery 로직 없음 (core에 위임)
"""
