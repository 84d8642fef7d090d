"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Sends one structured event per API request to Axiom: method, path,
search parameters, status code, duration, and the error detail of failed
requests. Without an Axiom token/dataset it passes requests through untouched.
"""

import json
import time
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from axiom_py import Client as AxiomClient

from querystudy.config import settings

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

# 오류 상세 최대 길이 — Maximum error detail length kept in an event
_MAX_DETAIL = 500


def _error_detail(body: bytes) -> str:
    """오류 응답 본문에서 detail을 추출합니다.

    Extract FastAPI's ``detail`` from an error response body.
    """
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return body.decode("utf-8", errors="replace")[:_MAX_DETAIL]
    detail = data.get("detail", data) if isinstance(data, dict) else data
    text = detail if isinstance(detail, str) else json.dumps(detail, ensure_ascii=False)
    return text[:_MAX_DETAIL]


def build_event(
    request: Request,
    status_code: int,
    duration_ms: float,
    error: str | None = None,
) -> dict[str, Any]:
    """요청 하나에 대한 Axiom 이벤트를 구성합니다.

    Build the Axiom event for one request. Search conditions arrive as query
    parameters, so they are logged as-is.
    """
    event: dict[str, Any] = {
        "method": request.method,
        "path": request.url.path,
        "status_code": status_code,
        "duration_ms": duration_ms,
    }
    if request.query_params:
        event["query_params"] = dict(request.query_params)
    if request.path_params:
        event["path_params"] = dict(request.path_params)
    if error:
        event["error"] = error
    return event


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs all API requests and responses to Axiom.
    """

    def __init__(self, app: Any, client: AxiomClient | None = None, dataset: str | None = None) -> None:
        super().__init__(app)
        self._dataset: str = dataset if dataset is not None else settings.AXIOM_DATASET
        self._client: AxiomClient | None = client

        if self._client is None and settings.AXIOM_API_TOKEN and self._dataset:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 제외 경로 및 Axiom 미설정시 패스스루 — Pass through skipped paths or unconfigured Axiom
        if request.url.path in _SKIP_PATHS or self._client is None:
            return await call_next(request)

        start_time = time.perf_counter()
        status_code: int = 500
        error: str | None = None
        try:
            response = await call_next(request)
            status_code = response.status_code

            # 에러 응답시 body에서 사유 추출 — Extract error detail from error responses
            if status_code >= 400:
                body = b""
                async for chunk in response.body_iterator:
                    body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                error = _error_detail(body)

                # 소비한 body를 다시 응답으로 반환 — Re-wrap consumed body
                response = Response(
                    content=body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            error = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
            event = build_event(request, status_code, duration_ms, error)
            try:
                self._client.ingest_events(self._dataset, [event])
            except Exception:
                pass  # 로깅 실패가 요청 처리에 영향주지 않도록 — Never break request on log failure

        return response
