"""Axiom API 로깅 미들웨어.

Axiom request logging middleware.
Sends one structured event per API request: method, path, query params,
status code, duration and, for failed requests, the error detail.
"""

import json
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from querypractice.config import settings

# 로깅 제외 경로 - Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

_MAX_ERROR_LEN = 500


def _error_detail(body: bytes) -> str:
    """에러 응답 body에서 사유를 추출합니다."""
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return body.decode("utf-8", errors="replace")[:_MAX_ERROR_LEN]

    detail = data.get("detail", data) if isinstance(data, dict) else data
    detail = detail if isinstance(detail, str) else json.dumps(detail, ensure_ascii=False)
    return detail[:_MAX_ERROR_LEN]


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Logs every API request to Axiom. Passes requests straight through when
    no Axiom token/dataset is configured.
    """

    def __init__(self, app: Any, client: AxiomClient | None = None) -> None:
        super().__init__(app)
        self._dataset: str = settings.AXIOM_DATASET
        self._client: AxiomClient | None = client

        if self._client is None and settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in _SKIP_PATHS or self._client is None:
            return await call_next(request)

        start_time = time.time()
        log_event: dict[str, Any] = {
            "method": request.method,
            "path": request.url.path,
        }
        if request.query_params:
            log_event["query_params"] = dict(request.query_params)

        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code

            # 에러 응답은 body를 읽어 사유를 기록 - read the body of error responses
            if status_code >= 400:
                body = b""
                async for chunk in response.body_iterator:
                    body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                log_event["error"] = _error_detail(body)

                # 소비한 body를 다시 응답으로 반환 - Re-wrap consumed body
                response = Response(
                    content=body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            log_event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            log_event["status_code"] = status_code
            log_event["duration_ms"] = round((time.time() - start_time) * 1000, 2)
            try:
                self._client.ingest_events(self._dataset, [log_event])
            except Exception:
                pass  # 로깅 실패가 요청 처리에 영향주지 않도록 - Never break a request on log failure

        return response
