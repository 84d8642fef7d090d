"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어 및 라우터 등록.

FastAPI application entry point — Middleware and router registration.
When INIT_SAMPLE_DATA is set, tables and sample members are created on startup.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from querystudy.config import settings
from querystudy.middleware.axiom_logging import AxiomLoggingMiddleware


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """시작 시 샘플 데이터 적재 — Load sample data on startup (local profile)."""
    if settings.INIT_SAMPLE_DATA:
        from querystudy.seed import seed

        await seed()
    yield


app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Axiom API 로깅 미들웨어 — Axiom API request/response logging
app.add_middleware(AxiomLoggingMiddleware)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


# ---------------------------------------------------------------------------
# 라우터 등록 — Router registration
# ---------------------------------------------------------------------------
from querystudy.api import api_router  # noqa: E402

app.include_router(api_router, prefix="/api")
