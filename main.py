# type: ignore
# pyright: reportGeneralTypeIssues=false
# pyright: reportOptionalMemberAccess=false
"""
Suggestion Service
==================
Collects suggested names (with description, geo-locations and the
submitter's email) for review, and exposes list, delete and count
operations over them.

Storage is in-memory unless DATABASE_URL points at a SQL database.

Port: 8005
"""
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from suggestion_service.controllers import suggestion_controller, system_controller
from suggestion_service.core.config import settings
from suggestion_service.core.dependencies import get_suggested_name_repo
from suggestion_service.core.logging import get_logger
from suggestion_service.metrics.prometheus import SUGGESTIONS_REJECTED
from suggestion_service.middleware import MetricsMiddleware, RequestIDMiddleware
from suggestion_service.repositories.sql_repository import SqlSuggestedNameRepository
from suggestion_service.schemas import ErrorResponse
from suggestion_service.services.suggestion_service import SuggestionService

logger = get_logger(settings.SERVICE_NAME)


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    repo = get_suggested_name_repo()
    try:
        if isinstance(repo, SqlSuggestedNameRepository):
            repo.create_schema()
        SuggestionService(repo).seed_gauges()
    except Exception as exc:
        logger.error("Storage not ready at startup, requests may fail: %s", exc)
    yield
    repo.dispose()
    logger.info("Shutting down — storage resources released")


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Suggestion Service",
    description="Accepts, lists and removes suggested names.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
    responses={
        400: {"model": ErrorResponse, "description": "Bad request"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)

app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Exception handlers ────────────────────────────────────────────────────
def _error_body(request: Request, error: str, detail) -> dict:
    return ErrorResponse(
        error=error,
        detail=detail,
        request_id=getattr(request.state, "request_id", None),
    ).model_dump()


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Every malformed request is a 400 here, not FastAPI's default 422.
    detail = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    if request.method == "POST" and request.url.path == f"{settings.API_PREFIX}/suggestions":
        SUGGESTIONS_REJECTED.labels(reason="validation").inc()
    logger.info("Request rejected: %s %s: %s", request.method, request.url.path, detail)
    return JSONResponse(status_code=400, content=_error_body(request, "validation_error", detail))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    error = HTTPStatus(exc.status_code).phrase.lower().replace(" ", "_")
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, error, detail),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": req_id})
    return JSONResponse(
        status_code=500,
        content=_error_body(request, "internal_server_error", str(exc)),
    )


# ── Routers ───────────────────────────────────────────────────────────────
app.include_router(system_controller.router)
app.include_router(suggestion_controller.router)


# ── Entrypoint ────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")
