"""
HTTP boundary for the marker.

Routes:
- GET  /health       liveness probe
- GET  /api/config   read-only task metadata
- POST /api/unlock   access code -> signed session cookie
- POST /api/mark     submission -> verdict (session required)
- POST /api/logout   forget the session cookie

Authorization failures answer 401 with a body that never says why the
check failed. Every other failure is reported as retryable so callers
do not confuse it with a lost session.
"""

import logging
from typing import Any

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from prompt_marker.access import AccessDeniedError, AccessGate, ReauthorizeRequired
from prompt_marker.config import Settings, get_settings
from prompt_marker.content import build_task_config
from prompt_marker.marking import MarkingEngine, clamp_text

logger = logging.getLogger(__name__)


class BadRequestError(Exception):
    """Raised when a request body cannot be read as a JSON object."""


async def _read_json_object(request: Request) -> dict[str, Any]:
    try:
        body = await request.json()
    except ValueError as e:
        raise BadRequestError("Body is not valid JSON") from e
    if not isinstance(body, dict):
        raise BadRequestError("Body is not a JSON object")
    return body


def _gate(request: Request) -> AccessGate:
    return request.app.state.gate


def _engine(request: Request) -> MarkingEngine:
    return request.app.state.engine


def _settings(request: Request) -> Settings:
    return request.app.state.settings


def require_session(request: Request) -> None:
    """Dependency guarding protected routes with the session cookie."""
    settings = _settings(request)
    _gate(request).require(request.cookies.get(settings.cookie_name))


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the marker application.

    Args:
        settings: Configuration settings. Uses global settings if not provided.

    Returns:
        Configured FastAPI application.
    """
    settings = settings or get_settings()

    app = FastAPI(title="Prompt Marker API")
    app.state.settings = settings
    app.state.gate = AccessGate(settings)
    app.state.engine = MarkingEngine(settings)
    app.state.task_config = build_task_config(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=False,
    )

    _register_error_handlers(app)
    _register_routes(app)

    logger.info(
        "Prompt marker ready (word gate %d, session %d minutes)",
        settings.min_words_gate,
        settings.session_minutes,
    )
    return app


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AccessDeniedError)
    async def access_denied(request: Request, exc: AccessDeniedError) -> JSONResponse:
        return JSONResponse(status_code=401, content={"ok": False, "error": "invalid_code"})

    @app.exception_handler(ReauthorizeRequired)
    async def reauthorize(request: Request, exc: ReauthorizeRequired) -> JSONResponse:
        return JSONResponse(
            status_code=401,
            content={"ok": False, "error": "unauthorized", "reauthorize": True},
        )

    @app.exception_handler(BadRequestError)
    async def bad_request(request: Request, exc: BadRequestError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"ok": False, "error": "bad_request", "retryable": True},
        )

    @app.exception_handler(Exception)
    async def server_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"ok": False, "error": "server_error", "retryable": True},
        )


def _register_routes(app: FastAPI) -> None:
    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "service": "prompt-marker"}

    @app.get("/api/config")
    def config(request: Request) -> dict[str, Any]:
        return {"ok": True, **request.app.state.task_config.to_wire()}

    @app.post("/api/unlock")
    async def unlock(request: Request) -> JSONResponse:
        settings = _settings(request)
        try:
            body = await _read_json_object(request)
        except BadRequestError:
            # unreadable bodies get the same answer as a wrong code
            body = {}

        token = _gate(request).unlock(body.get("code"))

        response = JSONResponse(content={"ok": True})
        response.set_cookie(
            key=settings.cookie_name,
            value=token,
            max_age=_gate(request).ttl_seconds,
            httponly=True,
            secure=settings.cookie_secure,
            samesite="lax",
        )
        return response

    @app.post("/api/mark", dependencies=[Depends(require_session)])
    async def mark(request: Request) -> dict[str, Any]:
        settings = _settings(request)
        body = await _read_json_object(request)
        raw = body.get("answerText") or body.get("answer") or ""
        answer_text = clamp_text(raw, settings.max_answer_chars)

        verdict = _engine(request).mark(answer_text)
        return {"ok": True, "result": verdict.to_wire()}

    @app.post("/api/logout")
    def logout(request: Request) -> JSONResponse:
        settings = _settings(request)
        response = JSONResponse(content={"ok": True})
        response.delete_cookie(
            key=settings.cookie_name,
            httponly=True,
            secure=settings.cookie_secure,
            samesite="lax",
        )
        return response
