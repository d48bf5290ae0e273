from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from user_registry import deps
from user_registry.logging_config import configure_logging
from user_registry.routers.users import router as users_router
from user_registry.settings import Settings, get_settings
from user_registry.user_store import InMemoryUserRegistry, UserRecord

logger = logging.getLogger("user_registry")

APP_VERSION = "1.0.0"

DEMO_USERS = (
    UserRecord(id=None, first_name="John", last_name="Doe", email="john.doe@example.com", age=30),
    UserRecord(
        id=None,
        first_name="Jane",
        last_name="Smith",
        email="jane.smith@example.com",
        age=25,
        phone_number="+15551234567",
    ),
)


def _field_name(loc: tuple) -> str:
    # loc looks like ("body", "firstName") or ("path", "user_id").
    parts = [str(p) for p in loc if p not in ("body", "path", "query")]
    return ".".join(parts) or "body"


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [{"field": _field_name(tuple(e.get("loc", ()))), "message": e.get("msg", "")} for e in exc.errors()]
    logger.info("Rejected invalid request", extra={"path": request.url.path, "error_count": len(errors)})
    return JSONResponse(status_code=400, content={"detail": "Invalid input data", "errors": errors})


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error", extra={"path": request.url.path})
    return JSONResponse(status_code=500, content={"detail": f"Internal server error: {type(exc).__name__}"})


def create_app(
    settings: Optional[Settings] = None,
    registry: Optional[InMemoryUserRegistry] = None,
) -> FastAPI:
    """Build the API around an explicitly owned registry.

    Tests pass their own registry; in production one registry is created per
    app instance.
    """
    s = settings or get_settings()
    configure_logging(s.log_level)

    app = FastAPI(title=s.app_title, version=APP_VERSION)
    app.state.registry = registry if registry is not None else InMemoryUserRegistry()

    if s.seed_demo_users:
        for user in DEMO_USERS:
            app.state.registry.create(user)
        logger.info("Seeded %d demo users", len(DEMO_USERS))

    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
    app.include_router(users_router)

    @app.get("/healthz")
    def healthz(registry: InMemoryUserRegistry = Depends(deps.get_registry)):
        return JSONResponse(
            {
                "ok": True,
                "service": "user-registry",
                "version": APP_VERSION,
                "users": registry.count(),
            }
        )

    @app.get("/configz")
    def configz(settings: Settings = Depends(deps.get_settings_dep)):
        # Nothing secret lives in Settings today; keep this an explicit allow-list anyway.
        return JSONResponse(
            {
                "app_title": settings.app_title,
                "log_level": settings.log_level,
                "seed_demo_users": settings.seed_demo_users,
            }
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "user_registry.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
