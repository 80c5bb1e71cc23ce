import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, get_settings
from .middleware.audit import audit_middleware
from .middleware.cors import cors_middleware
from .middleware.errors import error_middleware
from .routers import availability, bookings
from .services.notifications import SmtpMailer
from .services.slots import SlotRegistry

async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = "Method not allowed" if exc.status_code == 405 else exc.detail
    return JSONResponse(status_code=exc.status_code, content={"error": detail})


def create_app(
    settings: Settings | None = None,
    registry: SlotRegistry | None = None,
    mailer: SmtpMailer | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(title="Car Bath Booking API")

    # Owned per app instance; restart = empty registry
    app.state.settings = settings
    app.state.slot_registry = registry if registry is not None else SlotRegistry()
    app.state.mailer = mailer or SmtpMailer(settings)

    # ===== Middleware order (last registered runs first) =====
    app.middleware("http")(error_middleware)
    app.middleware("http")(cors_middleware)
    app.middleware("http")(audit_middleware)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(bookings.router)
    app.include_router(availability.router)

    return app


app = create_app()
