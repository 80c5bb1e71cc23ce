# ловит любое необработанное исключение → JSON 500
# регистрируется первым: ответ ещё проходит через cors/audit

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


async def error_middleware(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={"ok": False, "error": "Internal server error"},
        )
