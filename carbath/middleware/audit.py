# одна JSON-строка на запрос: route / status / booking_id / время обработки
# booking_id кладут хендлеры бронирования в request.state

import json
import logging
import time

from fastapi import Request

logger = logging.getLogger("carbath.audit")


async def audit_middleware(request: Request, call_next):
    start = time.perf_counter()

    response = await call_next(request)

    route = request.scope.get("route")

    record = {
        "method": request.method,
        "path": request.url.path,
        "route": getattr(route, "path", None),
        "status": response.status_code,
        "booking_id": getattr(request.state, "booking_id", None),
        "client": request.client.host if request.client else None,
        "duration_ms": round((time.perf_counter() - start) * 1000, 1),
    }

    logger.info(json.dumps(record, ensure_ascii=False))

    return response
