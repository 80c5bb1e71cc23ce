# carbath/middleware/cors.py
# ставит CORS-заголовки на каждый ответ
# OPTIONS отвечает сразу: 200, без тела

from fastapi import Request
from fastapi.responses import Response

ALLOW_METHODS = "GET,POST,OPTIONS"
ALLOW_HEADERS = "Content-Type,Authorization"


def cors_headers(origin: str | None) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": origin or "*",
        "Access-Control-Allow-Methods": ALLOW_METHODS,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
    }


async def cors_middleware(request: Request, call_next):
    headers = cors_headers(request.app.state.settings.cors_origin)

    if request.method == "OPTIONS":
        return Response(status_code=200, headers=headers)

    response = await call_next(request)
    response.headers.update(headers)
    return response
