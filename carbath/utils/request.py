# carbath/utils/request.py

import json
from typing import Any

from fastapi import Request
from pydantic import ValidationError


class InvalidJSONBody(ValueError):
    """Request body is not valid JSON."""


async def read_json(request: Request) -> Any:
    """
    Parse the request body as JSON.

    An empty body is treated as an empty object.
    """
    body = await request.body()
    if not body.strip():
        return {}
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidJSONBody(str(e)) from e


def invalid_fields(exc: ValidationError) -> list[str]:
    """Top-level payload fields named in a pydantic ValidationError."""
    fields: list[str] = []
    for err in exc.errors():
        if err["loc"] and str(err["loc"][0]) not in fields:
            fields.append(str(err["loc"][0]))
    return fields
