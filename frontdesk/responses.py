"""Shared JSON response writer."""

import json
import logging
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from frontdesk.errors import SerializationError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_TEXT = "HTTP 500: Internal Server Error"


class IndentedJSONResponse(JSONResponse):
    """JSONResponse that pretty-prints its body."""

    def render(self, content: Any) -> bytes:
        try:
            return json.dumps(
                jsonable_encoder(content),
                ensure_ascii=False,
                allow_nan=False,
                indent=1,
            ).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise SerializationError(str(e)) from e


def respond_with_json(status_code: int, payload: Any) -> Response:
    """Build the single response for a request.

    Falls back to a plain-text 500 when the payload cannot be encoded, so the
    caller always gets exactly one terminal response.
    """
    try:
        return IndentedJSONResponse(content=payload, status_code=status_code)
    except SerializationError:
        logger.exception("Failed to encode response payload")
        return PlainTextResponse(INTERNAL_ERROR_TEXT, status_code=500)
