"""
Response envelope shared by every endpoint.

    {
        "status_code": 409,
        "message": "A message with the same title already exists.",
        "data": null,
        "errors": null
    }
"""

from typing import Any, Optional, Union
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """One entry of a 500 response's error list."""

    code: int
    description: str
    message: str
    more_info: Optional[str] = None


class ResponseEnvelope(BaseModel):
    status_code: int
    message: str
    data: Any = None
    errors: Optional[Union[dict[str, list[str]], list[ErrorDetail], list[dict]]] = None


def envelope_response(
    status_code: int,
    message: str,
    data: Any = None,
    errors: Any = None,
) -> JSONResponse:
    """Wrap a payload in ResponseEnvelope and send it with the matching status."""
    envelope = ResponseEnvelope(
        status_code=status_code, message=message, data=data, errors=errors
    )
    return JSONResponse(status_code=status_code, content=jsonable_encoder(envelope))
