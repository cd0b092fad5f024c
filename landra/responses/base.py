from decimal import Decimal
from typing import Any, Optional

from fastapi import Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel


def serialize_data(data: Any) -> Any:
    """
    Turn response payloads into JSON-ready values.

    Pydantic models are dumped in JSON mode so money stays a two-place decimal
    string and dates become ISO strings. Plain dicts and lists go through
    FastAPI's encoder with the same rule for decimals.
    """
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")
    if isinstance(data, list):
        return [serialize_data(item) for item in data]
    return jsonable_encoder(data, custom_encoder={Decimal: str})


def build_response(
    status_code: int,
    status: str = None,
    message: str = None,
    data: Any = None,
    error: Optional[str] = None,
) -> Response:
    if status_code == 204:
        return Response(status_code=204)

    envelope = {"status": status, "message": message, "error": error}
    body = {key: value for key, value in envelope.items() if value is not None}
    if data is not None:
        body["data"] = serialize_data(data)

    return JSONResponse(content=body, status_code=status_code)
