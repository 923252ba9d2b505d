from __future__ import annotations

from decimal import Decimal
from typing import Any

import simplejson
from fastapi.responses import JSONResponse

from ..models import format_amount


def _embed_decimals(value: Any) -> Any:
    if isinstance(value, Decimal):
        return simplejson.RawJSON(format_amount(value))
    if isinstance(value, dict):
        return {key: _embed_decimals(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_embed_decimals(item) for item in value]
    return value


class DecimalJSONResponse(JSONResponse):
    """JSON response writing decimals as exact numbers in plain notation."""

    def render(self, content: Any) -> bytes:
        return simplejson.dumps(
            _embed_decimals(content),
            ensure_ascii=False,
            separators=(",", ":"),
        ).encode("utf-8")
