import json
import math
from typing import Any

from fastapi.responses import JSONResponse


# Custom JSON encoder that preserves Unicode characters (emojis)
class UnicodeJSONResponse(JSONResponse):
    def render(self, content) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=None,
            separators=(",", ":"),
        ).encode("utf-8")


def success(data: Any = None) -> dict:
    """Wrap a payload in the standard ``{success, data}`` envelope."""
    if data is None:
        return {"success": True}
    return {"success": True, "data": data}


def pagination(page: int, limit: int, total_items: int) -> dict:
    return {
        "page": page,
        "limit": limit,
        "total_pages": math.ceil(total_items / limit) if limit else 0,
        "total_items": total_items,
    }


def paginate(query, page: int, limit: int):
    """Return ``(items, total)`` for one page of an ordered query.

    A page past the end is answered from the count alone, so huge page
    numbers never reach the database as an offset.
    """
    total = query.order_by(None).count()
    offset = (page - 1) * limit
    if offset >= total:
        return [], total
    return query.offset(offset).limit(limit).all(), total
