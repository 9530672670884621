from typing import Any, Callable, Dict, List

from emusite.utils.pagination import PageMeta


def normalize_pagination(
    items: List[Any],
    normalize_fn: Callable[[Any], Dict[str, Any]],
    meta: PageMeta,
) -> Dict[str, Any]:
    """
    Envelope for offset-paginated list endpoints:
    {"success": true, "data": [...], "pagination": {page, per_page, total, total_pages}}
    """
    return {
        "success": True,
        "data": [normalize_fn(item) for item in items],
        "pagination": dict(meta),
    }
