from typing import Any, List, Tuple, TypedDict

from flask import request
from sqlalchemy.orm import Query

DEFAULT_PER_PAGE = 10
MAX_PER_PAGE = 100


class PageMeta(TypedDict):
    page: int
    per_page: int
    total: int
    total_pages: int


def get_page_args(per_page_arg: str = "per_page") -> Tuple[int, int]:
    """
    Read page/per_page from the query string.

    Non-numeric values fall back to the defaults; per_page is clamped
    to 1..MAX_PER_PAGE and page to >= 1.
    """
    page = request.args.get("page", 1, type=int) or 1
    per_page = request.args.get(per_page_arg, DEFAULT_PER_PAGE, type=int) or DEFAULT_PER_PAGE

    page = max(page, 1)
    per_page = min(max(per_page, 1), MAX_PER_PAGE)
    return page, per_page


def paginate_offset(query: Query, *, page: int, per_page: int) -> Tuple[List[Any], PageMeta]:
    """
    Execute an offset-paginated query. The caller owns ordering.
    """
    pagination = query.paginate(page=page, per_page=per_page, error_out=False)

    return pagination.items, {
        "page": page,
        "per_page": per_page,
        "total": pagination.total,
        "total_pages": pagination.pages,
    }
