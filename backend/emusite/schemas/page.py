from pydantic import BaseModel, Field
from typing import Any, Dict, Optional
from . import SLUG_PATTERN

PAGE_STATUS_PATTERN = "^(Draft|Published|Archived)$"


class PageCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    slug: str = Field(..., min_length=1, max_length=200, pattern=SLUG_PATTERN)
    status: str = Field(..., pattern=PAGE_STATUS_PATTERN)
    content: str = ""
    hero: Optional[Dict[str, Any]] = None
    seo: Optional[Dict[str, Any]] = None


class PageUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    slug: Optional[str] = Field(None, min_length=1, max_length=200, pattern=SLUG_PATTERN)
    status: Optional[str] = Field(None, pattern=PAGE_STATUS_PATTERN)
    content: Optional[str] = None
    hero: Optional[Dict[str, Any]] = None
    seo: Optional[Dict[str, Any]] = None
