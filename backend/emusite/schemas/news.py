from pydantic import BaseModel, Field
from datetime import datetime
from typing import List, Optional
from . import SLUG_PATTERN

NEWS_STATUS_PATTERN = "^(Published|Draft)$"


class Image(BaseModel):
    url: str
    alt: str = ""


class Attachment(BaseModel):
    name: str
    url: str
    size: int = 0


class NewsCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255, pattern=SLUG_PATTERN)
    category: str = Field(..., min_length=1)
    status: str = Field(..., pattern=NEWS_STATUS_PATTERN)
    publish_date: datetime
    content: str = Field(..., min_length=1)
    excerpt: Optional[str] = None
    cover_image: Optional[Image] = None
    attachments: List[Attachment] = Field(default_factory=list)


class NewsUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    slug: Optional[str] = Field(None, min_length=1, max_length=255, pattern=SLUG_PATTERN)
    category: Optional[str] = Field(None, min_length=1)
    status: Optional[str] = Field(None, pattern=NEWS_STATUS_PATTERN)
    publish_date: Optional[datetime] = None
    content: Optional[str] = Field(None, min_length=1)
    excerpt: Optional[str] = None
    cover_image: Optional[Image] = None
    attachments: Optional[List[Attachment]] = None
