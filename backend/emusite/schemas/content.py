from pydantic import BaseModel, Field
from typing import List, Optional
from . import SLUG_PATTERN
from .news import Image, Attachment

CONTENT_STATUS_PATTERN = "^(Active|Draft|Archived)$"


class Feature(BaseModel):
    title: str
    description: str
    icon: Optional[str] = None


class Icon(BaseModel):
    type: str
    value: str


class ContentBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255, pattern=SLUG_PATTERN)
    category: str = Field(..., min_length=1)
    status: str = Field(..., pattern=CONTENT_STATUS_PATTERN)
    content: str = Field(..., min_length=1)


class ContentUpdateBase(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    slug: Optional[str] = Field(None, min_length=1, max_length=255, pattern=SLUG_PATTERN)
    category: Optional[str] = Field(None, min_length=1)
    status: Optional[str] = Field(None, pattern=CONTENT_STATUS_PATTERN)
    content: Optional[str] = Field(None, min_length=1)


class SolutionCreate(ContentBase):
    description: str = Field(..., min_length=1)
    cover_image: Optional[Image] = None
    gallery: List[Image] = Field(default_factory=list)
    features: List[Feature] = Field(default_factory=list)


class SolutionUpdate(ContentUpdateBase):
    description: Optional[str] = Field(None, min_length=1)
    cover_image: Optional[Image] = None
    gallery: Optional[List[Image]] = None
    features: Optional[List[Feature]] = None


class ServiceCreate(ContentBase):
    description: str = Field(..., min_length=1)
    icon: Optional[Icon] = None
    features: List[Feature] = Field(default_factory=list)


class ServiceUpdate(ContentUpdateBase):
    description: Optional[str] = Field(None, min_length=1)
    icon: Optional[Icon] = None
    features: Optional[List[Feature]] = None


class SupportCreate(ContentBase):
    attachments: List[Attachment] = Field(default_factory=list)


class SupportUpdate(ContentUpdateBase):
    attachments: Optional[List[Attachment]] = None
