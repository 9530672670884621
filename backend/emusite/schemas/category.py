from pydantic import BaseModel, Field
from typing import List, Optional
from . import SLUG_PATTERN

CATEGORY_STATUS_PATTERN = "^(Active|Inactive)$"


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    slug: Optional[str] = Field(None, min_length=1, max_length=200, pattern=SLUG_PATTERN)
    description: Optional[str] = None
    icon: Optional[str] = None
    image: Optional[str] = None
    status: str = Field("Active", pattern=CATEGORY_STATUS_PATTERN)
    parent_id: Optional[str] = None


class CategoryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    slug: Optional[str] = Field(None, min_length=1, max_length=200, pattern=SLUG_PATTERN)
    description: Optional[str] = None
    icon: Optional[str] = None
    image: Optional[str] = None
    status: Optional[str] = Field(None, pattern=CATEGORY_STATUS_PATTERN)
    parent_id: Optional[str] = None
    order: Optional[int] = Field(None, ge=0)


class CategoryOrder(BaseModel):
    id: str
    order: int = Field(..., ge=0)


class CategoryReorder(BaseModel):
    categories: List[CategoryOrder] = Field(..., min_length=1)
