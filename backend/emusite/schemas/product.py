from pydantic import BaseModel, Field
from typing import List, Optional
from . import SLUG_PATTERN

PRODUCT_STATUS_PATTERN = "^(Active|Coming Soon|Discontinued)$"


class ProductFile(BaseModel):
    name: str
    url: str
    size: int = 0


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    slug: str = Field(..., min_length=1, max_length=200, pattern=SLUG_PATTERN)
    category_id: str = Field(..., min_length=1)
    status: str = Field(..., pattern=PRODUCT_STATUS_PATTERN)
    description: str = Field(..., min_length=1)
    full_description: Optional[str] = None
    features: str = ""
    specifications: str = ""
    models: str = ""
    images: List[str] = Field(default_factory=list)
    files: List[ProductFile] = Field(default_factory=list)


class ProductUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    slug: Optional[str] = Field(None, min_length=1, max_length=200, pattern=SLUG_PATTERN)
    category_id: Optional[str] = Field(None, min_length=1)
    status: Optional[str] = Field(None, pattern=PRODUCT_STATUS_PATTERN)
    description: Optional[str] = Field(None, min_length=1)
    full_description: Optional[str] = None
    features: Optional[str] = None
    specifications: Optional[str] = None
    models: Optional[str] = None
    images: Optional[List[str]] = None
    files: Optional[List[ProductFile]] = None
