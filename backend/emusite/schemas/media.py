from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

MEDIA_CATEGORY_STATUS_PATTERN = "^(Active|Archived)$"
MEDIA_ASSET_STATUS_PATTERN = "^(Active|Archived|Deleted)$"


class AssetCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1, max_length=50)
    category: str = Field(..., min_length=1, max_length=120)
    sub_category: Optional[str] = None


class AssetUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1, max_length=120)
    sub_category: Optional[str] = None
    tags: Optional[List[str]] = None
    status: Optional[str] = Field(None, pattern=MEDIA_ASSET_STATUS_PATTERN)
    metadata: Optional[Dict[str, Any]] = None


class MediaCategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    description: Optional[str] = None
    parent_id: Optional[str] = None


class MediaCategoryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=120)
    description: Optional[str] = None
    parent_id: Optional[str] = None
    status: Optional[str] = Field(None, pattern=MEDIA_CATEGORY_STATUS_PATTERN)


class VersionCreate(BaseModel):
    asset_id: str = Field(..., min_length=1)
    version: str = Field(..., min_length=1, max_length=50)
    changelog: Optional[str] = None


class PropertyCreate(BaseModel):
    asset_id: str = Field(..., min_length=1)
    key: str = Field(..., min_length=1, max_length=120)
    value: str = Field(..., min_length=1)


class DurationUpdate(BaseModel):
    url: str = Field(..., min_length=1)
    duration: float = Field(..., ge=0)
