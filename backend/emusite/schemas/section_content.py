from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional, Union

SECTION_STATUS_PATTERN = "^(Active|Inactive)$"


class SectionCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    title: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    status: str = Field("Active", pattern=SECTION_STATUS_PATTERN)
    badge: Optional[Dict[str, Any]] = None
    actions: List[Dict[str, Any]] = Field(default_factory=list)
    media: Optional[Union[Dict[str, Any], List[Dict[str, Any]]]] = None
    features: List[Dict[str, Any]] = Field(default_factory=list)
    map_points: List[Dict[str, Any]] = Field(default_factory=list)
    feature_title: Optional[str] = None
    feature_subtitle: Optional[str] = None
    map_title: Optional[str] = None
    map_subtitle: Optional[str] = None
    thumbnail: Optional[str] = None


class SectionUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    status: Optional[str] = Field(None, pattern=SECTION_STATUS_PATTERN)
    badge: Optional[Dict[str, Any]] = None
    actions: Optional[List[Dict[str, Any]]] = None
    media: Optional[Union[Dict[str, Any], List[Dict[str, Any]]]] = None
    features: Optional[List[Dict[str, Any]]] = None
    map_points: Optional[List[Dict[str, Any]]] = None
    feature_title: Optional[str] = None
    feature_subtitle: Optional[str] = None
    map_title: Optional[str] = None
    map_subtitle: Optional[str] = None
    thumbnail: Optional[str] = None
