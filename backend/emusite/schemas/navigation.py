from pydantic import BaseModel, Field
from typing import List, Optional

NAVIGATION_TYPE_PATTERN = "^(header|footer)$"


class NavigationCreate(BaseModel):
    label: str = Field(..., min_length=1, max_length=120)
    url: str = Field(..., min_length=1, max_length=500)
    type: str = Field(..., pattern=NAVIGATION_TYPE_PATTERN)
    active: bool = True
    parent_id: Optional[str] = None


class NavigationUpdate(BaseModel):
    label: Optional[str] = Field(None, min_length=1, max_length=120)
    url: Optional[str] = Field(None, min_length=1, max_length=500)
    type: Optional[str] = Field(None, pattern=NAVIGATION_TYPE_PATTERN)
    active: Optional[bool] = None
    order: Optional[int] = Field(None, ge=0)
    parent_id: Optional[str] = None


class NavigationPosition(BaseModel):
    id: str
    order: int = Field(..., ge=0)
    parent_id: Optional[str] = None


class NavigationReorder(BaseModel):
    items: List[NavigationPosition] = Field(..., min_length=1)
