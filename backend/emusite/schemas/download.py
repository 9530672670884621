from pydantic import BaseModel, Field
from typing import Optional


class DownloadCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    category: str = Field(..., min_length=1, max_length=100)
    version: Optional[str] = None
    file_url: str = Field(..., min_length=1, max_length=500)
    file_size: Optional[str] = None
    file_type: Optional[str] = None
    thumbnail: Optional[str] = None
    featured: bool = False
    status: str = "Active"


class DownloadUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    version: Optional[str] = None
    file_url: Optional[str] = Field(None, min_length=1, max_length=500)
    file_size: Optional[str] = None
    file_type: Optional[str] = None
    thumbnail: Optional[str] = None
    featured: Optional[bool] = None
    status: Optional[str] = None
