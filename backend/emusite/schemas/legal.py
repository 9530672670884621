from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class LegalCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255)
    type: str = Field(..., min_length=1, max_length=50)
    content: str = Field(..., min_length=1)
    version: str = Field(..., min_length=1, max_length=50)
    effective_date: datetime
    status: str = "Active"


class LegalUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    slug: Optional[str] = Field(None, min_length=1, max_length=255)
    type: Optional[str] = Field(None, min_length=1, max_length=50)
    content: Optional[str] = Field(None, min_length=1)
    version: Optional[str] = Field(None, min_length=1, max_length=50)
    effective_date: Optional[datetime] = None
    status: Optional[str] = None
