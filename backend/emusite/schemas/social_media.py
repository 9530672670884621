from pydantic import BaseModel, Field
from typing import Optional


class SocialMediaCreate(BaseModel):
    platform: str = Field(..., min_length=1, max_length=50)
    url: str = Field(..., min_length=1, max_length=500)
    icon: Optional[str] = None
    display_order: int = Field(0, ge=0)
    is_active: bool = True
    qr_code: Optional[str] = None
    has_qr_code: bool = False


class SocialMediaUpdate(BaseModel):
    platform: Optional[str] = Field(None, min_length=1, max_length=50)
    url: Optional[str] = Field(None, min_length=1, max_length=500)
    icon: Optional[str] = None
    display_order: Optional[int] = Field(None, ge=0)
    is_active: Optional[bool] = None
    qr_code: Optional[str] = None
    has_qr_code: Optional[bool] = None
