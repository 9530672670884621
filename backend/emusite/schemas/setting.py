from pydantic import BaseModel, EmailStr, Field
from typing import Any, Dict, List, Optional


class WebsiteSettings(BaseModel):
    site_name: str = Field(..., min_length=1, max_length=200)
    site_description: str = ""
    logo: str = ""
    favicon: str = ""


class SMTPSettings(BaseModel):
    host: str = Field(..., min_length=1)
    port: int = Field(..., ge=1, le=65535)
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    from_email: Optional[EmailStr] = None


class SMTPTest(SMTPSettings):
    test_email: Optional[EmailStr] = None


class SEOSettingsUpdate(BaseModel):
    description: Optional[str] = None
    keywords: Optional[str] = None
    og_image: Optional[str] = None
    robots_txt: Optional[str] = None
    google_verification: Optional[str] = None
    bing_verification: Optional[str] = None
    custom_meta_tags: Optional[List[Dict[str, Any]]] = None
