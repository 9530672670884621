from pydantic import BaseModel, EmailStr, Field
from typing import Any, Dict, List, Optional

CONTACT_STATUS_PATTERN = "^(new|read|replied|archived)$"
CONTACT_SETTING_PATTERN = "^(headquarters|contact|businessHours)$"


class ContactFormCreate(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=50)
    company: str = Field(..., min_length=1, max_length=255)
    subject: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)
    attachments: List[str] = Field(default_factory=list)


class ContactFormUpdate(BaseModel):
    status: Optional[str] = Field(None, pattern=CONTACT_STATUS_PATTERN)
    notes: Optional[str] = None


class NotificationCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    type: str = Field(..., min_length=1, max_length=50)
    description: str = Field(..., min_length=1)
    emails: List[EmailStr] = Field(..., min_length=1)
    enabled: bool = True


class NotificationUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=120)
    type: Optional[str] = Field(None, min_length=1, max_length=50)
    description: Optional[str] = Field(None, min_length=1)
    emails: Optional[List[EmailStr]] = Field(None, min_length=1)
    enabled: Optional[bool] = None


class ContactSettingUpsert(BaseModel):
    type: str = Field(..., pattern=CONTACT_SETTING_PATTERN)
    data: Dict[str, Any]


class OfficeCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    location: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1)
    status: bool = True


class OfficeUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=120)
    location: Optional[str] = Field(None, min_length=1, max_length=255)
    address: Optional[str] = Field(None, min_length=1)
    status: Optional[bool] = None
