from pydantic import BaseModel, EmailStr, Field
from typing import Optional

ROLE_PATTERN = "^(admin|editor|user)$"
STATUS_PATTERN = "^(active|inactive)$"


class UserCreate(BaseModel):
    email: EmailStr
    name: str = Field(..., min_length=1, max_length=120)
    password: str = Field(..., min_length=6)
    role: str = Field("user", pattern=ROLE_PATTERN)
    status: str = Field("active", pattern=STATUS_PATTERN)


class UserUpdate(BaseModel):
    email: Optional[EmailStr] = None
    name: Optional[str] = Field(None, min_length=1, max_length=120)
    password: Optional[str] = Field(None, min_length=6)
    role: Optional[str] = Field(None, pattern=ROLE_PATTERN)
    status: Optional[str] = Field(None, pattern=STATUS_PATTERN)
