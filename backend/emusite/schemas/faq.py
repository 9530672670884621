from pydantic import BaseModel, Field
from typing import Optional

FAQ_STATUS_PATTERN = "^(Active|Draft)$"


class FAQCreate(BaseModel):
    question: str = Field(..., min_length=1, max_length=500)
    answer: str = Field(..., min_length=1)
    category: str = "General"
    order: int = Field(0, ge=0)
    status: str = Field("Active", pattern=FAQ_STATUS_PATTERN)


class FAQUpdate(BaseModel):
    question: Optional[str] = Field(None, min_length=1, max_length=500)
    answer: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = None
    order: Optional[int] = Field(None, ge=0)
    status: Optional[str] = Field(None, pattern=FAQ_STATUS_PATTERN)
