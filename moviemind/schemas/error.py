# moviemind/schemas/error.py

from typing import Optional
from pydantic import BaseModel, Field


class ErrorMessage(BaseModel):
    message: str = Field(description="오류 메시지")


class ValidationErrorMessage(ErrorMessage):
    field: Optional[str] = Field(default=None, description="문제가 된 필드")
