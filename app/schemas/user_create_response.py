from typing import Any

from pydantic import BaseModel, Field


class UserCreateResponse(BaseModel):
    is_success: bool = Field(..., description="Indicates if the user creation was successful", examples=[True])
    detail: str = Field(..., description="Confirmation message", examples=["User created"])
    result: Any = Field(None, description="Value returned by the insert_user function, if any", examples=[42])
