from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.db.functions import InsertUserArgs


class UserCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(None, description="First name", examples=["Ana"])
    last_name: Optional[str] = Field(None, description="Last name", examples=["Diaz"])
    email: Optional[str] = Field(None, description="Email, uniqueness is enforced by the database",
                                 examples=["ana@example.com"])
    password: Optional[str] = Field(None, description="Password, forwarded as received", examples=["x"])
    birth_date: Optional[date] = Field(None, alias="birthDate", description="Birth date", examples=["1990-01-01"])
    country_id: Optional[int] = Field(None, description="Country id", examples=[1])
    gender: Optional[str] = Field(None, description="Gender", examples=["F"])
    native_lang_id: Optional[int] = Field(None, description="Native language id", examples=[2])
    target_lang_id: Optional[int] = Field(None, description="Target language id", examples=[3])
    description: Optional[str] = Field(None, description="Free text about the user", examples=[""])

    def to_insert_args(self) -> InsertUserArgs:
        return InsertUserArgs(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            password=self.password,
            birth_date=self.birth_date,
            country_id=self.country_id,
            gender=self.gender,
            native_lang_id=self.native_lang_id,
            target_lang_id=self.target_lang_id,
            description=self.description,
        )
