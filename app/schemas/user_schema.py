from pydantic import Field, field_validator
from typing import Optional
from app.schemas.base_schema import CamelModel, reject_null


class UserBase(CamelModel):
    username: str = Field(..., min_length=3)
    full_name: Optional[str] = None
    phone: Optional[str] = None


class UserCreate(UserBase):
    password: str = Field(..., min_length=8)


class UserUpdate(CamelModel):
    full_name: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = Field(None, min_length=8)

    @field_validator("password", mode="before")
    @classmethod
    def fields_not_null(cls, v):
        return reject_null(v)


class UserOut(UserBase):
    id: int
    role: str = "client"


class UserLogin(CamelModel):
    username: str
    password: str


class LoginResponse(CamelModel):
    access_token: str
    token_type: str
    user: UserOut
