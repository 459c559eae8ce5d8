from pydantic import Field, field_validator
from typing import Optional, List
from app.schemas.base_schema import CamelModel, reject_null


class ServiceBase(CamelModel):
    name: str = Field(..., min_length=1, examples=["Classic Massage"])
    description: Optional[str] = Field(None, examples=["Full body relaxation massage"])
    duration: int = Field(..., gt=0, description="Duration in minutes", examples=[60])
    price: int = Field(..., ge=0, description="Price in cents", examples=[9000])
    active: bool = True
    photo: Optional[str] = Field(None, description="Image URL or base64 payload")
    buffer_before: str = Field("0", description="Minutes blocked before the appointment")
    buffer_after: str = Field("0", description="Minutes blocked after the appointment")


class ServiceCreate(ServiceBase):
    position: Optional[int] = Field(None, ge=0, description="Defaults to the end of the list")


class ServiceUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    duration: Optional[int] = Field(None, gt=0)
    price: Optional[int] = Field(None, ge=0)
    active: Optional[bool] = None
    position: Optional[int] = Field(None, ge=0)
    photo: Optional[str] = None
    buffer_before: Optional[str] = None
    buffer_after: Optional[str] = None

    @field_validator(
        "name", "duration", "price", "active", "position", "buffer_before", "buffer_after",
        mode="before",
    )
    @classmethod
    def fields_not_null(cls, v):
        return reject_null(v)


class ServiceResponse(ServiceBase):
    id: int
    position: int


class PositionUpdate(CamelModel):
    position: int = Field(..., ge=0)


class ServiceOrder(CamelModel):
    service_ids: List[int]


class DeleteResponse(CamelModel):
    success: bool
