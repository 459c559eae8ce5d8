from pydantic import Field, field_validator
from typing import Optional, List
from app.schemas.base_schema import CamelModel, reject_null


class ServiceAddonBase(CamelModel):
    name: str = Field(..., min_length=1, examples=["Hot Stones"])
    description: Optional[str] = None
    price: int = Field(..., ge=0, description="Price in cents", examples=[2500])
    duration: int = Field(0, ge=0, description="Extra minutes added to the service")
    photo: Optional[str] = None
    active: bool = True
    display_on_booking_page: bool = True
    add_price_to_deposit: bool = False


class ServiceAddonCreate(ServiceAddonBase):
    position: Optional[int] = Field(None, ge=0)


class ServiceAddonUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[int] = Field(None, ge=0)
    duration: Optional[int] = Field(None, ge=0)
    photo: Optional[str] = None
    active: Optional[bool] = None
    display_on_booking_page: Optional[bool] = None
    add_price_to_deposit: Optional[bool] = None
    position: Optional[int] = Field(None, ge=0)

    @field_validator(
        "name", "price", "duration", "active", "display_on_booking_page",
        "add_price_to_deposit", "position",
        mode="before",
    )
    @classmethod
    def fields_not_null(cls, v):
        return reject_null(v)


class ServiceAddonResponse(ServiceAddonBase):
    id: int
    position: int


class ServiceAddonOrder(CamelModel):
    addon_ids: List[int]
