from pydantic import Field, field_validator
from typing import Optional
from app.schemas.base_schema import CamelModel, reject_null

HHMM = r"^([01]\d|2[0-3]):[0-5]\d$"


class AvailabilityBase(CamelModel):
    provider_id: int
    day_of_week: int = Field(..., ge=0, le=6, description="0 = Sunday ... 6 = Saturday")
    start_time: str = Field(..., pattern=HHMM, examples=["09:00"])
    end_time: str = Field(..., pattern=HHMM, examples=["17:00"])
    is_available: bool = True


class AvailabilityCreate(AvailabilityBase):
    pass


class AvailabilityUpdate(CamelModel):
    provider_id: Optional[int] = None
    day_of_week: Optional[int] = Field(None, ge=0, le=6)
    start_time: Optional[str] = Field(None, pattern=HHMM)
    end_time: Optional[str] = Field(None, pattern=HHMM)
    is_available: Optional[bool] = None

    @field_validator(
        "provider_id", "day_of_week", "start_time", "end_time", "is_available",
        mode="before",
    )
    @classmethod
    def fields_not_null(cls, v):
        return reject_null(v)


class AvailabilityResponse(AvailabilityBase):
    id: int
