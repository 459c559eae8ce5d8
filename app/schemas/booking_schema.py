from pydantic import Field
from typing import Optional, Any, List
from datetime import datetime
from enum import Enum
from app.schemas.base_schema import CamelModel


class BookingStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    cancelled = "cancelled"
    completed = "completed"


class BookingCreate(CamelModel):
    """Client booking request.

    ``status`` and ``endTime`` are not accepted: unknown keys are dropped by
    pydantic, and the store derives both.
    """

    service_id: int = Field(..., description="ID of the service being booked")
    client_name: str = Field(..., min_length=1)
    client_phone: str = Field(..., min_length=1)
    start_time: datetime = Field(..., description="Booking start time")
    provider_id: Optional[int] = None
    extras: Optional[Any] = None
    total_price: int = Field(..., ge=0, description="Total in cents, add-ons included")


class BookingStatusUpdate(CamelModel):
    status: BookingStatus


class BookingResponse(CamelModel):
    id: int
    service_id: int
    client_name: str
    client_phone: str
    start_time: datetime
    end_time: datetime
    provider_id: Optional[int] = None
    status: BookingStatus = BookingStatus.pending
    extras: Optional[Any] = None
    total_price: int


class BookingQuoteRequest(CamelModel):
    service_id: int
    addon_ids: List[int] = Field(default_factory=list)


class BookingQuote(CamelModel):
    service_id: int
    addon_ids: List[int]
    total_price: int
    total_duration: int
