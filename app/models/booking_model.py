from sqlalchemy import Column, String, Integer, JSON
from app.database import Base, UTCDateTime


class Booking(Base):
    __tablename__ = "bookings"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    # Plain column, not a foreign key: bookings survive deletion of their service
    service_id = Column(Integer, nullable=False, index=True)
    client_name = Column(String, nullable=False)
    client_phone = Column(String, nullable=False, index=True)
    start_time = Column(UTCDateTime, nullable=False)
    end_time = Column(UTCDateTime, nullable=False)
    provider_id = Column(Integer, nullable=True)
    status = Column(String, default="pending", nullable=False)
    extras = Column(JSON, nullable=True)
    total_price = Column(Integer, nullable=False)  # cents
