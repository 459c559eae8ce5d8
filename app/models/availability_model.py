from sqlalchemy import Column, String, Boolean, Integer
from app.database import Base


class Availability(Base):
    __tablename__ = "availability"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    provider_id = Column(Integer, nullable=False, index=True)
    day_of_week = Column(Integer, nullable=False)  # 0 = Sunday
    start_time = Column(String, nullable=False)  # HH:MM
    end_time = Column(String, nullable=False)  # HH:MM
    is_available = Column(Boolean, default=True, nullable=False)
