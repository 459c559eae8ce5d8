from sqlalchemy import Column, String, Boolean, Integer, Text
from app.database import Base


class Service(Base):
    __tablename__ = "services"
    # AUTOINCREMENT keeps ids of deleted services from being handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    duration = Column(Integer, nullable=False)  # minutes
    price = Column(Integer, nullable=False)  # cents
    active = Column(Boolean, default=True, nullable=False)
    position = Column(Integer, default=0, nullable=False, index=True)
    photo = Column(Text, nullable=True)
    buffer_before = Column(String, default="0", nullable=False)
    buffer_after = Column(String, default="0", nullable=False)
