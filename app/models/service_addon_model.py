from sqlalchemy import Column, String, Boolean, Integer, Text
from app.database import Base


class ServiceAddon(Base):
    __tablename__ = "service_addons"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    price = Column(Integer, nullable=False)  # cents
    duration = Column(Integer, default=0, nullable=False)  # extra minutes
    photo = Column(Text, nullable=True)
    active = Column(Boolean, default=True, nullable=False)
    display_on_booking_page = Column(Boolean, default=True, nullable=False)
    add_price_to_deposit = Column(Boolean, default=False, nullable=False)
    position = Column(Integer, default=0, nullable=False, index=True)
