from sqlalchemy import Column, String, JSON
from app.database import Base


class AISetting(Base):
    __tablename__ = "ai_settings"

    key = Column(String, primary_key=True)
    value = Column(JSON, nullable=True)
    description = Column(String, nullable=True)
