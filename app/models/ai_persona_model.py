from sqlalchemy import Column, String, Boolean, Integer, Text
from app.database import Base


class AIPersona(Base):
    __tablename__ = "ai_personas"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    system_prompt = Column(Text, nullable=False)
    icon = Column(String, default="robot", nullable=False)
    icon_color = Column(String, default="blue", nullable=False)
    active = Column(Boolean, default=True, nullable=False)
