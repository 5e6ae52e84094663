from sqlalchemy import Column, DateTime, Integer, String, func

from models.base import Base


class Team(Base):
    """
    Administrative grouping of users. Read-only for the team screen.
    """

    __tablename__ = "teams"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
