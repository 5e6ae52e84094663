from sqlalchemy import Column, DateTime, Integer, String, func

from models.base import Base
from constants.roles import STANDARD_USER


class User(Base):
    """
    Console user. Only identity and role are read by the team screen.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    role = Column(Integer, nullable=False, default=STANDARD_USER, server_default=str(STANDARD_USER), index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
