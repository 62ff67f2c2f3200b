"""
User model for authentication.

Admin users may create, update and delete jobs and companies; everyone else
has read access only.
"""

from sqlalchemy import Column, Integer, String, Boolean, DateTime, func
from app.core.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(25), unique=True, nullable=False, index=True)
    hashed_password = Column(String, nullable=False)

    # Profile
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, nullable=False)

    is_admin = Column(Boolean, default=False, nullable=False)  # Admin role for mutating endpoints

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}', is_admin={self.is_admin})>"
