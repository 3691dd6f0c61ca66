"""
User database model.

This module defines the User SQLAlchemy model for authentication.
"""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from driverapp.app.db.session import Base


class User(Base):
    """
    User model for authentication.

    Riders and drivers share this table; ``role_id`` tells them apart.
    Rows are created at registration and never updated afterwards.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    username = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash
    role_id = Column(Integer, ForeignKey("userroles.id"), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    role = relationship("UserRole", lazy="raise")

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}', email='{self.email}', role_id={self.role_id})>"
