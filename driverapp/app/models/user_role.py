"""
User role database model.
"""

from sqlalchemy import Column, Integer, String
from driverapp.app.db.session import Base


class UserRole(Base):
    """Lookup table for the fixed roles. Rows are seeded at startup."""
    __tablename__ = "userroles"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    role_name = Column(String(50), unique=True, nullable=False)

    def __repr__(self):
        return f"<UserRole(id={self.id}, role_name='{self.role_name}')>"
