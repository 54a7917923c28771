"""
Admin model.
"""
from sqlmodel import SQLModel, Field


class Admin(SQLModel, table=True):
    """Admin table - membership grants access to administrative operations."""
    __tablename__ = "admin"

    user_id: int = Field(foreign_key="user.id", primary_key=True)
