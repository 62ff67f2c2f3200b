"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer keeps API routes apart from database operations,
following the Repository pattern.
"""

from app.crud import company, job

__all__ = ["company", "job"]
