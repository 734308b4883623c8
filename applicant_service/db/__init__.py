"""Database engine, session factory and declarative base."""

from .database import AsyncSessionLocal, Base, engine, get_db

__all__ = ['AsyncSessionLocal', 'Base', 'engine', 'get_db']
