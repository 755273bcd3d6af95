# src/memberhub/db/__init__.py
"""Database configuration and utilities."""

from .session import Base, create_db_engine, create_session_factory, get_db

__all__ = ["Base", "create_db_engine", "create_session_factory", "get_db"]
