# src/memberhub/services/__init__.py
"""Business logic services for the memberhub application."""

from .authorization import AuthorizationGate
from .pagination import Page, PageRequest
from .snowflake import SnowflakeGenerator, generate_id

__all__ = [
    "AuthorizationGate",
    "Page",
    "PageRequest",
    "SnowflakeGenerator",
    "generate_id",
]
