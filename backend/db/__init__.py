"""Database helpers."""

from .errors import is_unique_violation
from .session import create_engine, create_session_maker

__all__ = ["create_engine", "create_session_maker", "is_unique_violation"]
