"""Buyer profile module."""
from .service import ProfileService

__all__ = ["ProfileService"]
