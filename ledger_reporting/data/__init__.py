"""Data access layer."""

from .horizon_client import HorizonClient

__all__ = ["HorizonClient"]
