"""Configuration management for the variables sync tool."""

from .settings import SyncSettings

__all__ = ["SyncSettings"]
