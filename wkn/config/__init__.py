"""Configuration module for WKN."""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
