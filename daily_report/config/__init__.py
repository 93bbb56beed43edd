"""Configuration for the daily analytics report."""

from .settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
