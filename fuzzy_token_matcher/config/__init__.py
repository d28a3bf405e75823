"""Configuration management for the fuzzy token matcher."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
