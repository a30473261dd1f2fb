"""Interfaces shared between the core layer and the world clock feature."""

from .settings import ISettingsManager

__all__ = ["ISettingsManager"]
