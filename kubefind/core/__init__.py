"""Core business logic."""

from .application import Application
from .matcher import ObjectMatcher

__all__ = ["Application", "ObjectMatcher"]
