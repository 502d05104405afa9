"""Routing of resources to handlers by media type."""

from .classify import CATEGORIES, classify, classify_file_name

__all__ = ["CATEGORIES", "classify", "classify_file_name"]
