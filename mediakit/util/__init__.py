"""Shared utilities."""

from .env_file import EnvFile
from .result import Result

__all__ = [
    "EnvFile",
    "Result",
]
