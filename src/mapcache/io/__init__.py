"""Shared file I/O helpers."""

from .atomic import write_bytes_atomic

__all__ = ["write_bytes_atomic"]
