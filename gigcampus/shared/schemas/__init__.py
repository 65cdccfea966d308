"""Shared schemas module."""

from gigcampus.shared.schemas.base import BaseSchema, FrozenSchema

__all__ = ["BaseSchema", "FrozenSchema"]
