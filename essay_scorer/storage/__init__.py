"""Persistence for analyzed essays."""

from .essay_store import EssayStore

__all__ = ['EssayStore']
