"""Configuration for the essay scoring system."""

from .settings import AnalysisConfig

__all__ = ['AnalysisConfig']
