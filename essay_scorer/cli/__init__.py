"""Command-line interface module for the essay scorer."""

from .analysis_cli import AnalysisCLI, main
from .arguments import ArgumentParser

__all__ = ['AnalysisCLI', 'ArgumentParser', 'main']
