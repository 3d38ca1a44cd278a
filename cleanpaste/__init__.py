"""Top-level package for cleanpaste.

This package cleans pasted text by stripping numeric citation markers,
deleting spaces and line breaks, and converting full-width characters to
half-width. The main entry point is `TextCleaner`.
"""

from .config import CleaningConfig, ConfigLoader
from .text.cleaners import TextCleaner, clean_text

__all__ = ["TextCleaner", "CleaningConfig", "ConfigLoader", "clean_text", "__version__"]

__version__ = "0.1.0"
