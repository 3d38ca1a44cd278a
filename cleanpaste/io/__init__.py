"""I/O helpers for reading source text and writing cleaned output."""

from .text_io import read_input_text, write_output_text

__all__ = ["read_input_text", "write_output_text"]
