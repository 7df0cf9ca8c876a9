"""Backends for breakpoint output generation (CSS)."""

from .css_generator import generate_css, media_query, save_css_file, wrap_block

__all__ = ["generate_css", "media_query", "save_css_file", "wrap_block"]
