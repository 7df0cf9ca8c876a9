"""
Media Breakpoint Compiler (mediabp) Package

Compiles compact breakpoint descriptions (aspect ratio, viewport width,
pixel density) into CSS media-query conditions.

ARCHITECTURAL GUARANTEE:
------------------------
The compiler core contains ZERO knowledge of:
    - The style rules being wrapped
    - CSS value syntax (lengths, ratios are opaque tokens)
    - Named breakpoint configuration

Named presets are data passed in by the caller.
The style block is a payload the backend inserts verbatim.
"""

__version__ = "0.1.0"

from mediabp.model import BreakpointParams, MediaRule, Orientation, RangeSpec
from mediabp.compiler import bp, compile_condition

__all__ = [
    "BreakpointParams",
    "MediaRule",
    "Orientation",
    "RangeSpec",
    "bp",
    "compile_condition",
]
