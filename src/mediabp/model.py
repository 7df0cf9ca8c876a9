"""
Core Breakpoint Model Objects

Defines the data structures the compiler consumes:
    - Orientation (the two orientation keywords)
    - RangeSpec (a resolved min/max pair for one feature)
    - BreakpointParams (the full input of one compilation)
    - MediaRule (params plus an opaque style block)

ARCHITECTURAL RULE:
    These objects:
        - Hold values as opaque tokens ("800px", "16/9", 1.5)
        - Do NOT parse or validate CSS syntax
        - Represent input, not output
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Union


class Orientation(Enum):
    """Orientation keywords accepted in place of an aspect ratio."""
    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"


@dataclass(frozen=True)
class RangeSpec:
    """
    A resolved (minimum, maximum) pair for a single media feature.
    
    Examples:
        "800px"            -> RangeSpec(minimum="800px")
        (0, "1/1")         -> RangeSpec(minimum=0, maximum="1/1")
        ("1/1", "2/1")     -> RangeSpec(minimum="1/1", maximum="2/1")
    
    Properties:
        minimum: Lower bound, or a zero/empty sentinel when unconstrained
        maximum: Upper bound, or None when unconstrained
    
    IMPORTANT:
        minimum > maximum is NOT rejected.
        Values pass through to the emitted condition untouched.
    """

    minimum: Any = 0
    maximum: Optional[Any] = None


# A bare scalar, a (min, max) pair, an already resolved RangeSpec,
# or (ratio only) an Orientation.
RangeInput = Union[str, int, float, None, tuple, list, RangeSpec, Orientation]


@dataclass(frozen=True)
class BreakpointParams:
    """
    Input of a single compilation.
    
    Each field defaults independently; any subset may be supplied.
    
    Properties:
        ratio: 
            Aspect ratio range (e.g. "16/9", (0, "1/1")) or an
            orientation keyword ("landscape", "portrait", Orientation)
        
        width: 
            Viewport width range (e.g. "800px", ("480px", "1024px"))
        
        density: 
            Pixel density range as bare multipliers (e.g. 1.5, (1, 2))
        
        device: 
            Use device-aspect-ratio instead of aspect-ratio.
            Ignored when ratio is an orientation keyword.
    """

    ratio: RangeInput = 0
    width: RangeInput = 0
    density: RangeInput = 0
    device: bool = False


@dataclass(frozen=True)
class MediaRule:
    """
    A style block guarded by breakpoint params.
    
    Properties:
        params: BreakpointParams compiled into the @media condition
        block: Style rules as a string, or a callable returning them.
               Inserted verbatim; never parsed.
    """

    params: BreakpointParams
    block: Union[str, Callable[[], str]] = ""
