"""
Range Resolver

Normalizes a feature argument into an explicit RangeSpec.

Accepted shapes:
    - bare scalar:       "800px"          -> (800px, None)
    - 1-element sequence ["800px"]        -> (800px, None)
    - 2-element sequence [0, "1/1"]       -> (0, 1/1)
    - RangeSpec                           -> unchanged

A zero or empty value in either position means "unconstrained on that
bound", not "constrained to zero".
"""

import warnings
from typing import Any

from mediabp.model import RangeInput, RangeSpec


def is_unset(value: Any) -> bool:
    """True if value is the zero/empty sentinel (None, 0, 0.0, "")."""
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, str):
        return value.strip() == ""
    return False


def resolve_range(value: RangeInput) -> RangeSpec:
    """
    Resolve a scalar or (min, max) sequence into a RangeSpec.
    
    Element 1 is always the minimum; element 2, if present and set,
    is the maximum. No ordering or bounds checks are made.
    
    Args:
        value: Scalar, list/tuple of 1-2 items, or RangeSpec
    
    Returns:
        RangeSpec with maximum=None when no upper bound was supplied,
        including a RangeSpec whose maximum is a sentinel
    """
    if isinstance(value, RangeSpec):
        if value.maximum is not None and is_unset(value.maximum):
            return RangeSpec(minimum=value.minimum, maximum=None)
        return value
    
    if isinstance(value, (list, tuple)):
        if len(value) == 0:
            return RangeSpec()
        if len(value) > 2:
            warnings.warn(
                f"Range {list(value)!r} has more than two items; using {list(value[:2])!r}",
                UserWarning,
            )
        minimum = value[0]
        maximum = value[1] if len(value) > 1 else None
        if is_unset(maximum):
            maximum = None
        return RangeSpec(minimum=minimum, maximum=maximum)
    
    return RangeSpec(minimum=value)


__all__ = ["is_unset", "resolve_range"]
