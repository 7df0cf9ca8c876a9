"""
Breakpoint Compiler

Compiles BreakpointParams into a CSS media-query condition string.

Pipeline:
    1. Range Resolver      (mediabp.ranges)
    2. Ratio clause        -> (min-aspect-ratio: ...) / (orientation: ...)
    3. Width clause        -> (min-width: ...)
    4. Density clause      -> vendor-prefixed device-pixel-ratio + resolution
    5. Combiner            -> clauses joined with " and "

Every step is pure. Nothing is validated: a malformed value is emitted
verbatim and simply fails to match in the browser.
"""

from typing import Any, Callable, List, Optional

from mediabp.model import BreakpointParams, Orientation, RangeInput, RangeSpec
from mediabp.ranges import is_unset, resolve_range


CLAUSE_JOINER = " and "
ALTERNATIVE_JOINER = ", "

RESOLUTION_UNIT = "dppx"

_ORIENTATIONS = {o.value for o in Orientation}


def _render(value: Any) -> str:
    """Render an opaque token for inclusion in a clause."""
    if isinstance(value, Orientation):
        return value.value
    return str(value)


def _orientation_keyword(spec: RangeSpec) -> Optional[str]:
    """Return the orientation keyword if spec holds one, else None."""
    if spec.maximum is not None:
        return None
    value = spec.minimum
    if isinstance(value, Orientation):
        return value.value
    if isinstance(value, str) and value in _ORIENTATIONS:
        return value
    return None


def _range_clause(
    spec: RangeSpec,
    min_side: Callable[[Any], str],
    max_side: Callable[[Any], str],
) -> Optional[str]:
    """
    Apply the four-way min/max policy shared by every feature.
    
        max set,   min unset -> max side
        max set,   min set   -> min side AND max side
        max unset, min unset -> no clause
        max unset, min set   -> min side
    """
    has_min = not is_unset(spec.minimum)
    
    if spec.maximum is not None:
        if has_min:
            return f"{min_side(spec.minimum)}{CLAUSE_JOINER}{max_side(spec.maximum)}"
        return max_side(spec.maximum)
    
    if has_min:
        return min_side(spec.minimum)
    return None


# =============================================================================
# FEATURE CLAUSES
# =============================================================================


def ratio_clause(value: RangeInput, device: bool = False) -> Optional[str]:
    """
    Build the aspect-ratio (or orientation) clause.
    
    Args:
        value: Ratio range ("16/9", (0, "1/1"), ...) or orientation keyword
        device: Use device-aspect-ratio instead of aspect-ratio
    
    Returns:
        Clause string, or None if no ratio constraint was supplied
    """
    spec = resolve_range(value)
    keyword = _orientation_keyword(spec)
    if keyword is not None:
        return f"(orientation: {keyword})"

    feature = "device-aspect-ratio" if device else "aspect-ratio"
    return _range_clause(
        spec,
        lambda v: f"(min-{feature}: {_render(v)})",
        lambda v: f"(max-{feature}: {_render(v)})",
    )


def width_clause(value: RangeInput) -> Optional[str]:
    """Build the viewport width clause."""
    return _range_clause(
        resolve_range(value),
        lambda v: f"(min-width: {_render(v)})",
        lambda v: f"(max-width: {_render(v)})",
    )


def _density_alternatives(bound: str, value: Any) -> str:
    """
    Comma-separated pixel-density alternatives for one bound.
    
    bound is "min" or "max". The -moz- spelling ("min--moz-...") is the
    legacy Gecko feature name and must stay as-is.
    """
    v = _render(value)
    alternatives = [
        f"(-webkit-{bound}-device-pixel-ratio: {v})",
        f"({bound}--moz-device-pixel-ratio: {v})",
        f"(-o-{bound}-device-pixel-ratio: {v})",
        f"({bound}-device-pixel-ratio: {v})",
        f"({bound}-resolution: {v}{RESOLUTION_UNIT})",
    ]
    return ALTERNATIVE_JOINER.join(alternatives)


def _density_max_only(value: Any) -> str:
    # Legacy alternative takes the maximum, not the unset minimum.
    v = _render(value)
    return ALTERNATIVE_JOINER.join([
        f"(max-device-pixel-ratio: {v})",
        f"(max-resolution: {v}{RESOLUTION_UNIT})",
    ])


def density_clause(value: RangeInput) -> Optional[str]:
    """
    Build the pixel-density clause.
    
    Min-only and range clauses carry five vendor alternatives per bound;
    a max-only clause carries the unprefixed device-pixel-ratio and
    resolution alternatives.
    
    Args:
        value: Density multiplier (1.5) or (min, max) pair
    
    Returns:
        Clause string, or None if no density constraint was supplied
    """
    spec = resolve_range(value)
    
    if spec.maximum is not None and is_unset(spec.minimum):
        return _density_max_only(spec.maximum)
    
    return _range_clause(
        spec,
        lambda v: _density_alternatives("min", v),
        lambda v: _density_alternatives("max", v),
    )


# =============================================================================
# COMBINER
# =============================================================================


def combine_clauses(*clauses: Optional[str]) -> Optional[str]:
    """
    Fold clauses left to right with " and ", skipping absent ones.
    
    Returns:
        Joined condition, or None if every clause was absent
    """
    condition: Optional[str] = None
    for clause in clauses:
        if not clause:
            continue
        if condition is None:
            condition = clause
        else:
            condition = f"{condition}{CLAUSE_JOINER}{clause}"
    return condition


def feature_clauses(params: BreakpointParams) -> List[Optional[str]]:
    """Ratio, width and density clauses, in that order."""
    return [
        ratio_clause(params.ratio, device=params.device),
        width_clause(params.width),
        density_clause(params.density),
    ]


def compile_condition(params: BreakpointParams) -> Optional[str]:
    """
    Compile BreakpointParams into a media-query condition.
    
    Args:
        params: BreakpointParams to compile
    
    Returns:
        Condition string, or None when ratio, width and density are all unset
    """
    return combine_clauses(*feature_clauses(params))


def bp(
    r: RangeInput = 0,
    w: RangeInput = 0,
    pd: RangeInput = 0,
    d: bool = False,
) -> Optional[str]:
    """
    Shorthand for compile_condition(BreakpointParams(r, w, pd, d)).
    
    Examples:
        bp("landscape")          -> "(orientation: landscape)"
        bp(r=(0, "1/1"))         -> "(max-aspect-ratio: 1/1)"
        bp("2/1", "800px")       -> "(min-aspect-ratio: 2/1) and (min-width: 800px)"
        bp()                     -> None
    """
    return compile_condition(BreakpointParams(ratio=r, width=w, density=pd, device=d))


__all__ = [
    "ratio_clause",
    "width_clause",
    "density_clause",
    "combine_clauses",
    "feature_clauses",
    "compile_condition",
    "bp",
]
