"""
Tests for the breakpoint compiler.

Covers each feature clause (ratio, width, pixel density), the
combiner, and the bp() call contract.

Tests cover:
    - The four min/max shapes per feature
    - Orientation keywords and the device flag
    - Vendor-prefixed density alternatives
    - Clause order and joiners
    - Garbage in, garbage out
"""

import pytest
from mediabp.model import BreakpointParams, Orientation, RangeSpec
from mediabp.compiler import (
    bp,
    combine_clauses,
    compile_condition,
    density_clause,
    feature_clauses,
    ratio_clause,
    width_clause,
)


DENSITY_MIN_1_5 = (
    "(-webkit-min-device-pixel-ratio: 1.5), "
    "(min--moz-device-pixel-ratio: 1.5), "
    "(-o-min-device-pixel-ratio: 1.5), "
    "(min-device-pixel-ratio: 1.5), "
    "(min-resolution: 1.5dppx)"
)

DENSITY_MAX_2 = (
    "(-webkit-max-device-pixel-ratio: 2), "
    "(max--moz-device-pixel-ratio: 2), "
    "(-o-max-device-pixel-ratio: 2), "
    "(max-device-pixel-ratio: 2), "
    "(max-resolution: 2dppx)"
)


class TestRatioClause:
    """Test aspect-ratio and orientation clauses."""
    
    def test_unset(self):
        assert ratio_clause(0) is None
        assert ratio_clause([0, 0]) is None
    
    def test_min_only(self):
        assert ratio_clause("1/1") == "(min-aspect-ratio: 1/1)"
    
    def test_max_only(self):
        assert ratio_clause([0, "1/1"]) == "(max-aspect-ratio: 1/1)"
    
    def test_range(self):
        """Min clause comes first, then max clause."""
        assert ratio_clause(("1/1", "2/1")) == (
            "(min-aspect-ratio: 1/1) and (max-aspect-ratio: 2/1)"
        )
    
    def test_device_flag(self):
        """Device flag switches to device-aspect-ratio."""
        assert ratio_clause("16/9", device=True) == "(min-device-aspect-ratio: 16/9)"
        assert ratio_clause((0, "4/3"), device=True) == "(max-device-aspect-ratio: 4/3)"
    
    @pytest.mark.parametrize("keyword", ["landscape", "portrait"])
    def test_orientation_keyword(self, keyword):
        assert ratio_clause(keyword) == f"(orientation: {keyword})"
    
    def test_orientation_enum(self):
        assert ratio_clause(Orientation.PORTRAIT) == "(orientation: portrait)"
    
    def test_orientation_ignores_device_flag(self):
        assert ratio_clause("landscape", device=True) == "(orientation: landscape)"
    
    def test_orientation_in_single_item_sequence(self):
        assert ratio_clause(["landscape"]) == "(orientation: landscape)"
    
    def test_orientation_in_range_spec_with_unset_maximum(self):
        assert ratio_clause(RangeSpec(minimum="landscape", maximum=0)) == "(orientation: landscape)"
    
    def test_no_vendor_alternatives(self):
        """Ratio clauses never contain comma-separated alternatives."""
        for clause in [ratio_clause("1/1"), ratio_clause((0, "1/1")), ratio_clause(("1/1", "2/1"), device=True)]:
            assert "," not in clause
            assert "-webkit-" not in clause
            assert "-moz-" not in clause
    
    def test_orientation_with_maximum_is_passed_through(self):
        """A keyword with an upper bound is not an orientation; it is emitted as-is."""
        assert ratio_clause(("landscape", "2/1")) == (
            "(min-aspect-ratio: landscape) and (max-aspect-ratio: 2/1)"
        )


class TestWidthClause:
    """Test viewport width clauses."""
    
    def test_unset(self):
        assert width_clause(0) is None
        assert width_clause("") is None
        assert width_clause(None) is None
    
    def test_min_only(self):
        assert width_clause("800px") == "(min-width: 800px)"
    
    def test_max_only(self):
        assert width_clause((0, "480px")) == "(max-width: 480px)"
    
    def test_range(self):
        assert width_clause(("481px", "1024px")) == (
            "(min-width: 481px) and (max-width: 1024px)"
        )
    
    def test_range_spec_with_unset_maximum(self):
        """Zero or empty maximum on a RangeSpec is unconstrained."""
        assert width_clause(RangeSpec(minimum="1px", maximum=0)) == "(min-width: 1px)"
        assert width_clause(RangeSpec(minimum=0, maximum="")) is None
    
    def test_no_vendor_alternatives(self):
        """Width clauses never contain comma-separated alternatives."""
        assert "," not in width_clause(("481px", "1024px"))
        assert "-webkit-" not in width_clause("800px")


class TestDensityClause:
    """Test pixel-density clauses."""
    
    def test_unset(self):
        assert density_clause(0) is None
        assert density_clause((0, 0)) is None
    
    def test_min_only(self):
        assert density_clause(1.5) == DENSITY_MIN_1_5
    
    def test_min_only_has_five_alternatives(self):
        assert len(density_clause(2).split(", ")) == 5
    
    def test_range(self):
        """Range is the min-side list AND the max-side list."""
        assert density_clause((1.5, 2)) == f"{DENSITY_MIN_1_5} and {DENSITY_MAX_2}"
    
    def test_range_has_five_alternatives_per_side(self):
        min_side, max_side = density_clause((1, 3)).split(" and ")
        assert len(min_side.split(", ")) == 5
        assert len(max_side.split(", ")) == 5
        assert "max-" not in min_side
        assert "min-" not in max_side
    
    def test_range_spec_with_unset_maximum(self):
        assert density_clause(RangeSpec(minimum=2, maximum=0)) == density_clause(2)
    
    def test_max_only_uses_maximum_value(self):
        """Legacy device-pixel-ratio alternative carries the maximum, not the unset minimum."""
        assert density_clause((0, 2)) == (
            "(max-device-pixel-ratio: 2), (max-resolution: 2dppx)"
        )
    
    def test_max_only_has_no_min_token(self):
        clause = density_clause((0, 1.25))
        assert "min-" not in clause
        assert "(max-device-pixel-ratio: 0)" not in clause
    
    def test_moz_token_kept_verbatim(self):
        assert "(min--moz-device-pixel-ratio: 2)" in density_clause(2)
    
    def test_resolution_unit(self):
        assert "(min-resolution: 3dppx)" in density_clause(3)
    
    def test_string_density_passed_through(self):
        assert "(min-resolution: 1.3dppx)" in density_clause("1.3")


class TestCombineClauses:
    """Test the clause combiner."""
    
    def test_all_absent(self):
        assert combine_clauses(None, None, None) is None
    
    def test_single_clause_has_no_joiner(self):
        assert combine_clauses(None, "(min-width: 1px)", None) == "(min-width: 1px)"
    
    def test_joins_in_order(self):
        assert combine_clauses("(a)", "(b)", "(c)") == "(a) and (b) and (c)"
    
    def test_skips_empty_clauses(self):
        assert combine_clauses("(a)", "", None, "(c)") == "(a) and (c)"


class TestCompileCondition:
    """Test full compilation of BreakpointParams."""
    
    def test_defaults_produce_no_condition(self):
        assert compile_condition(BreakpointParams()) is None
    
    def test_clause_order_is_ratio_width_density(self):
        params = BreakpointParams(ratio="2/1", width="800px", density=2)
        condition = compile_condition(params)
        assert condition.index("aspect-ratio") < condition.index("width") < condition.index("resolution")
        assert not condition.startswith(" and ")
        assert not condition.endswith(" and ")
    
    def test_feature_clauses_order(self):
        clauses = feature_clauses(BreakpointParams(width="1px"))
        assert clauses == [None, "(min-width: 1px)", None]
    
    def test_accepts_range_spec_fields(self):
        params = BreakpointParams(width=RangeSpec(minimum=0, maximum="600px"))
        assert compile_condition(params) == "(max-width: 600px)"
    
    def test_is_deterministic(self):
        params = BreakpointParams(ratio=("1/1", "2/1"), width="800px", density=(1, 2))
        assert compile_condition(params) == compile_condition(params)


class TestBp:
    """Test the bp() shorthand against documented scenarios."""
    
    def test_orientation(self):
        assert bp("landscape") == "(orientation: landscape)"
    
    def test_min_ratio(self):
        assert bp("1/1") == "(min-aspect-ratio: 1/1)"
    
    def test_max_ratio(self):
        assert bp(r=[0, "1/1"]) == "(max-aspect-ratio: 1/1)"
    
    def test_min_width(self):
        assert bp(w="800px") == "(min-width: 800px)"
    
    def test_ratio_and_width(self):
        assert bp(r="2/1", w="800px") == "(min-aspect-ratio: 2/1) and (min-width: 800px)"
    
    def test_no_arguments(self):
        assert bp() is None
    
    def test_device_flag(self):
        assert bp("4/3", d=True) == "(min-device-aspect-ratio: 4/3)"
    
    def test_density_only(self):
        assert bp(pd=1.5) == DENSITY_MIN_1_5
    
    def test_garbage_passes_through(self):
        """Malformed values are emitted verbatim, never rejected."""
        assert bp(w=("wide", "narrow")) == "(min-width: wide) and (max-width: narrow)"
