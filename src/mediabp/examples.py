"""
Example breakpoint presets and rules.

Sample configuration values for a typical responsive layout: phone,
tablet and desktop widths, a retina density step and the two
orientations.
"""
from mediabp.model import BreakpointParams, MediaRule, Orientation
from mediabp.presets import PresetTable


def build_example_presets() -> PresetTable:
    return PresetTable(presets={
        "mobile": BreakpointParams(width=(0, "480px")),
        "tablet": BreakpointParams(width=("481px", "1024px")),
        "desktop": BreakpointParams(width="1025px"),
        "landscape": BreakpointParams(ratio=Orientation.LANDSCAPE),
        "portrait": BreakpointParams(ratio=Orientation.PORTRAIT),
        "widescreen": BreakpointParams(ratio="16/9", device=True),
        "retina": BreakpointParams(density=2),
        "hidpi": BreakpointParams(density=(1.5, 2)),
        "retina-desktop": BreakpointParams(width="1025px", density=2),
    })


def build_example_rules() -> list:
    presets = build_example_presets()
    return [
        MediaRule(params=BreakpointParams(), block="body { margin: 0; }"),
        MediaRule(params=presets.get("mobile"), block=".nav { display: none; }"),
        MediaRule(params=presets.get("tablet"), block=".sidebar { width: 30%; }"),
        MediaRule(params=presets.get("retina"), block=".logo { background-image: url(logo@2x.png); }"),
        MediaRule(params=presets.get("landscape"), block=".hero { height: 60vh; }"),
    ]
