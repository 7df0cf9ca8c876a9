#!/usr/bin/env python3
"""
Demo: Compile breakpoints and generate a stylesheet.

Shows the bp() shorthand, named presets and CSS output.
"""

from mediabp import bp
from mediabp.examples import build_example_presets, build_example_rules
from mediabp.presets import bp_preset
from mediabp.backends import generate_css, save_css_file, media_query


def main():
    print("=" * 80)
    print("BREAKPOINT COMPILER DEMO")
    print("=" * 80)
    
    samples = [
        ('bp("landscape")', bp("landscape")),
        ('bp("1/1")', bp("1/1")),
        ('bp(r=[0, "1/1"])', bp(r=[0, "1/1"])),
        ('bp(w="800px")', bp(w="800px")),
        ('bp(r="2/1", w="800px")', bp(r="2/1", w="800px")),
        ('bp(pd=(1.5, 2))', bp(pd=(1.5, 2))),
        ('bp()', bp()),
    ]
    
    print("\n1. CONDITIONS:")
    print("-" * 80)
    for call, condition in samples:
        print(f"   {call:28} -> @media {media_query(condition)}")
    
    print("\n2. PRESETS:")
    print("-" * 80)
    presets = build_example_presets()
    for name in presets.names():
        print(f"   {name:16} -> {bp_preset(name, presets)}")
    
    print("\n3. STYLESHEET:")
    print("-" * 80)
    rules = build_example_rules()
    print(generate_css(rules))
    
    filename = "breakpoints_demo.css"
    save_css_file(rules, filename)
    print(f"\nSaved to: {filename}")
    print("=" * 80)


if __name__ == "__main__":
    main()
