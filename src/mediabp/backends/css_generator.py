"""
CSS @media generator for compiled breakpoints.

Wraps opaque style blocks in media conditional groups:

    @media screen and (min-width: 800px) {
    .nav { display: none; }
    }

The style block is inserted verbatim. It is never parsed,
indented, or otherwise inspected.
"""

from typing import Callable, Iterable, Optional, Union

from mediabp.compiler import compile_condition
from mediabp.model import MediaRule


MEDIA_TYPE = "screen"


def media_query(condition: Optional[str]) -> str:
    """
    Build the media query for a compiled condition.
    
    Args:
        condition: Output of compile_condition (may be None or empty)
    
    Returns:
        "screen and <condition>", or bare "screen" without a condition
    """
    if not condition:
        return MEDIA_TYPE
    return f"{MEDIA_TYPE} and {condition}"


def _block_text(block: Union[str, Callable[[], str]]) -> str:
    if callable(block):
        return block()
    return block


def wrap_block(condition: Optional[str], block: Union[str, Callable[[], str]]) -> str:
    """
    Wrap a style block in an @media group.
    
    Args:
        condition: Compiled condition (may be None)
        block: Style rules, or a zero-argument callable producing them
    
    Returns:
        "@media <query> {\\n<block>\\n}"
    """
    return f"@media {media_query(condition)} {{\n{_block_text(block)}\n}}"


def render_rule(rule: MediaRule) -> str:
    """Compile a MediaRule's params and wrap its block."""
    return wrap_block(compile_condition(rule.params), rule.block)


def generate_css(rules: Iterable[MediaRule]) -> str:
    """
    Generate a stylesheet fragment from media rules.
    
    Args:
        rules: MediaRule objects, emitted in order
    
    Returns:
        Wrapped blocks separated by a blank line
    """
    return "\n\n".join(render_rule(rule) for rule in rules)


def save_css_file(rules: Iterable[MediaRule], filename: str) -> None:
    """
    Generate CSS and save to file.
    
    Args:
        rules: MediaRule objects to emit
        filename: Output file path (.css extension recommended)
    """
    css = generate_css(rules)
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(css + "\n")


__all__ = ["media_query", "wrap_block", "render_rule", "generate_css", "save_css_file"]
