"""CSS selector builder."""

from .selector_builder import (
    Fragment,
    FragmentKind,
    Selector,
    SelectorBuilder,
    css_selector_builder,
    stringify,
)

__all__ = [
    "Fragment",
    "FragmentKind",
    "Selector",
    "SelectorBuilder",
    "css_selector_builder",
    "stringify",
]
