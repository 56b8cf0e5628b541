"""Public API surface for editfilter.filters."""
from .regex_filter import RegexEditFilter, parse_flags
from .registry import available_filters, build_filter, get_filter_factory, register_filter, unregister_filter

__all__ = [
    "RegexEditFilter",
    "parse_flags",
    "available_filters",
    "build_filter",
    "get_filter_factory",
    "register_filter",
    "unregister_filter",
]
