"""Public API surface for editfilter.processing."""
from .splice import apply_verdict, check_range, splice

__all__ = [
    "apply_verdict",
    "check_range",
    "splice",
]
