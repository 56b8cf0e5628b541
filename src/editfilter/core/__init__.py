"""
editfilter.core – error types and value objects shared by every filter.
"""
from .errors import EditFilterError, InvalidSpanError, PatternCompileError
from .models import EditRequest, Verdict, VerdictKind

__all__ = [
    'EditFilterError',
    'InvalidSpanError',
    'PatternCompileError',
    'EditRequest',
    'Verdict',
    'VerdictKind',
]
