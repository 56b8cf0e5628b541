from __future__ import annotations

from editfilter.cli import EditFilterCli
from editfilter.core.errors import EditFilterError, InvalidSpanError, PatternCompileError
from editfilter.core.interfaces.filter import EditFilterProtocol
from editfilter.core.models import EditRequest, Verdict, VerdictKind
from editfilter.filters.regex_filter import RegexEditFilter, parse_flags
from editfilter.filters.registry import build_filter, register_filter
from editfilter.logging.helpers import get_logger, setup_base_logger
from editfilter.processing.splice import apply_verdict, splice

__version__ = '1.0.0'


def evaluate_request(flt: EditFilterProtocol, request: EditRequest) -> Verdict:
    """Run *flt* on a packed `EditRequest`."""
    return flt.evaluate(
        request.buffer,
        request.dstart,
        request.dend,
        request.replacement,
        request.rstart,
        request.replacement_end,
    )


__all__ = [
    'EditFilterCli',
    'EditFilterError',
    'InvalidSpanError',
    'PatternCompileError',
    'EditFilterProtocol',
    'EditRequest',
    'Verdict',
    'VerdictKind',
    'RegexEditFilter',
    'parse_flags',
    'build_filter',
    'register_filter',
    'evaluate_request',
    'get_logger',
    'setup_base_logger',
    'apply_verdict',
    'splice',
]
