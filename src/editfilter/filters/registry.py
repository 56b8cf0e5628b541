from __future__ import annotations

"""
Minimal registry of interchangeable filter strategies.

This registry provides:
- `register_filter(name, factory)`
- `get_filter_factory(name)`
- `build_filter(ref, pattern, flags=...)`

A factory is any callable ``factory(pattern, *, flags=0)`` returning an
object that satisfies `EditFilterProtocol`. `build_filter` also accepts a
'module.path:Factory' reference for strategies living outside this package.
"""

from typing import Dict, Optional

from editfilter.constants import DEFAULT_STRATEGY
from editfilter.core.interfaces.filter import EditFilterProtocol, FilterFactory
from editfilter.filters.regex_filter import RegexEditFilter
from editfilter.logging.helpers import get_logger
from editfilter.utils.imports import load_object_from_ref

logger = get_logger('filters.registry')

_FILTER_FACTORIES: Dict[str, FilterFactory] = {}


def _key(name: str) -> str:
    key = (name or '').strip().lower()
    if not key:
        raise ValueError('filter strategy name must be non-empty')
    return key


def register_filter(name: str, factory: FilterFactory) -> None:
    _FILTER_FACTORIES[_key(name)] = factory


def unregister_filter(name: str) -> bool:
    return _FILTER_FACTORIES.pop(_key(name), None) is not None


def get_filter_factory(name: str) -> Optional[FilterFactory]:
    return _FILTER_FACTORIES.get(_key(name))


def available_filters() -> list[str]:
    return sorted(_FILTER_FACTORIES)


def build_filter(ref: str | None, pattern: str, *, flags: int = 0) -> EditFilterProtocol:
    """Build a filter for *pattern* using the strategy named by *ref*.

    Resolution order:
        1) empty/None → the default 'regex' strategy
        2) a registered name (case-insensitive)
        3) a 'module.path:Factory' reference

    Raises:
        LookupError: Unknown strategy name.
        ImportError: Unresolvable module reference.
        TypeError: The resolved factory did not produce an edit filter.
        PatternCompileError: Propagated from the factory.
    """
    ref = (ref or DEFAULT_STRATEGY).strip()
    if ':' in ref:
        factory = load_object_from_ref(ref)
        origin = ref
    else:
        factory = get_filter_factory(ref)
        if factory is None:
            raise LookupError(f'unknown filter strategy {ref!r} (available: {", ".join(available_filters())})')
        origin = ref.lower()

    flt = factory(pattern, flags=flags)
    if not isinstance(flt, EditFilterProtocol):
        raise TypeError(f'filter strategy {origin!r} returned {type(flt).__name__}, not an edit filter')
    logger.debug('filter built via %s → %r', origin, flt)
    return flt


register_filter(DEFAULT_STRATEGY, RegexEditFilter)
