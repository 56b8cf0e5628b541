from __future__ import annotations

"""Buffer splicing helpers shared by filters and hosts.

Public API:
    - check_range(start, end, length, *, what)
    - splice(buffer, dstart, dend, inserted)
    - apply_verdict(buffer, dstart, dend, replacement, rstart, rend, verdict)
"""

from editfilter.core.errors import InvalidSpanError
from editfilter.core.models import Verdict, VerdictKind


def _is_index(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_range(start: int, end: int, length: int, *, what: str) -> None:
    """Validate the half-open range ``[start, end)`` against ``length``.

    Raises:
        InvalidSpanError: Unless ``0 <= start <= end <= length``.
    """
    if not (_is_index(start) and _is_index(end)):
        raise InvalidSpanError(what, start, end, length)
    if not 0 <= start <= end <= length:
        raise InvalidSpanError(what, start, end, length)


def splice(buffer: str, dstart: int, dend: int, inserted: str) -> str:
    """Return ``buffer`` with ``[dstart, dend)`` replaced by ``inserted``."""
    check_range(dstart, dend, len(buffer), what='span')
    return buffer[:dstart] + inserted + buffer[dend:]


def apply_verdict(
    buffer: str,
    dstart: int,
    dend: int,
    replacement: str,
    rstart: int,
    rend: int,
    verdict: Verdict,
) -> str:
    """Commit ``verdict`` the way a host would and return the new buffer."""
    check_range(rstart, rend, len(replacement), what='replacement')
    if verdict.kind is VerdictKind.ACCEPT:
        return splice(buffer, dstart, dend, replacement[rstart:rend])
    return splice(buffer, dstart, dend, verdict.text or '')
