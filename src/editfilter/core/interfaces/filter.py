from __future__ import annotations
"""Edit filter protocol definitions."""

from typing import Callable, Protocol, runtime_checkable

from editfilter.core.models import Verdict


@runtime_checkable
class EditFilterProtocol(Protocol):
    """Protocol for edit validators a text-input host can call.

    Implementations are expected to:
      * Treat ``buffer`` as a read-only snapshot.
      * Raise ``InvalidSpanError`` on malformed ranges.
      * Keep no state between calls beyond their own configuration.
    """

    def evaluate(
        self,
        buffer: str,
        dstart: int,
        dend: int,
        replacement: str,
        rstart: int,
        rend: int,
    ) -> Verdict:
        ...


FilterFactory = Callable[..., EditFilterProtocol]
