from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class VerdictKind(str, enum.Enum):
    ACCEPT = 'accept'
    ACCEPT_EMPTY = 'accept_empty'
    REJECT = 'reject'


@dataclass(frozen=True)
class EditRequest:
    """One proposed edit, as a host would describe it."""
    buffer: str
    dstart: int
    dend: int
    replacement: str
    rstart: int = 0
    rend: Optional[int] = None

    @property
    def replacement_end(self) -> int:
        return len(self.replacement) if self.rend is None else self.rend


@dataclass(frozen=True)
class Verdict:
    """Outcome of a single filter call.

    Attributes:
        kind: Which of the three outcomes applies.
        text: Text the host commits at the span. ``None`` means "use the
            proposed replacement unchanged".
        candidate: The buffer the pattern was matched against.
    """
    kind: VerdictKind
    text: Optional[str]
    candidate: str

    def __post_init__(self) -> None:
        if not isinstance(self.kind, VerdictKind):
            raise ValueError(f'unknown verdict kind {self.kind!r}')
        if self.kind is VerdictKind.ACCEPT:
            ok = self.text is None
        elif self.kind is VerdictKind.ACCEPT_EMPTY:
            ok = self.text == ''
        else:
            ok = isinstance(self.text, str)
        if not ok:
            raise ValueError(f'verdict {self.kind.value} cannot carry text {self.text!r}')

    @classmethod
    def accept(cls, candidate: str) -> 'Verdict':
        return cls(VerdictKind.ACCEPT, None, candidate)

    @classmethod
    def accept_empty(cls, candidate: str) -> 'Verdict':
        return cls(VerdictKind.ACCEPT_EMPTY, '', candidate)

    @classmethod
    def reject(cls, original: str, candidate: str) -> 'Verdict':
        return cls(VerdictKind.REJECT, original, candidate)

    @property
    def accepted(self) -> bool:
        return self.kind is VerdictKind.ACCEPT

    def as_filter_result(self) -> Optional[str]:
        """Return the value an input-filter callback hands back to its host."""
        return self.text
