from __future__ import annotations

import re
from typing import Optional

from editfilter.core.errors import PatternCompileError
from editfilter.core.interfaces.filter import EditFilterProtocol
from editfilter.core.interfaces.logging import LoggerLikeProtocol
from editfilter.core.models import Verdict
from editfilter.logging.helpers import get_logger, trace_eval
from editfilter.processing.splice import check_range

_FLAG_LETTERS = {
    'i': re.IGNORECASE,
    'm': re.MULTILINE,
    's': re.DOTALL,
    'x': re.VERBOSE,
    'a': re.ASCII,
}


def parse_flags(letters: str | None) -> int:
    """Map flag letters such as ``'im'`` to an ``re`` flag mask."""
    flags = 0
    for ch in (letters or '').strip():
        try:
            flags |= _FLAG_LETTERS[ch.lower()]
        except KeyError:
            raise ValueError(f'unknown regex flag {ch!r} (expected any of {"".join(_FLAG_LETTERS)})') from None
    return flags


class RegexEditFilter(EditFilterProtocol):
    """Accept an edit only when the edited buffer fully matches a pattern.

    The pattern is compiled once here and never again. Matching uses
    ``re.Pattern.fullmatch``, which allocates its own match state, so one
    instance can be shared between threads.

    Python's ``re`` backtracks: a pattern with nested quantifiers such as
    ``(a+)+$`` can take exponential time on hostile input. Keep patterns simple.
    """

    def __init__(self, pattern: str, *, flags: int = 0, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._log: LoggerLikeProtocol = logger or get_logger('filters.regex')
        try:
            self._pattern = re.compile(pattern, flags)
        except re.error as exc:
            self._log.warning('⚠  invalid pattern %r: %s', pattern, exc)
            raise PatternCompileError(pattern, str(exc)) from exc

    @property
    def pattern(self) -> re.Pattern[str]:
        return self._pattern

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._pattern.pattern!r}, flags={self._pattern.flags})'

    def evaluate(
        self,
        buffer: str,
        dstart: int,
        dend: int,
        replacement: str,
        rstart: int,
        rend: int,
    ) -> Verdict:
        """Decide what the host commits at ``[dstart, dend)``.

        Returns:
            ``Verdict.accept`` when the candidate buffer matches,
            ``Verdict.accept_empty`` when a pure insertion does not,
            ``Verdict.reject`` carrying the original span text otherwise.

        Raises:
            InvalidSpanError: If either range is out of bounds.
        """
        check_range(dstart, dend, len(buffer), what='span')
        check_range(rstart, rend, len(replacement), what='replacement')

        candidate = buffer[:dstart] + replacement[rstart:rend] + buffer[dend:]
        if self._pattern.fullmatch(candidate) is not None:
            verdict = Verdict.accept(candidate)
        elif dstart == dend:
            verdict = Verdict.accept_empty(candidate)
        else:
            verdict = Verdict.reject(buffer[dstart:dend], candidate)

        trace_eval(self._log, 'edit evaluated', verdict=verdict.kind.value,
                   span=[dstart, dend], candidate=candidate)
        return verdict
