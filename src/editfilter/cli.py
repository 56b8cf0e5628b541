from __future__ import annotations

import json
import os
import sys
from typing import NoReturn, Optional, Sequence, TextIO

from editfilter.constants import ENV_STRATEGY
from editfilter.core.errors import EditFilterError
from editfilter.core.interfaces.logging import LoggerFactoryProtocol, LoggerLikeProtocol
from editfilter.core.models import Verdict, VerdictKind
from editfilter.filters.regex_filter import parse_flags
from editfilter.filters.registry import build_filter
from editfilter.logging.factory import DefaultLoggerFactory
from editfilter.logging.helpers import get_logger
from editfilter.parsing.parser import _build_parser, parse_range
from editfilter.processing.splice import apply_verdict

logger: LoggerLikeProtocol = get_logger('cli')

EXIT_ACCEPTED = 0
EXIT_SUPPRESSED = 1
EXIT_USAGE = 2


def _configure_logging(factory: LoggerFactoryProtocol) -> None:
    """Route CLI logging through *factory*, which configures the base logger once."""
    global logger
    logger = factory.get_logger('cli')


def _render(verdict: Verdict, result: str, *, as_json: bool) -> str:
    if as_json:
        return json.dumps(
            {
                'verdict': verdict.kind.value,
                'text': verdict.text,
                'candidate': verdict.candidate,
                'result': result,
            },
            ensure_ascii=False,
        )
    return f'{verdict.kind.value}\n{result}'


class EditFilterCli:
    """Command-line front-end: one invocation evaluates one edit."""

    @staticmethod
    def run(argv: Sequence[str], *, stdout: Optional[TextIO] = None) -> int:
        """Evaluate the edit described by *argv* and return the exit code."""
        out = stdout or sys.stdout
        ns = _build_parser().parse_args(list(argv))
        _configure_logging(DefaultLoggerFactory.from_env(json_logs=ns.json_logs, verbose=ns.verbose))

        buffer: str = ns.buffer
        replacement: str = ns.replacement
        try:
            if ns.span is None:
                dstart = dend = len(buffer)
            else:
                dstart, dend = parse_range(ns.span, default_end=len(buffer))
            if ns.rrange is None:
                rstart, rend = 0, len(replacement)
            else:
                rstart, rend = parse_range(ns.rrange, default_end=len(replacement))
            flt = build_filter(ns.strategy or os.getenv(ENV_STRATEGY), ns.pattern, flags=parse_flags(ns.flags))
            verdict = flt.evaluate(buffer, dstart, dend, replacement, rstart, rend)
            result = apply_verdict(buffer, dstart, dend, replacement, rstart, rend, verdict)
        except (EditFilterError, ValueError, LookupError, ImportError, TypeError) as exc:
            logger.error('✖ %s', exc)
            return EXIT_USAGE

        logger.debug('verdict %s for span [%d, %d)', verdict.kind.value, dstart, dend)
        print(_render(verdict, result, as_json=ns.json_out), file=out)
        return EXIT_ACCEPTED if verdict.kind is VerdictKind.ACCEPT else EXIT_SUPPRESSED


def main() -> NoReturn:
    """Entry point for `python -m editfilter` and the `editfilter` script."""
    try:
        raise SystemExit(EditFilterCli.run(sys.argv[1:]))
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)


if __name__ == '__main__':
    main()
