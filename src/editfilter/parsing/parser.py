# editfilter/parsing/parser.py
from __future__ import annotations

import argparse
from typing import Optional, Tuple


def parse_range(text: str, *, default_end: Optional[int] = None) -> Tuple[int, int]:
    """Parse ``'START:END'`` (or a bare ``'POS'`` meaning ``POS:POS``).

    An empty END (``'2:'``) takes *default_end* when given.

    Raises:
        ValueError: If either bound is not an integer.
    """
    raw = (text or '').strip()
    start_s, sep, end_s = raw.partition(':')
    try:
        start = int(start_s)
        if not sep:
            return start, start
        if not end_s.strip() and default_end is not None:
            return start, default_end
        return start, int(end_s)
    except ValueError:
        raise ValueError(f'malformed range {text!r}; expected START:END') from None


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser for a single edit evaluation.

    Ranges are kept as raw strings here and converted by the runner, so
    range errors are reported through the same path as span violations.
    """
    p = argparse.ArgumentParser(
        prog="editfilter",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "editfilter – validate one text edit against a pattern\n"
            "Prints the verdict and the buffer the host would end up with."
        ),
    )

    g_edit = p.add_argument_group("Edit")
    g_rule = p.add_argument_group("Rule")
    g_out = p.add_argument_group("Output")

    g_rule.add_argument(
        "pattern",
        metavar="PATTERN",
        help="Regular expression the whole edited buffer must match.",
    )
    g_rule.add_argument(
        "--flags",
        metavar="LETTERS",
        dest="flags",
        default="",
        help="Regex flag letters: i (ignore case), m (multiline), s (dotall), x (verbose), a (ascii).",
    )
    g_rule.add_argument(
        "--strategy",
        metavar="NAME",
        dest="strategy",
        default=None,
        help=(
            "Filter strategy: a registered name (default 'regex') or a "
            "'module.path:Factory' reference. Falls back to $EDITFILTER_STRATEGY."
        ),
    )

    g_edit.add_argument(
        "-b",
        "--buffer",
        metavar="TEXT",
        dest="buffer",
        default="",
        help="Current buffer content (default: empty).",
    )
    g_edit.add_argument(
        "-s",
        "--span",
        metavar="DSTART:DEND",
        dest="span",
        default=None,
        help="Buffer range being replaced. A bare POS means an insertion at POS. Default: end of buffer.",
    )
    g_edit.add_argument(
        "-r",
        "--replacement",
        metavar="TEXT",
        dest="replacement",
        default="",
        help="Proposed replacement text.",
    )
    g_edit.add_argument(
        "--range",
        metavar="RSTART:REND",
        dest="rrange",
        default=None,
        help="Sub-range of the replacement actually inserted. Default: all of it.",
    )

    g_out.add_argument(
        "--json",
        action="store_true",
        dest="json_out",
        help="Print the verdict as a JSON object.",
    )
    g_out.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit logs as JSON (also $EDITFILTER_JSON_LOGS=1).",
    )
    g_out.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="Enable debug logging.",
    )
    return p
