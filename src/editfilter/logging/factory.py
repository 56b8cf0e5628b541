from __future__ import annotations

import logging
import os
from typing import Optional, TextIO

from editfilter.constants import ENV_JSON_LOGS, ENV_TRACE
from editfilter.core.interfaces.logging import LoggerFactoryProtocol, LoggerLikeProtocol
from editfilter.logging.helpers import setup_base_logger, get_logger


class DefaultLoggerFactory(LoggerFactoryProtocol):
    """Configure the 'editfilter' logger tree lazily, on first `get_logger`.

    `from_env` resolves the output format and level from the environment:
    EDITFILTER_JSON_LOGS=1 selects JSON records, and EDITFILTER_TRACE=1
    lowers the level to DEBUG so `trace_eval` records are actually emitted.
    """

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self._json = bool(json_logs)
        self._level = int(level)
        self._stream: Optional[TextIO] = stream
        self._configured = False

    @classmethod
    def from_env(
        cls, *, json_logs: bool = False, verbose: bool = False, stream: Optional[TextIO] = None
    ) -> 'DefaultLoggerFactory':
        json_logs = json_logs or os.getenv(ENV_JSON_LOGS) == '1'
        debug = verbose or os.getenv(ENV_TRACE) == '1'
        return cls(json_logs=json_logs, level=logging.DEBUG if debug else logging.INFO, stream=stream)

    @property
    def json_logs(self) -> bool:
        return self._json

    @property
    def level(self) -> int:
        return self._level

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        if not self._configured:
            setup_base_logger(json_logs=self._json, level=self._level, stream=self._stream)
            self._configured = True
        return get_logger(name)
