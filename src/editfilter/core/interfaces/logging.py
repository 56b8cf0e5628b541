from __future__ import annotations
"""Logging surfaces that filters and the CLI accept by injection."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """What a filter needs from an injected logger.

    ``isEnabledFor`` lets per-evaluation tracing skip building its context
    when debug output would be dropped anyway.
    """

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...

    def isEnabledFor(self, level: int) -> bool: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Configures the 'editfilter' logger tree and hands out scoped loggers."""

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        ...
