from __future__ import annotations

"""Project-wide constants used across modules.

Environment variable names live here so the CLI, the logging helpers and the
tests agree on a single spelling.
"""

ENV_JSON_LOGS: str = 'EDITFILTER_JSON_LOGS'
ENV_TRACE: str = 'EDITFILTER_TRACE'
ENV_STRATEGY: str = 'EDITFILTER_STRATEGY'
ENV_VERSION: str = 'EDITFILTER_VERSION'

DEFAULT_STRATEGY: str = 'regex'
