"""Route civiltime's stdlib log records through structlog.

The library never configures logging on import. Its modules log through
``logging.getLogger(__name__)`` and attach the values they act on as
``extra`` fields:

- ``civiltime.domain.parser``: ``text``, ``reason`` for every rejected input
- ``civiltime.services.calendar``: ``value``, ``amount``, ``part``,
  ``policy``, ``result`` for every shift

:func:`configure_logging` lifts those fields into the structlog event dict,
so JSON output carries them as keys rather than only inside the message.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from typing import TextIO

import structlog

LIBRARY_LOGGER = "civiltime"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    levels: Mapping[str, int] | None = None,
    stream: TextIO | None = None,
) -> None:
    """Install one structlog-formatted handler on the root logger.

    Args:
        verbose: DEBUG for every ``civiltime`` logger. When False, WARNING+.
        log_json: One JSON object per record instead of console output.
        levels: Per-logger overrides applied after *verbose*, e.g.
            ``{"civiltime.domain.parser": logging.DEBUG}`` to see only
            parse rejections.
        stream: Destination, stderr when None.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    output = stream or sys.stderr
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=output.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(output)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(LIBRARY_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name, level in (levels or {}).items():
        logging.getLogger(name).setLevel(level)
