"""
Logging setup for gclone.

structlog events are routed through the standard logging module. A normal
run is silent because prompts and results are printed with ``typer.echo``;
``--debug`` attaches a stderr handler and lowers the threshold to DEBUG.
"""

from __future__ import annotations

import logging
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger, ProcessorFormatter
from structlog.typing import Processor

_SHARED_PROCESSORS: tuple[Processor, ...] = (
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.format_exc_info,
    structlog.processors.TimeStamper(fmt="%H:%M:%S"),
)


def configure_logging(debug: bool = False) -> None:
    """Silence logging, or send everything from DEBUG up to stderr."""
    level = logging.DEBUG if debug else logging.INFO
    # Reconfigured on every CLI invocation, so loggers must not be cached.
    structlog.configure(
        processors=_SHARED_PROCESSORS + (ProcessorFormatter.wrap_for_formatter,),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    if debug:
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(
            ProcessorFormatter(
                processor=structlog.dev.ConsoleRenderer(colors=False),
                foreign_pre_chain=_SHARED_PROCESSORS,
            )
        )
    else:
        handler = logging.NullHandler()

    logging.basicConfig(level=level, handlers=[handler], force=True)


def get_logger(name: Optional[str] = None) -> BoundLogger:
    return structlog.get_logger(name)
