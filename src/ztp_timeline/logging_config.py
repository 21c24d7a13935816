"""Structured logging configuration using structlog.

structlog is layered over the standard library logger so that third-party
warnings and our own events share one stream. That stream is always
stderr: stdout is reserved for the timeline and summary output.

Without ``--verbose`` only warnings and errors are shown, which keeps soft
provider failures (timeouts, unreachable sources) visible.
"""

import logging
import sys

import structlog

__all__ = ["configure_logging", "get_logger"]

_SHARED_PROCESSORS: tuple[structlog.types.Processor, ...] = (
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
)


def _renderer(json_output: bool) -> structlog.types.Processor:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(verbose: bool = False, json_output: bool = False) -> None:
    """Configure structured logging for the CLI.

    Args:
        verbose: Log at DEBUG instead of WARNING.
        json_output: Render events as JSON lines instead of console text.

    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        force=True,
    )

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, _renderer(json_output)],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger named after the calling module.

    Example:
        logger = get_logger(__name__)
        logger.warning("provider_timed_out", provider="agent", timeout=30)

    """
    return structlog.get_logger(name)
