"""structlog configuration for flavortown.

Logs go to stderr so they never mix with command output on stdout.
``--log-json`` switches from the console renderer to JSON lines, and
``--verbose`` opens up DEBUG for flavortown and INFO for the HTTP stack.
API keys are masked before any renderer sees an event.
"""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

from flavortown.config.credentials import mask_api_key

APP_LOGGER = "flavortown"

# Third-party loggers and the level they get with --verbose.
HTTP_LOGGERS: dict[str, int] = {"httpx": logging.INFO, "httpcore": logging.INFO}

SECRET_FIELDS = frozenset({"api_key", "apiKey", "authorization", "Authorization"})

_BEARER_RE = re.compile(r"(Bearer\s+)(\S+)")


def redact_secrets(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Mask API keys in known fields and in ``Bearer`` tokens inside messages."""
    for field in SECRET_FIELDS.intersection(event_dict):
        value = event_dict[field]
        if not isinstance(value, str):
            continue
        if _BEARER_RE.search(value):
            event_dict[field] = _BEARER_RE.sub(_mask_bearer, value)
        else:
            event_dict[field] = mask_api_key(value)
    event = event_dict.get("event")
    if isinstance(event, str) and "Bearer" in event:
        event_dict["event"] = _BEARER_RE.sub(_mask_bearer, event)
    return event_dict


def _mask_bearer(match: re.Match[str]) -> str:
    return match.group(1) + mask_api_key(match.group(2))


def _pre_chain() -> list[structlog.types.Processor]:
    """Processors applied to both structlog and plain ``logging`` records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        redact_secrets,
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _stderr_handler(log_json: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Safe to call more than once; the root handler is replaced each time.
    """
    structlog.configure(
        processors=[*_pre_chain(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers[:] = [_stderr_handler(log_json)]
    root.setLevel(logging.WARNING)

    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name, verbose_level in HTTP_LOGGERS.items():
        logging.getLogger(name).setLevel(verbose_level if verbose else logging.WARNING)
