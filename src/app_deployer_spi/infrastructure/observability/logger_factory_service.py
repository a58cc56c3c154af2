"""Structlog-based logging configuration with the deployer schema and stdlib bridge.

Provides:
- configure_logging(): one-shot structlog + stdlib setup
- get_logger(): returns bound structlog logger
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.typing import FilteringBoundLogger

from app_deployer_spi.infrastructure.configuration.observability_settings import (
    ObservabilitySettings,
)
from app_deployer_spi.infrastructure.observability.logging.deployer_schema_processor import (
    DeployerSchemaProcessor,
)

_CONFIGURED = False


def configure_logging(settings: ObservabilitySettings | None = None, *, force: bool = False) -> None:
    """One-shot structlog + stdlib bridge configuration.

    Safe to call multiple times; only the first successful invocation takes effect
    unless ``force`` is set. Settings are read from the environment when not given;
    if they fail to load, nothing is configured and the next call tries again.
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED and not force:
        return

    settings = settings or ObservabilitySettings()
    level = logging.getLevelNamesMapping()[settings.log_level]
    renderer = _select_renderer(settings)
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        DeployerSchemaProcessor(service=settings.service_name, environment=settings.app_env),
    ]

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Stdlib bridge: route logging.getLogger() output through structlog pipeline
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
            renderer,
        ],
    )
    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(level)
    _CONFIGURED = True


def get_logger(component: str) -> FilteringBoundLogger:
    """Return a structlog logger pre-bound with context_component."""
    return structlog.get_logger().bind(context_component=component)


def _select_renderer(settings: ObservabilitySettings) -> Any:
    """Choose renderer based on LOG_FORMAT or APP_ENV."""
    if settings.log_format == "json":
        return structlog.processors.JSONRenderer()
    if settings.log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=True)
    if settings.is_production:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)
