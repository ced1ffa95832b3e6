from __future__ import annotations

import logging

import structlog

from .settings import MRZSettings, get_settings


def configure_logging(config: MRZSettings | None = None) -> None:
    config = config or get_settings()
    renderer = structlog.processors.JSONRenderer() if config.log_json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, config.log_level)),
    )


def _drop_event(logger, method_name, event_dict):
    raise structlog.DropEvent


def get_logger(name: str):
    """structlog logger that stays silent until the host configures structlog."""
    if structlog.is_configured():
        return structlog.get_logger(name)
    return structlog.wrap_logger(structlog.ReturnLogger(), processors=[_drop_event])


def mask_sensitive(value: str | None) -> str | None:
    if value is None:
        return None
    if len(value) <= 4:
        return "*" * len(value)
    return f"{value[:2]}***{value[-2:]}"
