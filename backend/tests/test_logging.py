from __future__ import annotations

import structlog

from backend.log import configure_logging, get_logger


def test_configured_loggers_are_stdlib_bound_loggers():
    configure_logging(level="WARNING")

    logger = get_logger("backend.tests").bind(request="compound")

    assert isinstance(logger, structlog.stdlib.BoundLogger)
