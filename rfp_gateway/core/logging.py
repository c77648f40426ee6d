from __future__ import annotations

import logging
import sys

from rfp_gateway.core.settings import Settings

_configured = False


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach a stdout handler to the ``rfp_gateway`` logger (once per process)."""
    global _configured

    app_logger = logging.getLogger("rfp_gateway")
    app_logger.setLevel(settings.log_level.upper())

    if not _configured:
        # Remove any existing handlers to avoid duplicate logs
        for handler in list(app_logger.handlers):
            app_logger.removeHandler(handler)

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(settings.log_format))
        app_logger.addHandler(handler)
        app_logger.propagate = False
        _configured = True

    # Third-party loggers that log every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)

    return app_logger
