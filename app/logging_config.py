# =============================================================================
# app/logging_config.py - Logging Setup
# =============================================================================
# Configures the standard library root logger once per process.
# Modules log through logging.getLogger(__name__) and never configure
# handlers themselves.
# =============================================================================

import logging

from app.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    """
    Configure root logging from settings.

    DEBUG=true forces DEBUG level; otherwise LOG_LEVEL applies.
    Safe to call more than once (later calls replace the handlers).
    """
    level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL)
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)

    # SQL echo goes through this logger; keep it quiet unless asked for
    if not settings.DB_ECHO:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
