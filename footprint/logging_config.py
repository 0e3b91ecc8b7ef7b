"""Logging setup driven by ObservabilityConfig.

Modules only ever call ``logging.getLogger(__name__)``; entry points call
configure_logging() once to attach a handler.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError

_configured = False


def configure_logging(
    config: Optional[ObservabilityConfig] = None, force: bool = False
) -> None:
    """Configure the root logger from the observability settings.

    Args:
        config: Optional override; defaults to the application config.
        force: Reconfigure even if logging was already set up.
    """
    global _configured
    if _configured and not force:
        return

    config = config or get_config().observability
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level {config.level!r}",
            setting_name="FOOTPRINT_LOG_LEVEL",
            expected_type="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )

    logging.basicConfig(level=level, format=config.format, force=force)
    # requests/urllib3 are chatty at DEBUG
    logging.getLogger("urllib3").setLevel(max(level, logging.WARNING))
    _configured = True
