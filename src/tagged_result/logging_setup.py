from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tagged_result.config import create_config, load_log_format, load_log_level

if TYPE_CHECKING:
    from config import ConfigurationSet

PACKAGE_LOGGER = "tagged_result"


def configure_logging(cfg: ConfigurationSet | None = None, *, install_handler: bool = False) -> logging.Logger:
    """Apply the configured level to the package logger.

    When ``install_handler`` is set, also calls ``logging.basicConfig`` with the
    configured format so records reach stderr in scripts without their own setup.
    """
    if cfg is None:
        cfg = create_config()
    level = load_log_level(cfg)
    if install_handler:
        logging.basicConfig(level=level, format=load_log_format(cfg))
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    return package_logger
