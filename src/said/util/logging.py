import logging
from typing import Literal

from said.util.config import SaIdSettings

# Basic setup/config for python logging


class LoggingSettings(SaIdSettings):
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


log_settings = LoggingSettings()


def setup_logging() -> None:
    """
    Initial logging setup.

    Sets default format and level to that specified by `APP_LOG_LEVEL`, or `WARNING` if not set. Validation failures
    are logged at DEBUG by `said-id`, so `APP_LOG_LEVEL=DEBUG` shows which check rejected a number.
    """
    default_handler = logging.StreamHandler()
    default_handler.setLevel(logging.getLevelName(log_settings.log_level))
    default_handler.setFormatter(logging.Formatter("%(asctime)s %(name)-12s %(levelname)-8s %(message)s"))

    # The root logger gets everything; the handler does the filtering
    logging.basicConfig(
        level=logging.NOTSET,
        handlers=[default_handler],
    )
