import logging
import os

from pydantic import BaseModel

logger = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}
_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseModel):
    tenth_frame_bonus: bool = True
    log_level: str = "WARNING"


def _parse_bool(env_var: str, default: bool) -> bool:
    raw_value = os.getenv(env_var)
    if raw_value is None or not raw_value.strip():
        return default

    value = raw_value.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False

    logger.warning(
        "%s is not a valid boolean (got %r); defaulting to %s",
        env_var,
        raw_value,
        default,
    )
    return default


def _parse_level(env_var: str, default: str) -> str:
    raw_value = os.getenv(env_var)
    if raw_value is None or not raw_value.strip():
        return default

    value = raw_value.strip().upper()
    if value not in _LEVELS:
        logger.warning(
            "%s is not a valid log level (got %r); defaulting to %s",
            env_var,
            raw_value,
            default,
        )
        return default
    return value


def get_settings() -> Settings:
    """Read settings from the environment.

    Values are re-read on every call so tests can adjust the environment
    with ``monkeypatch``.
    """

    return Settings(
        tenth_frame_bonus=_parse_bool("PINSCORE_TENTH_FRAME_BONUS", True),
        log_level=_parse_level("PINSCORE_LOG_LEVEL", "WARNING"),
    )


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured level to the ``pinscore`` logger."""

    settings = settings or get_settings()
    logging.getLogger("pinscore").setLevel(settings.log_level)
    logger.info("pinscore log level set to %s", settings.log_level)
