"""Startup-time helpers for safe config logging."""

from paygate.common.config import PayGateSettings
from paygate.common.logging import logger

SECRET_MARKERS = ("key", "secret", "password", "token")


def redacted_config(config: PayGateSettings) -> dict[str, object]:
    """Return settings as a dict with credential-like fields masked.

    Unset credentials stay `None` so a missing key is still visible in logs.
    """

    values: dict[str, object] = {}
    for name, value in config.model_dump().items():
        if value is not None and any(marker in name for marker in SECRET_MARKERS):
            values[name] = "<redacted>"
        else:
            values[name] = value
    return values


def log_startup_config(config: PayGateSettings) -> None:
    """Log the effective configuration once at process start."""

    logger.info("startup_config=%s", redacted_config(config))
