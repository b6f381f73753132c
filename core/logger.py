import json
import logging
from typing import Any

from core.config import LOG_LEVEL

logger = logging.getLogger("intervyou")

_REDACTED_KEYS = {"answer", "transcript", "password"}


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _sanitize_value(key: str, value: Any) -> Any:
    if key.lower() in _REDACTED_KEYS:
        return {"redacted": True, "length": len(str(value or ""))}
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, dict):
        return {str(k): _sanitize_value(str(k), v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_sanitize_value(key, item) for item in value]
    return str(value)


def log_event(component: str, event: str, *, log_level: int = logging.INFO, **kwargs) -> None:
    payload = {
        "component": str(component or "app"),
        "event": str(event or "unknown"),
    }
    payload.update({str(k): _sanitize_value(str(k), v) for k, v in kwargs.items()})
    logger.log(log_level, json.dumps(payload, ensure_ascii=False, default=str))
