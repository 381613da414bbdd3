import os
import logging

try:
    import streamlit as st  # type: ignore
    _HAS_STREAMLIT = True
except Exception:
    _HAS_STREAMLIT = False

logger = logging.getLogger(__name__)


def get_secret(name: str, default: str | None = None) -> str | None:
    # Prefer Streamlit secrets if available
    if _HAS_STREAMLIT:
        try:
            if name in st.secrets:
                return str(st.secrets.get(name))
        except Exception:
            # No secrets.toml outside `streamlit run`
            pass
    return os.environ.get(name, default)


def _get_rate(name: str, default: float) -> float:
    raw = get_secret(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid %s=%r; using %s", name, raw, default)
        return default
    if not 0.0 <= value <= 1.0:
        logger.warning("%s=%s is outside [0, 1]; using %s", name, value, default)
        return default
    return value


class Settings:
    @property
    def log_level(self) -> str:
        value = (get_secret("LOG_LEVEL", "INFO") or "INFO").upper()
        # getLevelName returns an int only for registered level names
        if not isinstance(logging.getLevelName(value), int):
            logger.warning("Unknown LOG_LEVEL=%r; using 'INFO'", value)
            return "INFO"
        return value

    @property
    def feature_source(self) -> str:
        value = (get_secret("FEATURE_SOURCE", "random") or "random").lower()
        if value not in {"random", "static"}:
            logger.warning("Unknown FEATURE_SOURCE=%r; using 'random'", value)
            return "random"
        return value

    @property
    def feature_seed(self) -> int | None:
        raw = get_secret("FEATURE_SEED")
        if raw is None or raw == "":
            return None
        try:
            return int(raw)
        except ValueError:
            logger.warning("Invalid FEATURE_SEED=%r; ignoring", raw)
            return None

    @property
    def image_detection_rate(self) -> float:
        return _get_rate("IMAGE_DETECTION_RATE", 0.7)

    @property
    def region_detection_rate(self) -> float:
        return _get_rate("REGION_DETECTION_RATE", 0.6)
