"""Default constants and configuration values for wabinary."""

from .config import DEFAULT_ENCODER_CONFIG, JID_ALIASES, MAX_LIST_SIZE

__all__ = ["DEFAULT_ENCODER_CONFIG", "JID_ALIASES", "MAX_LIST_SIZE"]
