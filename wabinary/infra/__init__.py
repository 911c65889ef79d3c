from .logger import JsonFormatter, get_logger

__all__ = ["JsonFormatter", "get_logger"]
