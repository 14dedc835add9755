"""
Logging configuration and utilities for the contract library.
"""
from .config import configure_logging, get_codec_logger, get_logger, log_decode_outcome

__all__ = ["configure_logging", "get_logger", "get_codec_logger", "log_decode_outcome"]
