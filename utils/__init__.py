"""
Utilities module for the Signal Intelligence Core.
"""
from .logger import logger, init_logging, setup_logging

__all__ = ["logger", "init_logging", "setup_logging"]
