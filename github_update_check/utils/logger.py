"""
Logger
Logging for the update checker.
"""

import logging
import sys
from typing import Optional


class Logger:
    """Simple logger wrapper with structured logging support."""
    
    def __init__(self, name: str = "github-update-check", level: Optional[str] = None):
        self.logger = logging.getLogger(name)
        # Without a level the logger keeps whatever the application configured
        if level is not None:
            self.set_level(level)
        
        # Only add handler if none exist
        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
    
    def set_level(self, level: str):
        self.logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    
    def debug(self, message: str, extra: Optional[dict] = None):
        self.logger.debug(message, extra=extra)
    
    def info(self, message: str, extra: Optional[dict] = None):
        self.logger.info(message, extra=extra)
    
    def warning(self, message: str, extra: Optional[dict] = None):
        self.logger.warning(message, extra=extra)
    
    def error(self, message: str, extra: Optional[dict] = None):
        self.logger.error(message, extra=extra)
    
    def isEnabledFor(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)
