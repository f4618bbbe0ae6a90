"""Logging utilities for blazepy modules."""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger that automatically inherits from root logger.
    
    The logger propagates to the root logger, so ``logging.basicConfig()``
    is enough to see blazepy output. When the root logger has no handlers
    yet, the logger defaults to WARNING.
    
    Args:
        name: Logger name (typically 'blazepy.<component>')
        
    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logger.setLevel(logging.WARNING)
    
    return logger
