"""
Logging system for Soundfonter
Provides centralized logging with configurable levels
"""
import logging
import os
import sys

# Configure logging levels based on environment
DEBUG_MODE = os.getenv('SOUNDFONTER_DEBUG', 'false').lower() in ('true', '1', 'yes')
LOG_LEVEL = os.getenv('SOUNDFONTER_LOG_LEVEL', 'INFO' if not DEBUG_MODE else 'DEBUG')

# Create root logger
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given module name"""
    logger = logging.getLogger(name)

    # Set level based on environment
    if DEBUG_MODE:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.INFO))

    return logger

def set_debug_mode(enabled: bool):
    """Enable or disable debug mode globally"""
    global DEBUG_MODE
    DEBUG_MODE = enabled

    # Update all existing soundfonter loggers
    for name in list(logging.Logger.manager.loggerDict):
        if not name.startswith('soundfonter'):
            continue
        logger = logging.getLogger(name)
        if enabled:
            logger.setLevel(logging.DEBUG)
        else:
            logger.setLevel(logging.INFO)
