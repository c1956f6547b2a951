"""
shape-anchors logging configuration.

Usage:
    from shape_anchors.logging import logger

    logger.debug('No edge intersection, using radial fallback')

To silence the package:
    import shape_anchors
    shape_anchors.set_log_level('SILENT')

    # Or use standard logging levels:
    shape_anchors.set_log_level('DEBUG')    # Trace fallback branches
    shape_anchors.set_log_level('WARNING')  # Only warnings and errors
"""

import logging

logger = logging.getLogger('shape_anchors')
logger.setLevel(logging.INFO)

if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(logging.DEBUG)
    formatter = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger for module *name*."""
    if name == 'shape_anchors' or name.startswith('shape_anchors.'):
        return logging.getLogger(name)
    return logger.getChild(name)


def set_log_level(level: str | int) -> None:
    """
    Set the shape-anchors logging level.

    Args:
        level: 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL', 'SILENT',
               or numeric level (logging.DEBUG, etc.)

    Raises:
        ValueError: If *level* is an unknown level name.
    """
    if isinstance(level, str):
        name = level.upper()
        if name == 'SILENT':
            logger.setLevel(logging.CRITICAL + 1)
            return
        numeric = logging.getLevelName(name)
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level '{level}'")
        logger.setLevel(numeric)
    else:
        logger.setLevel(level)
