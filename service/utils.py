import logging


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """
    Configure the "knn_service" logger.
    
    The classifier core and the HTTP layer both log through this logger, so
    the "Working with ..." diagnostics land on the same console stream as the
    request logs. Calling it again (e.g. on re-initialization) only changes the
    level and never attaches a second handler.
    
    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    
    Returns:
        The "knn_service" logger
    """
    level = getattr(logging, log_level.upper())
    logger = logging.getLogger("knn_service")
    logger.setLevel(level)
    
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(handler)
    
    return logger
