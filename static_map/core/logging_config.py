import logging
import sys

def setup_logging():
    """
    Configure logging for the static map service.
    
    Sets up logging to stdout with log levels and logger names.
    Noisy HTTP client loggers are turned down to WARNING.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    
    # Reduce httpx request noise in logs
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    
    return logging.getLogger("static_map")


# Create global logger instance
logger = setup_logging()
