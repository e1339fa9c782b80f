import sys
from typing import Optional
from loguru import logger
import os

def setup_logging(debug_mode: bool = True, log_dir: Optional[str] = "logs"):
    """
    Configures Loguru logger.
    
    Args:
        debug_mode: Console sink level is DEBUG when True, INFO otherwise
        log_dir: Directory for rotating log files; None disables file output
    """
    # Remove default handler
    logger.remove()

    # Console Handler
    level = "DEBUG" if debug_mode else "INFO"
    logger.add(sys.stderr, level=level, format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>")

    # File Handler
    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
        logger.add(os.path.join(log_dir, "cmdhistory_{time}.log"), rotation="10 MB", retention="1 week", level="DEBUG")

    logger.info("Logging initialized.")
