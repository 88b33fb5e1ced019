import logging
import sys

LOGGER_NAME = 'lasersight'
LOG_FORMAT = '%(asctime)s - %(name)s - [%(levelname)s] - %(message)s'

def setup_logging(level=logging.INFO, stream=None):
    """
    Configures logging for the lasersight package.

    Records go to stderr unless another stream is given, so results printed
    on stdout stay clean. Calling again replaces the handler installed by
    the previous call.

    Args:
        level: The logging level (e.g., logging.INFO, logging.DEBUG).
        stream: Text stream for log records, defaults to sys.stderr.

    Returns:
        The logging.Handler that was installed.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(package_logger.handlers):
        if handler.get_name() == LOGGER_NAME:
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.set_name(LOGGER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return handler

def get_logger(name: str):
    """
    Retrieves a logger for a lasersight module.

    Args:
        name (str): The name for the logger, typically __name__.

    Returns:
        A logging.Logger instance.
    """
    return logging.getLogger(name)
