'''
Package logger for lama.

The library only emits DEBUG records for contract violations and attaches
nothing but a NullHandler. Applications route the 'lama' logger themselves,
or call setup_logger to print it.
'''
import logging
import os
import sys

__all__ = ['logger', 'setup_logger']


logger = logging.getLogger('lama')
logger.addHandler(logging.NullHandler())


# str -> int
def log_level(name):
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError('Unknown log level "{}"'.format(name))
    return level


def setup_logger(name='lama', level=None, format_string=None):
    '''
    Send a logger's records to stdout.

    Args:
        name (str): Logger name
        level (str): DEBUG, INFO, WARNING, ERROR or CRITICAL. Falls back to
            the LOG_LEVEL environment variable, then INFO
        format_string (str): Custom format string

    Returns:
        logging.Logger: the configured logger

    Raises:
        ValueError: level is not a known level name
    '''
    level = log_level(level or os.getenv('LOG_LEVEL', 'INFO'))
    format_string = format_string or '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    configured = logging.getLogger(name)
    if not any(isinstance(h, logging.StreamHandler) for h in configured.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=format_string, datefmt='%Y-%m-%d %H:%M:%S'))
        configured.addHandler(handler)
    configured.setLevel(level)
    return configured
