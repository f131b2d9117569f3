"""
utils/__init__.py - Shared Helpers

Logger construction used by the launcher and the tag cloud orchestrator.
"""

import os
import logging


def get_logger(name, filename=None, log_dir="Logs"):
    """
    Return a named logger writing to <log_dir>/<filename or name>.log and stderr.

    Asking again for the same name with a different log file moves the
    file handler there; the console handler is only attached once.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    log_path = os.path.abspath(
        os.path.join(log_dir, f"{filename if filename else name}.log"))

    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    if any(h.baseFilename == log_path for h in file_handlers):
        return logger
    for handler in file_handlers:
        logger.removeHandler(handler)
        handler.close()

    if not os.path.exists(log_dir):
        os.makedirs(log_dir)
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    fh = logging.FileHandler(log_path)
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(formatter)
    logger.addHandler(fh)

    if len(logger.handlers) == 1:
        ch = logging.StreamHandler()
        ch.setLevel(logging.INFO)
        ch.setFormatter(formatter)
        logger.addHandler(ch)
    return logger
