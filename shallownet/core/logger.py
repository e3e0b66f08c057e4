import logging
import os


DEFAULT_LOG_FILENAME = 'log.txt'

LINE_FORMAT = ("[%(asctime)s] [%(name)s:%(lineno)d] "
               "%(levelname)-8s %(message)s")
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(filename=None, stdout=True, level=logging.DEBUG,
                  logger_name='shallownet'):
    """ Sets up logging formatting, handlers, etc. for the package logger

    Parameters
    ----------
    filename: str, default=None
        If given, log records are also written to this file, which is
        truncated first. Use :code:`DEFAULT_LOG_FILENAME` for the
        conventional location.

    stdout: bool, default=True
        If True, log records are written to the console as well

    level: int, default=logging.DEBUG
        The level of the package logger

    logger_name: str, default='shallownet'
        The name of the logger to configure

    Returns
    -------
    logger: logging.Logger
        The configured logger

    """
    formatter = logging.Formatter(fmt=LINE_FORMAT, datefmt=DATE_FORMAT)

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    # Calling this twice should not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if filename is not None:
        if os.path.exists(filename):
            os.remove(filename)
        fhandler = logging.FileHandler(filename, mode='w')
        fhandler.setFormatter(formatter)
        logger.addHandler(fhandler)

    if stdout:
        shandler = logging.StreamHandler()
        shandler.setFormatter(formatter)
        logger.addHandler(shandler)

    return logger


def progress_message(msg, i, n):
    """ Prepend a zero-padded "(i / n)" counter to `msg` """
    fmt = "(%%0%dd / %d) %s" % (len(str(n)), n, msg)
    return fmt % i
