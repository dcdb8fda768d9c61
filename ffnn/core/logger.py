import logging


PACKAGE_LOGGER_NAME = 'ffnn'

LINE_FORMAT = ("[%(asctime)s] [%(name)s:%(lineno)d] "
               "%(levelname)-8s %(message)s")
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(filename=None, stdout=True, level=logging.INFO):
    """ Sets up logging formatting, etc. for the package logger

    Parameters
    ----------
    filename: str, default=None
        If given, log records are also written to this file, which is
        overwritten.

    stdout: bool, default=True
        If True, log records are written to the console.

    level: int, default=logging.INFO
        The package logger level.

    Returns
    -------
    logger: logging.Logger
        The `ffnn` logger. Handlers from previous calls are removed.
    """
    formatter = logging.Formatter(fmt=LINE_FORMAT, datefmt=DATE_FORMAT)

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if filename is not None:
        fhandler = logging.FileHandler(filename, mode='w')
        fhandler.setFormatter(formatter)
        logger.addHandler(fhandler)

    if stdout:
        shandler = logging.StreamHandler()
        shandler.setFormatter(formatter)
        logger.addHandler(shandler)

    return logger
