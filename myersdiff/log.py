# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


class DiffFormatError(ValueError):
    pass


class DiffArgumentError(ValueError):
    pass


class SnakeSearchError(RuntimeError):
    """The forward and reverse searches failed to meet.

    This is never expected for finite inputs, so seeing it
    means the search itself is broken.
    """
    pass


class EditBudgetExceeded(ValueError):
    """No edit script with at most `max_edit_distance` edits exists."""

    def __init__(self, max_edit_distance):
        super(EditBudgetExceeded, self).__init__(
            "No edit script of length <= {} exists.".format(max_edit_distance))
        self.max_edit_distance = max_edit_distance


def init_logging(level=logging.INFO):
    """Sets up logging for myersdiff entry points.

    Call this in all entry points (if __name__ == "__main__").
    Sets the log level for all myersdiff loggers to `level`,
    unless `level` is given as `None`.
    """
    format = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'
    logging.basicConfig(format=format, level=level)
    logging.captureWarnings(True)


def set_myersdiff_log_level(level, set_main=True):
    """Set a log level for myersdiff loggers"""
    logger.setLevel(level)
    if set_main:
        _baseLogger = logging.getLogger()
        _baseLogger.setLevel(level)


logger = logging.getLogger('myersdiff')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical
