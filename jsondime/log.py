# coding: utf-8

# Copyright (c) jsondime Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


LOG_FORMAT = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'

# Names accepted by the log_level config option and --log-level
LEVEL_NAMES = ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL')


def as_level(level):
    """Convert a level name as used in jsondime config to a logging level.

    Numeric levels are passed through.
    """
    if isinstance(level, int):
        return level
    name = level.upper()
    if name not in LEVEL_NAMES:
        raise ValueError('Unknown log level %r, expected one of %r.' % (level, LEVEL_NAMES))
    return logging.getLevelName(name)


def init_logging(level='INFO'):
    """Sets up logging for the jsdiff and jspatch entry points.

    `level` is a level name like the Global.log_level option, or a
    numeric logging level.
    """
    logging.basicConfig(format=LOG_FORMAT, level=as_level(level))
    logging.captureWarnings(True)


def set_jsondime_log_level(level, set_main=True):
    """Set the level of the jsondime logger, and of the root logger with set_main."""
    level = as_level(level)
    logger.setLevel(level)
    if set_main:
        logging.getLogger().setLevel(level)


logger = logging.getLogger('jsondime')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical
