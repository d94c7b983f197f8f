
"""
Usage::
        from autoped.detector.UtilsLogging import logging, DICT_NAME_TO_LEVEL, STR_LEVEL_NAMES, init_logger
        logger = logging.getLogger(__name__)
        init_logger(loglevel='DEBUG', logfname=None)

Repeated init_logger replaces handlers added by previous call.
"""

import os
import sys
import logging
DICT_NAME_TO_LEVEL = logging._nameToLevel
STR_LEVEL_NAMES = ', '.join(DICT_NAME_TO_LEVEL.keys())

FMT_DEBUG = '[%(levelname).1s] %(filename)s L%(lineno)04d %(message)s'
FMT_OTHER = '[%(levelname).1s] L%(lineno)04d %(message)s'

HANDLERS = []


def int_loglevel(loglevel='DEBUG'):
    try:
        return DICT_NAME_TO_LEVEL[loglevel.upper()]
    except KeyError:
        raise ValueError('loglevel "%s" is not one of %s' % (loglevel, STR_LEVEL_NAMES)) from None


def add_handler(handler, level):
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FMT_DEBUG if level==logging.DEBUG else FMT_OTHER))
    logging.getLogger().addHandler(handler)
    HANDLERS.append(handler)
    return handler


def remove_handlers():
    root = logging.getLogger()
    while HANDLERS:
        h = HANDLERS.pop()
        root.removeHandler(h)
        h.close()


def init_logger(loglevel='DEBUG', logfname=None, filemode=0o664):
    """Sets root logger level, adds stdout and optional file handler, returns list of handlers."""
    level = int_loglevel(loglevel)
    remove_handlers()
    logging.getLogger().setLevel(level)
    add_handler(logging.StreamHandler(sys.stdout), level)
    if logfname is not None:
        add_handler(logging.FileHandler(logfname), level)
        os.chmod(logfname, filemode)
    return list(HANDLERS)

# EOF
