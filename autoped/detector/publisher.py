"""
Attaches calibration matrix sets to the event
=============================================

Usage::

    from autoped.detector.publisher import publish
    published = publish(evt, (peds, noise, status), ('pedestal', 'noise', 'status'))

Each call hands a new container to the event,
the matrices in it are shared between all events.
"""

import logging
logger = logging.getLogger(__name__)

from autoped.event import EventType


def publish(evt, matrix_sets, names):
    """Returns True if matrix sets are attached to evt, False for end-of-run marker."""
    if EventType.isEndOfRun(evt.event_type):
        logger.debug('EORE found: nothing else to do.')
        return False
    if not EventType.isKnown(evt.event_type):
        logger.warning('Event number %d in run %d is of unknown type. Continue considering it as a normal Data Event.'%\
                       (evt.event_number, evt.run_number))
    for mset, name in zip(matrix_sets, names):
        evt.add_collection(mset.view(), name)
    return True

# EOF
