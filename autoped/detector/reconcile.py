"""
Reconciles configured per-detector values with the number of detectors in the run
=================================================================================

Usage::

    from autoped.detector.reconcile import reconcile
    peds = reconcile([2., 3., 4.], 6, name='pedestal') # [2., 3., 4., 4., 4., 4.]

Short list is extended by repeating its last element,
longer list is returned unchanged - excess values are not used.
"""

import logging
logger = logging.getLogger(__name__)

from autoped.detector.config import ConfigurationError


def reconcile(configured, target_count, name='values'):
    values = list(configured)
    nvals = len(values)
    if nvals == target_count:
        return values
    if nvals > target_count:
        logger.warning('%d initial %s values for %d detectors, last %d values are ignored'%\
                       (nvals, name, target_count, nvals - target_count))
        return values
    if nvals == 0:
        raise ConfigurationError('empty list of initial %s values can not be resized to %d detectors' % (name, target_count))
    logger.warning('Resizing the initial %s vector from %d to %d' % (name, nvals, target_count))
    return values + [values[-1],] * (target_count - nvals)

# EOF
