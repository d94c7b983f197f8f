"""
:py:class:`geometry` - per-detector rectangular pixel address bounds for the run
================================================================================

Usage::

    from autoped.detector.geometry import DetectorGeometry, GeometryCatalog

    cat = GeometryCatalog()
    geos = cat.load(runheader) # list of DetectorGeometry, one per detector
    npix = geos[0].pixel_count

This software was developed for the autoped project.
If you use all or part of it, please give an appropriate acknowledgment.

@date 2026-10-17
"""

import logging
logger = logging.getLogger(__name__)

from collections import namedtuple
from autoped.detector.config import ConfigurationError


class DetectorGeometry(namedtuple('DetectorGeometry', 'min_x max_x min_y max_y')):
    """Inclusive pixel address bounds of a single detector."""
    __slots__ = ()

    @property
    def nx(self):
        return self.max_x - self.min_x + 1

    @property
    def ny(self):
        return self.max_y - self.min_y + 1

    @property
    def pixel_count(self):
        return self.nx * self.ny

    def is_valid(self):
        return self.nx > 0 and self.ny > 0


class GeometryCatalog:
    """Holds detector geometry of the current run, re-loaded on each run header."""

    def __init__(self):
        self.geometry = None

    @property
    def is_loaded(self):
        return self.geometry is not None

    @property
    def detector_count(self):
        return 0 if self.geometry is None else len(self.geometry)

    def load(self, rhdr):
        ndet = rhdr.no_of_detector
        if ndet < 0:
            raise ConfigurationError('negative number of detectors %d in run %d' % (ndet, rhdr.run_number))
        bounds = {'min_x': rhdr.min_x, 'max_x': rhdr.max_x, 'min_y': rhdr.min_y, 'max_y': rhdr.max_y}
        for name, arr in bounds.items():
            if len(arr) != ndet:
                raise ConfigurationError('run %d: %s has %d entries for %d detectors'%\
                                         (rhdr.run_number, name, len(arr), ndet))
        self.geometry = [DetectorGeometry(*rec) for rec in zip(rhdr.min_x, rhdr.max_x, rhdr.min_y, rhdr.max_y)]
        if ndet == 0:
            logger.warning('run %d has no detectors' % rhdr.run_number)
        logger.debug('run %d geometry:\n  %s' % (rhdr.run_number,\
                     '\n  '.join(['det:%02d %s npix:%d' % (i, str(g), g.pixel_count) for i,g in enumerate(self.geometry)])))
        return self.geometry

    def clear(self):
        self.geometry = None

# EOF
