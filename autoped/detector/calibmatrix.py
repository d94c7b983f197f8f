"""
:py:class:`calibmatrix` - per-sensor calibration matrices seeded with constant values
=====================================================================================

Usage::

    from autoped.detector.calibmatrix import build_matrix_sets, MatrixSet, CalibMatrix

    peds, noise, status = build_matrix_sets(geometry, [10.,10.], [1.5,1.5])
    m = peds[0]   # CalibMatrix of detector 0
    m.values      # read-only flat numpy array of m.pixel_count values
    m.sensor_id, m.min_x, m.min_y, m.max_x, m.max_y, m.cellid
    v = peds.view() # new MatrixSet sharing the same matrices

Cell values are stored flat: index = x + y*nx, relative to (min_x, min_y).

This software was developed for the autoped project.
If you use all or part of it, please give an appropriate acknowledgment.

@date 2026-10-17
"""

import logging
logger = logging.getLogger(__name__)

import numpy as np
import autoped.calib.CalibConstants as cc
from autoped.calib.CellIDEncoder import CellIDEncoder
from autoped.detector.config import ConfigurationError
from autoped.detector.NDArrUtils import info_ndarr


class CalibMatrix:
    """Flat array of per-pixel values of a single sensor tagged with its geometry."""

    def __init__(self, values, sensor_id, geo, cellid=None):
        self.values = values
        self.values.flags.writeable = False
        self.sensor_id = sensor_id
        self.min_x, self.max_x, self.min_y, self.max_y = geo.min_x, geo.max_x, geo.min_y, geo.max_y
        self.cellid = cellid

    @property
    def pixel_count(self):
        return self.values.size

    def __len__(self):
        return self.values.size

    def tag(self):
        return {'sensorID': self.sensor_id, 'xMin': self.min_x, 'xMax': self.max_x, 'yMin': self.min_y, 'yMax': self.max_y}

    def __repr__(self):
        return 'CalibMatrix(sensorID=%d, x=[%d,%d], y=[%d,%d], %s)' %\
               (self.sensor_id, self.min_x, self.max_x, self.min_y, self.max_y, info_ndarr(self.values, last=3))


class MatrixSet:
    """Ordered immutable collection of CalibMatrix, position = sensor index."""

    def __init__(self, ctype, matrices=(), encoding=cc.MATRIXDEFAULTENCODING):
        self.ctype = ctype
        self.name = cc.dic_calib_type_to_name[ctype]
        self.coll_type = cc.dic_calib_type_to_coll_type[ctype]
        self.dtype = cc.dic_calib_type_to_dtype[ctype]
        self.parameters = {cc.CELLIDENCODING: encoding}
        self._matrices = tuple(matrices)

    def __len__(self):
        return len(self._matrices)

    def __getitem__(self, i):
        return self._matrices[i]

    def __iter__(self):
        return iter(self._matrices)

    def view(self):
        """Returns new container referencing the same matrices."""
        o = MatrixSet(self.ctype, self._matrices, self.parameters[cc.CELLIDENCODING])
        o.parameters = dict(self.parameters)
        return o

    def shares_data(self, other):
        return len(self) == len(other) and all(a is b for a,b in zip(self._matrices, other._matrices))

    def __repr__(self):
        return 'MatrixSet(%s, %s, nmatrices=%d)' % (self.name, self.coll_type, len(self))


def pixel_count(i, geo):
    """Returns number of pixels for valid geometry, raises ConfigurationError otherwise."""
    if not geo.is_valid():
        raise ConfigurationError('detector %d has malformed geometry %s, nx=%d ny=%d' % (i, str(geo), geo.nx, geo.ny))
    return geo.pixel_count


def build_matrix_sets(geometry, init_pedestal, init_noise, encoding=cc.MATRIXDEFAULTENCODING):
    """Returns (pedestal, noise, status) MatrixSet with one matrix per detector in geometry.
       Raises ConfigurationError and returns nothing if any detector can not be seeded.
    """
    ndet = len(geometry)
    vmax = float(np.finfo(cc.dic_calib_type_to_dtype[cc.PEDESTALS]).max)
    for name, vals in (('pedestal', init_pedestal), ('noise', init_noise)):
        if len(vals) < ndet:
            raise ConfigurationError('%d initial %s values for %d detectors' % (len(vals), name, ndet))
        for i, v in enumerate(vals[:ndet]):
            if not abs(v) <= vmax:
                raise ConfigurationError('detector %d initial %s value %s is out of float32 range' % (i, name, v))

    encoder = CellIDEncoder(encoding)
    dtype_ped    = cc.dic_calib_type_to_dtype[cc.PEDESTALS]
    dtype_noise  = cc.dic_calib_type_to_dtype[cc.PIXEL_RMS]
    dtype_status = cc.dic_calib_type_to_dtype[cc.PIXEL_STATUS]

    peds, noise, status = [], [], []
    for i, geo in enumerate(geometry):
        npix = pixel_count(i, geo)
        try:
            cellid = encoder.encode(sensorID=i, xMin=geo.min_x, xMax=geo.max_x, yMin=geo.min_y, yMax=geo.max_y)
        except ValueError as err:
            raise ConfigurationError('detector %d geometry %s does not fit encoding "%s": %s' % (i, str(geo), encoding, err))

        status.append(CalibMatrix(np.full(npix, cc.GOODPIXEL, dtype=dtype_status), i, geo, cellid))
        peds.append  (CalibMatrix(np.full(npix, init_pedestal[i], dtype=dtype_ped), i, geo, cellid))
        noise.append (CalibMatrix(np.full(npix, init_noise[i], dtype=dtype_noise), i, geo, cellid))

        logger.debug('det:%02d npix:%d pedestal:%.3f noise:%.3f' % (i, npix, init_pedestal[i], init_noise[i]))

    return MatrixSet(cc.PEDESTALS,    peds,   encoding),\
           MatrixSet(cc.PIXEL_RMS,    noise,  encoding),\
           MatrixSet(cc.PIXEL_STATUS, status, encoding)

# EOF
