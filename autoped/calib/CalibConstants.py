"""
:py:class:`CalibConstants` - global constants for automatic pedestal/noise/status seeding
==========================================================================================

Usage ::

    import autoped.calib.CalibConstants as cc

    for ctype, name, dtype in cc.ctype_tuple: print('%2d : %12s : %s' % (ctype, name, dtype))
    status = np.full(npix, cc.GOODPIXEL, dtype=cc.dic_calib_type_to_dtype[cc.PIXEL_STATUS])

This software was developed for the autoped project.
If you use all or part of it, please give an appropriate acknowledgment.

@date 2026-10-17
"""

import numpy as np

# Enumerated and named calibration types

PEDESTALS     = 0
PIXEL_STATUS  = 1
PIXEL_RMS     = 2

ctype_tuple = (
    (PEDESTALS,    'pedestal', np.float32),
    (PIXEL_RMS,    'noise',    np.float32),
    (PIXEL_STATUS, 'status',   np.int16  ),
)

list_calib_types  = [rec[0] for rec in ctype_tuple]
list_calib_names  = [rec[1] for rec in ctype_tuple]
list_calib_dtypes = [rec[2] for rec in ctype_tuple]

dic_calib_type_to_name  = dict(zip(list_calib_types, list_calib_names))
dic_calib_name_to_type  = dict(zip(list_calib_names, list_calib_types))
dic_calib_type_to_dtype = dict(zip(list_calib_types, list_calib_dtypes))

# Collection types: float matrices vs. raw (integer) matrices

TRACKERDATA    = 'TrackerData'
TRACKERRAWDATA = 'TrackerRawData'

dic_calib_type_to_coll_type = {
    PEDESTALS    : TRACKERDATA,
    PIXEL_RMS    : TRACKERDATA,
    PIXEL_STATUS : TRACKERRAWDATA,
}

# Pixel status values

GOODPIXEL    = 0
BADPIXEL     = 1
HITPIXEL     = 2
MISSINGPIXEL = 3

dic_status_to_name = {
    GOODPIXEL    : 'good',
    BADPIXEL     : 'bad',
    HITPIXEL     : 'hit',
    MISSINGPIXEL : 'missing',
}

# Cell id encoding of the matrix geometry tag, fields from the least significant bit

MATRIXDEFAULTENCODING = 'sensorID:5,xMin:12,xMax:12,yMin:12,yMax:12'
CELLIDENCODING = 'CellIDEncoding'

# Default processor parameters

NDETECTOR_EXAMPLE = 6
INIT_PEDESTAL_EXAMPLE = [0.,] * NDETECTOR_EXAMPLE
INIT_NOISE_EXAMPLE    = [1.,] * NDETECTOR_EXAMPLE

# EOF
