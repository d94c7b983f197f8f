"""
:py:class:`config` - parameters of the automatic pedestal/noise/status processor
================================================================================

Usage::

    from autoped.detector.config import ProcessorConfig, ConfigurationError

    cfg = ProcessorConfig(init_pedestal=[0.,0.], init_noise=[1.5,], noise_name='noise')
    logger.info(cfg.info())

This software was developed for the autoped project.
If you use all or part of it, please give an appropriate acknowledgment.

@date 2026-10-17
"""

import logging
logger = logging.getLogger(__name__)

import math
import numpy as np
import autoped.calib.CalibConstants as cc
from autoped.detector.Utils import info_dict


class ConfigurationError(Exception): pass


def float_list(values, name='values'):
    """Returns list of float from sequence or comma-separated str like '1,2.5,3'."""
    if isinstance(values, str):
        values = [v for v in values.split(',') if v.strip()]
    try:
        lst = [float(v) for v in values]
    except (TypeError, ValueError) as err:
        raise ConfigurationError('%s: can not convert %s to list of float: %s' % (name, repr(values), err))
    vmax = float(np.finfo(cc.dic_calib_type_to_dtype[cc.PEDESTALS]).max)
    for v in lst:
        if not math.isfinite(v):
            raise ConfigurationError('%s: non-finite value %s in %s' % (name, v, lst))
        if abs(v) > vmax:
            raise ConfigurationError('%s: value %s in %s exceeds matrix value range %g' % (name, v, lst, vmax))
    return lst


class ProcessorConfig:
    """Output collection names and initial pedestal and noise values (one value for detector)."""

    def __init__(self, **kwa):
        self.pedestal_name = kwa.get('pedestal_name', cc.dic_calib_type_to_name[cc.PEDESTALS])
        self.noise_name    = kwa.get('noise_name',    cc.dic_calib_type_to_name[cc.PIXEL_RMS])
        self.status_name   = kwa.get('status_name',   cc.dic_calib_type_to_name[cc.PIXEL_STATUS])
        self.init_pedestal = float_list(kwa.get('init_pedestal', cc.INIT_PEDESTAL_EXAMPLE), 'init_pedestal')
        self.init_noise    = float_list(kwa.get('init_noise',    cc.INIT_NOISE_EXAMPLE),    'init_noise')
        self.validate()

    def channel_names(self):
        return self.pedestal_name, self.noise_name, self.status_name

    def validate(self):
        names = self.channel_names()
        for name in names:
            if not isinstance(name, str) or not name:
                raise ConfigurationError('collection name must be non-empty str, got %s' % repr(name))
        if len(set(names)) != len(names):
            raise ConfigurationError('collection names must be different, got %s' % str(names))

    def info(self):
        return info_dict({
            'pedestal_name': self.pedestal_name,
            'noise_name'   : self.noise_name,
            'status_name'  : self.status_name,
            'init_pedestal': self.init_pedestal,
            'init_noise'   : self.init_noise,
        }, fmt='  %14s: %s')

# EOF
