"""
:py:class:`runheader` - run-start metadata with detector geometry bounds
========================================================================

Usage::

    from autoped.detector.runheader import RunHeader, load_run_headers

    rhdr = RunHeader(run_number=12, no_of_detector=2, min_x=[0,0], max_x=[1,2], min_y=[0,0], max_y=[1,0])
    rhdr = RunHeader.from_dict({'runNumber':12, 'detectorCount':2, 'minX':[0,0], 'maxX':[1,2], 'minY':[0,0], 'maxY':[1,0]})
    rhdrs = load_run_headers('runs.json') # json file with one dict or list of dicts

This software was developed for the autoped project.
If you use all or part of it, please give an appropriate acknowledgment.

@date 2026-10-17
"""

import logging
logger = logging.getLogger(__name__)

import json
from autoped.detector.config import ConfigurationError


class RunHeader:

    def __init__(self, run_number=0, no_of_detector=0, min_x=(), max_x=(), min_y=(), max_y=()):
        self.run_number = int(run_number)
        self.no_of_detector = int(no_of_detector)
        self.min_x = [int(v) for v in min_x]
        self.max_x = [int(v) for v in max_x]
        self.min_y = [int(v) for v in min_y]
        self.max_y = [int(v) for v in max_y]
        self.processors = []

    def add_processor(self, name):
        self.processors.append(name)

    @classmethod
    def from_dict(cls, d):
        if not isinstance(d, dict):
            raise ConfigurationError('run header should be dict, got %s' % type(d).__name__)
        try:
            return cls(run_number     = d.get('runNumber', 0),
                       no_of_detector = d['detectorCount'],
                       min_x = d['minX'],
                       max_x = d['maxX'],
                       min_y = d['minY'],
                       max_y = d['maxY'])
        except KeyError as err:
            raise ConfigurationError('run header misses key %s' % err)
        except (TypeError, ValueError) as err:
            raise ConfigurationError('run header has wrong value: %s' % err)

    def __repr__(self):
        return 'RunHeader(run_number=%d, no_of_detector=%d)' % (self.run_number, self.no_of_detector)


def load_run_headers(fname):
    """Returns list of RunHeader from json file with one dict or list of dicts."""
    logger.debug('load run headers from %s' % fname)
    with open(fname) as f:
        o = json.load(f)
    recs = o if isinstance(o, list) else [o,]
    return [RunHeader.from_dict(d) for d in recs]

# EOF
