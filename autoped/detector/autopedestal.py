"""
:py:class:`AutoPedestalNoiseProcessor` produces initial pedestal / noise / status with user provided values
===========================================================================================================

Usage::

    from autoped.detector.autopedestal import AutoPedestalNoiseProcessor

    proc = AutoPedestalNoiseProcessor(init_pedestal=[10.,10.], init_noise=[1.5,1.5])
    proc.init()
    proc.process_run_header(rhdr)  # geometry and initial values for the run
    proc.process_event(evt)        # matrices are built on the first data event and attached to each event
    ...
    proc.end()

This software was developed for the autoped project.
If you use all or part of it, please give an appropriate acknowledgment.

@date 2026-10-17
"""

import logging
logger = logging.getLogger(__name__)

from enum import Enum
from autoped.event import EventType
from autoped.detector.config import ProcessorConfig, ConfigurationError
from autoped.detector.geometry import GeometryCatalog
from autoped.detector.reconcile import reconcile
from autoped.detector.calibmatrix import build_matrix_sets
from autoped.detector.publisher import publish
from autoped.detector.Utils import selected_record
from autoped.detector.NDArrUtils import info_matrix_set


class InitState(Enum):
    UNINITIALIZED = 0
    BUILT = 1


class AutoPedestalNoiseProcessor:

    description = 'AutoPedestalNoiseProcessor produces initial pedestal / noise / status with user provided values'

    def __init__(self, cfg=None, **kwa):
        self.cfg = cfg if cfg is not None else ProcessorConfig(**kwa)
        self.name = type(self).__name__
        self.catalog = GeometryCatalog()
        self.init_pedestal = None
        self.init_noise = None
        self.matrix_sets = None
        self.state = InitState.UNINITIALIZED
        self.irun = 0
        self.ievt = 0

    def init(self):
        logger.info('%s\n  parameters:%s' % (self.description, self.cfg.info()))
        self.irun = 0
        self.ievt = 0

    def process_run_header(self, rhdr):
        self.irun += 1
        rhdr.add_processor(self.name)
        self.release()
        self.catalog.clear()
        self.init_pedestal = self.init_noise = None
        self.catalog.load(rhdr)
        ndet = self.catalog.detector_count
        try:
            self.init_pedestal = reconcile(self.cfg.init_pedestal, ndet, name='pedestal')
            self.init_noise    = reconcile(self.cfg.init_noise,    ndet, name='noise')
        except ConfigurationError:
            self.catalog.clear()
            self.init_pedestal = self.init_noise = None
            raise
        logger.info('run %d: %d detectors, initial pedestal: %s noise: %s'%\
                    (rhdr.run_number, ndet, str(self.init_pedestal[:ndet]), str(self.init_noise[:ndet])))

    def build(self):
        """Builds matrix sets for the current run geometry, switches state to BUILT on success only."""
        self.matrix_sets = build_matrix_sets(self.catalog.geometry, self.init_pedestal, self.init_noise)
        self.state = InitState.BUILT
        logger.info('built %s' % ', '.join(['%s: %d matrices' % (s.name, len(s)) for s in self.matrix_sets]))
        for mset in self.matrix_sets:
            logger.debug(info_matrix_set(mset))

    def process_event(self, evt):
        if selected_record(self.ievt):
            logger.info('Processing event %6d in run %06d (Total = %10d)' % (evt.event_number, evt.run_number, self.ievt))
        self.ievt += 1

        if not self.catalog.is_loaded:
            raise RuntimeError('event %d is processed before any run header' % evt.event_number)

        if EventType.isEndOfRun(evt.event_type):
            logger.debug('EORE found: nothing else to do.')
            return

        if self.state is InitState.UNINITIALIZED:
            self.build()

        publish(evt, self.matrix_sets, self.cfg.channel_names())

    def release(self):
        self.matrix_sets = None
        self.state = InitState.UNINITIALIZED

    def end(self):
        self.release()
        self.catalog.clear()
        logger.info('Successfully finished')

# EOF
