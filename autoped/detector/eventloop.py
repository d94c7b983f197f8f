"""
:py:class:`EventLoop` drives a processor through runs and events
================================================================

Usage::

    from autoped.detector.eventloop import EventLoop

    loop = EventLoop(proc, run_headers, events=10, callback=None)
    nevtot = loop.event_loop()

Each run: run header, ``events`` data events, end-of-run marker.
Optional callback(evt) is called after the processor for each event.

This software was developed for the autoped project.
If you use all or part of it, please give an appropriate acknowledgment.

@date 2026-10-17
"""

import logging
logger = logging.getLogger(__name__)

from time import time
from autoped.event import Event, EventType


class EventLoop:

    def __init__(self, proc, run_headers, events=10, callback=None):
        self.proc = proc
        self.run_headers = run_headers
        self.events = events
        self.callback = callback
        self.nevtot = 0

    def begin_run(self, rhdr):
        logger.info('begin_run runnum: %d' % rhdr.run_number)
        self.proc.process_run_header(rhdr)

    def end_run(self, rhdr):
        self.proc_event(Event(event_number=self.events, run_number=rhdr.run_number, event_type=EventType.kEORE))
        logger.info('end_run runnum: %d processors: %s' % (rhdr.run_number, str(rhdr.processors)))

    def proc_event(self, evt):
        self.proc.process_event(evt)
        self.nevtot += 1
        if self.callback is not None:
            self.callback(evt)

    def event_loop(self):
        t0_sec = time()
        self.nevtot = 0
        self.proc.init()
        try:
            for rhdr in self.run_headers:
                self.begin_run(rhdr)
                for ievt in range(self.events):
                    self.proc_event(Event(event_number=ievt, run_number=rhdr.run_number, event_type=EventType.kDE))
                self.end_run(rhdr)
        finally:
            self.proc.end()
        logger.info('event_loop: %d runs %d events, consumed time %.3f sec'%\
                    (len(self.run_headers), self.nevtot, time()-t0_sec))
        return self.nevtot

# EOF
