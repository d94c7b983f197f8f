import logging
import unittest
import numpy as np
import pytest

import autoped.calib.CalibConstants as cc
import autoped.detector.autopedestal as ap
from autoped.detector.autopedestal import AutoPedestalNoiseProcessor, InitState
from autoped.detector.runheader import RunHeader
from autoped.detector.calibmatrix import build_matrix_sets
from autoped.detector.config import ConfigurationError
from autoped.event import Event, EventType

NAMES = ('pedestal', 'noise', 'status')


def run_header(run_number=1):
    return RunHeader(run_number=run_number, no_of_detector=2, min_x=[0,0], max_x=[1,2], min_y=[0,0], max_y=[1,0])


def processor(**kwa):
    kwa.setdefault('init_pedestal', [10., 10.])
    kwa.setdefault('init_noise', [1.5, 1.5])
    proc = AutoPedestalNoiseProcessor(**kwa)
    proc.init()
    return proc


def test_end_to_end_three_events():
    proc = processor()
    rhdr = run_header()
    proc.process_run_header(rhdr)
    assert rhdr.processors == ['AutoPedestalNoiseProcessor']

    evts = [Event(event_number=i, run_number=1) for i in range(3)]
    for evt in evts:
        proc.process_event(evt)

    for evt in evts:
        assert evt.collection_names() == list(NAMES)
        peds, noise, status = [evt.get_collection(name) for name in NAMES]
        assert [len(m) for m in peds] == [len(m) for m in noise] == [len(m) for m in status] == [4, 3]
        for i in range(2):
            assert np.all(peds[i].values == 10.)
            assert np.all(noise[i].values == 1.5)
            assert np.all(status[i].values == cc.GOODPIXEL)
            assert peds[i].sensor_id == i

    for name in NAMES:
        colls = [evt.get_collection(name) for evt in evts]
        assert colls[0].shares_data(colls[1]) and colls[1].shares_data(colls[2])


def test_build_once_per_run(monkeypatch):
    calls = []
    def counting_build(*args, **kwa):
        calls.append(args)
        return build_matrix_sets(*args, **kwa)
    monkeypatch.setattr(ap, 'build_matrix_sets', counting_build)

    proc = processor()
    proc.process_run_header(run_header())
    sets = []
    for i in range(5):
        proc.process_event(Event(event_number=i, run_number=1))
        sets.append(proc.matrix_sets)
    assert len(calls) == 1
    assert all(s is sets[0] for s in sets)
    assert proc.state is InitState.BUILT


def test_rebuild_on_new_run():
    proc = processor()
    proc.process_run_header(run_header(1))
    proc.process_event(Event(event_number=0, run_number=1))
    sets1 = proc.matrix_sets

    rhdr2 = RunHeader(run_number=2, no_of_detector=1, min_x=[0], max_x=[4], min_y=[0], max_y=[1])
    proc.process_run_header(rhdr2)
    assert proc.state is InitState.UNINITIALIZED
    assert proc.matrix_sets is None
    evt = Event(event_number=0, run_number=2)
    proc.process_event(evt)
    assert proc.matrix_sets is not sets1
    assert [len(m) for m in evt.get_collection('pedestal')] == [10]
    assert proc.irun == 2


def test_reconcile_on_run_header():
    proc = processor(init_pedestal=[2., 3., 4.], init_noise=[1.])
    rhdr = RunHeader(run_number=1, no_of_detector=6, min_x=[0]*6, max_x=[1]*6, min_y=[0]*6, max_y=[0]*6)
    proc.process_run_header(rhdr)
    assert proc.init_pedestal == [2., 3., 4., 4., 4., 4.]
    assert proc.init_noise == [1.]*6
    assert proc.cfg.init_pedestal == [2., 3., 4.]


def test_empty_values_fail_on_run_header():
    proc = processor(init_pedestal=[])
    with pytest.raises(ConfigurationError):
        proc.process_run_header(run_header())


def test_malformed_geometry_publishes_nothing():
    proc = processor()
    rhdr = RunHeader(run_number=1, no_of_detector=2, min_x=[0,3], max_x=[1,1], min_y=[0,0], max_y=[1,0])
    proc.process_run_header(rhdr)
    evt = Event(event_number=0, run_number=1)
    with pytest.raises(ConfigurationError):
        proc.process_event(evt)
    assert evt.collection_names() == []
    assert proc.matrix_sets is None
    assert proc.state is InitState.UNINITIALIZED


def test_end_of_run_marker_before_data():
    proc = processor()
    proc.process_run_header(run_header())
    evt = Event(event_number=0, run_number=1, event_type=EventType.kEORE)
    proc.process_event(evt)
    assert evt.collection_names() == []
    assert proc.state is InitState.UNINITIALIZED


def test_unknown_event_is_published(caplog):
    proc = processor()
    proc.process_run_header(run_header())
    evt = Event(event_number=0, run_number=1, event_type=EventType.kUNKNOWN)
    with caplog.at_level(logging.WARNING):
        proc.process_event(evt)
    assert 'unknown type' in caplog.text
    assert evt.collection_names() == list(NAMES)


def test_event_before_run_header():
    proc = processor()
    with pytest.raises(RuntimeError):
        proc.process_event(Event())


def test_custom_channel_names():
    proc = processor(pedestal_name='ped0', noise_name='rms0', status_name='stat0')
    proc.process_run_header(run_header())
    evt = Event()
    proc.process_event(evt)
    assert evt.collection_names() == ['ped0', 'rms0', 'stat0']


def test_progress_message(caplog):
    proc = processor()
    proc.process_run_header(run_header())
    with caplog.at_level(logging.INFO, logger='autoped.detector.autopedestal'):
        for i in range(11):
            proc.process_event(Event(event_number=i, run_number=1))
    msgs = [r.getMessage() for r in caplog.records if r.getMessage().startswith('Processing event')]
    assert len(msgs) == 2
    assert '(Total =         10)' in msgs[1]


class TestEnd(unittest.TestCase):

    def test_end_releases(self):
        proc = processor()
        proc.process_run_header(run_header())
        proc.process_event(Event())
        self.assertIsNotNone(proc.matrix_sets)
        proc.end()
        self.assertIsNone(proc.matrix_sets)
        self.assertIs(proc.state, InitState.UNINITIALIZED)
        self.assertFalse(proc.catalog.is_loaded)


def test_failed_run_header_blocks_events():
    proc = processor(init_noise=[])
    with pytest.raises(ConfigurationError):
        proc.process_run_header(run_header())
    assert not proc.catalog.is_loaded
    with pytest.raises(RuntimeError):
        proc.process_event(Event())


def test_out_of_range_noise_rejected():
    with pytest.raises(ConfigurationError):
        AutoPedestalNoiseProcessor(init_pedestal=[1.1], init_noise=[1e40])


def test_negative_detector_count_fails_before_reconcile(caplog):
    proc = processor()
    rhdr = RunHeader(run_number=3, no_of_detector=-1)
    with caplog.at_level(logging.WARNING):
        with pytest.raises(ConfigurationError):
            proc.process_run_header(rhdr)
    assert 'ignored' not in caplog.text
    assert not proc.catalog.is_loaded
    assert proc.init_pedestal is None and proc.init_noise is None


def test_run_without_detectors_publishes_empty_sets(caplog):
    proc = AutoPedestalNoiseProcessor()
    proc.init()
    with caplog.at_level(logging.WARNING):
        proc.process_run_header(RunHeader(run_number=4, no_of_detector=0))
    assert 'last 6 values are ignored' in caplog.text
    assert proc.init_pedestal == [0.]*6
    evt = Event(event_number=0, run_number=4)
    proc.process_event(evt)
    assert proc.state is InitState.BUILT
    assert evt.collection_names() == list(NAMES)
    assert [len(evt.get_collection(name)) for name in NAMES] == [0, 0, 0]
