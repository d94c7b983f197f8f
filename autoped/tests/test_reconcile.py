import logging
import pytest

from autoped.detector.reconcile import reconcile
from autoped.detector.config import ConfigurationError


def test_reconcile_pads_with_last_value():
    assert reconcile([2., 3., 4.], 6, name='pedestal') == [2., 3., 4., 4., 4., 4.]


def test_reconcile_same_length_unchanged():
    vals = [1., 2.]
    res = reconcile(vals, 2)
    assert res == [1., 2.]


def test_reconcile_does_not_mutate_input():
    vals = [5.]
    res = reconcile(vals, 3)
    assert vals == [5.]
    assert res == [5., 5., 5.]


def test_reconcile_longer_list_kept_with_warning(caplog):
    with caplog.at_level(logging.WARNING):
        res = reconcile([0., 1., 2., 3., 4., 5.], 2, name='noise')
    assert res == [0., 1., 2., 3., 4., 5.]
    assert 'ignored' in caplog.text


def test_reconcile_empty_list_fails():
    with pytest.raises(ConfigurationError):
        reconcile([], 3)


def test_reconcile_empty_list_no_detectors():
    assert reconcile([], 0) == []
