import pytest

import autoped.calib.CalibConstants as cc
from autoped.calib.CellIDEncoder import CellIDEncoder, parse_encoding


def test_default_encoding_fields():
    fields = parse_encoding(cc.MATRIXDEFAULTENCODING)
    assert [f.name for f in fields] == ['sensorID', 'xMin', 'xMax', 'yMin', 'yMax']
    assert [f.offset for f in fields] == [0, 5, 17, 29, 41]


def test_encode_decode():
    enc = CellIDEncoder(cc.MATRIXDEFAULTENCODING)
    cellid = enc.encode(sensorID=1, xMin=0, xMax=263, yMin=0, yMax=255)
    assert cellid == 1 | (263<<17) | (255<<41)
    assert enc.decode(cellid) == {'sensorID':1, 'xMin':0, 'xMax':263, 'yMin':0, 'yMax':255}
    assert enc.cellid0(cellid) == 1 | (263<<17)
    assert enc.cellid1(cellid) == 255<<9


def test_signed_field():
    enc = CellIDEncoder('a:-4,b:4')
    cellid = enc.encode(a=-1, b=2)
    assert cellid == 47
    assert enc.decode(cellid) == {'a':-1, 'b':2}


def test_out_of_range():
    enc = CellIDEncoder(cc.MATRIXDEFAULTENCODING)
    with pytest.raises(ValueError):
        enc.encode(sensorID=32, xMin=0, xMax=1, yMin=0, yMax=1)
    with pytest.raises(ValueError):
        enc.encode(sensorID=0, xMin=-1, xMax=1, yMin=0, yMax=1)


def test_missing_and_unknown_fields():
    enc = CellIDEncoder(cc.MATRIXDEFAULTENCODING)
    with pytest.raises(KeyError):
        enc.encode(sensorID=0, xMin=0, xMax=1, yMin=0)
    with pytest.raises(KeyError):
        enc.encode(sensorID=0, xMin=0, xMax=1, yMin=0, yMax=1, zMin=0)


def test_wrong_encoding():
    with pytest.raises(ValueError):
        CellIDEncoder('sensorID,xMin:12')
    with pytest.raises(ValueError):
        CellIDEncoder('a:40,b:40')
