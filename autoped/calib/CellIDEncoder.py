"""
:py:class:`CellIDEncoder` - packs named integer fields into a cell id
=====================================================================

Usage ::

    from autoped.calib.CellIDEncoder import CellIDEncoder
    import autoped.calib.CalibConstants as cc

    enc = CellIDEncoder(cc.MATRIXDEFAULTENCODING)
    cellid = enc.encode(sensorID=1, xMin=0, xMax=263, yMin=0, yMax=255)
    d = enc.decode(cellid) # {'sensorID':1, 'xMin':0, ...}
    lo, hi = enc.cellid0(cellid), enc.cellid1(cellid)

Encoding string is a comma-separated list of name:width fields,
the first field occupies the least significant bits.
Negative width stands for a signed (two's complement) field.

This software was developed for the autoped project.
If you use all or part of it, please give an appropriate acknowledgment.

@date 2026-10-17
"""

import logging
logger = logging.getLogger(__name__)

M32 = 0xffffffff # (1<<32)-1 - 32-bit mask


class BitField:
    """Single field of the cell id: name, offset, width and signedness."""

    def __init__(self, name, offset, width):
        self.name = name
        self.offset = offset
        self.signed = width < 0
        self.width = abs(width)
        self.mask = ((1<<self.width)-1) << offset
        self.vmin = -(1<<(self.width-1)) if self.signed else 0
        self.vmax = (1<<(self.width-1))-1 if self.signed else (1<<self.width)-1

    def __repr__(self):
        return 'BitField(%s, offset=%d, width=%s%d)' % (self.name, self.offset, '-' if self.signed else '', self.width)

    def pack(self, value):
        value = int(value)
        if value < self.vmin or value > self.vmax:
            raise ValueError('value %d of field "%s" is out of range [%d, %d]' % (value, self.name, self.vmin, self.vmax))
        return ((value + (1<<self.width)) if value < 0 else value) << self.offset

    def unpack(self, cellid):
        value = (cellid & self.mask) >> self.offset
        if self.signed and value > self.vmax:
            value -= 1<<self.width
        return value


def parse_encoding(encoding):
    """Returns list of BitField for encoding string like 'sensorID:5,xMin:12'"""
    fields = []
    offset = 0
    for rec in encoding.split(','):
        name, _, swidth = rec.strip().partition(':')
        if not name or not swidth:
            raise ValueError('wrong field "%s" in encoding "%s"' % (rec, encoding))
        width = int(swidth)
        if width == 0:
            raise ValueError('zero width field "%s" in encoding "%s"' % (name, encoding))
        f = BitField(name, offset, width)
        fields.append(f)
        offset += f.width
    if offset > 64:
        raise ValueError('encoding "%s" needs %d bits, more than 64' % (encoding, offset))
    return fields


class CellIDEncoder:

    def __init__(self, encoding):
        self.encoding = encoding
        self.fields = parse_encoding(encoding)
        self.names = [f.name for f in self.fields]
        logger.debug('CellIDEncoder fields: %s' % str(self.fields))

    def encode(self, **kwa):
        unknown = set(kwa) - set(self.names)
        if unknown:
            raise KeyError('fields %s are not in encoding "%s"' % (sorted(unknown), self.encoding))
        cellid = 0
        for f in self.fields:
            if f.name not in kwa:
                raise KeyError('field "%s" of encoding "%s" is missing' % (f.name, self.encoding))
            cellid |= f.pack(kwa[f.name])
        return cellid

    def decode(self, cellid):
        return {f.name: f.unpack(cellid) for f in self.fields}

    def cellid0(self, cellid):
        return cellid & M32

    def cellid1(self, cellid):
        return (cellid >> 32) & M32

# EOF
