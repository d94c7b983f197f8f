
"""
Summaries of numpy arrays and calibration matrices for log messages
===================================================================
Usage::
  from autoped.detector.NDArrUtils import info_ndarr, info_matrix_set
  logger.info(info_ndarr(nda, 'pedestal', first=0, last=5))
  logger.info(info_matrix_set(mset, 'pedestal'))
"""
import numpy as np


def str_formatted(nda, first=0, last=5, vfmt=None, spa=' '):
    vals = nda.ravel()[first:last]
    suffix = ' ...]' if nda.size>last else ']'
    if vfmt is None:
        return '%s%s' % (str(vals).rstrip(']'), suffix)
    return '[%s%s' % (spa.join([vfmt % v for v in vals]), suffix)


def info_ndarr(nda, name='', first=0, last=5, vfmt=None, spa=' ', sfmt=None):
    """ optional: sfmt=' mean:%.3f min:%.3f max:%.3f'
    """
    _name = '%s '%name if name!='' else name
    if nda is None: return '%sNone' % _name
    if isinstance(nda, (tuple, list)): nda = np.array(nda)
    if not isinstance(nda, np.ndarray): return '%s%s' % (_name, type(nda))
    sstat = '' if sfmt is None or nda.size==0 else sfmt % (np.mean(nda), nda.min(), nda.max())
    a = '' if last == 0 else ' '+str_formatted(nda, first=first, last=last, vfmt=vfmt, spa=spa)
    return '%sshape:%s size:%d%s dtype:%s%s' % (_name, str(nda.shape), nda.size, sstat, nda.dtype, a)


def info_matrix_set(mset, name='', last=3):
    s = '%s %s %s' % (name if name else mset.name, mset.coll_type, str(mset.parameters))
    for m in mset:
        s += '\n    sensorID:%02d x:[%d,%d] y:[%d,%d] cellid:0x%x %s'%\
             (m.sensor_id, m.min_x, m.max_x, m.min_y, m.max_y, m.cellid, info_ndarr(m.values, last=last))
    return s

# EOF
