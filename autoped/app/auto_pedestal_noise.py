#!/usr/bin/env python

DESCRIPTION = 'Produces initial pedestal / noise / status matrices with user provided values'

import sys
import logging
import numpy as np
from autoped.detector.UtilsLogging import STR_LEVEL_NAMES, init_logger
import autoped.calib.CalibConstants as cc

logger = logging.getLogger(__name__)
SCRNAME = sys.argv[0].split('/')[-1]

USAGE = '\n%s -k <run-headers.json> [options]' % SCRNAME\
      + '\nTEST 1:  %s -k runs.json -n 3 --pedestal 10,10 --noise 1.5' % SCRNAME\
      + '\nTEST 2:  %s -k runs.json -o matrices.npz -L DEBUG' % SCRNAME\
      + '\n json file contains one dict or list of dicts like'\
      + '\n   {"runNumber": 1, "detectorCount": 2, "minX": [0,0], "maxX": [1,2], "minY": [0,0], "maxY": [1,0]}'\
      + '\n\nHelp:  %s -h\n' % SCRNAME


def argument_parser():
    from argparse import ArgumentParser

    d_runmeta   = None
    d_events    = 10
    d_pedestal  = ','.join(['%g' % v for v in cc.INIT_PEDESTAL_EXAMPLE])
    d_noise     = ','.join(['%g' % v for v in cc.INIT_NOISE_EXAMPLE])
    d_pedname   = cc.dic_calib_type_to_name[cc.PEDESTALS]
    d_noisename = cc.dic_calib_type_to_name[cc.PIXEL_RMS]
    d_statname  = cc.dic_calib_type_to_name[cc.PIXEL_STATUS]
    d_outfile   = None
    d_loglevel  = 'INFO'
    d_logfile   = None

    h_runmeta   = '(str) json file with run header(s), default = %s' % d_runmeta
    h_events    = '(int) number of data events per run, default = %d' % d_events
    h_pedestal  = '(str) comma-separated initial pedestal values, one value for detector, default = %s' % d_pedestal
    h_noise     = '(str) comma-separated initial noise values, one value for detector, default = %s' % d_noise
    h_pedname   = '(str) pedestal collection name, default = %s' % d_pedname
    h_noisename = '(str) noise collection name, default = %s' % d_noisename
    h_statname  = '(str) pixel status collection name, default = %s' % d_statname
    h_outfile   = '(str) npz file to save matrices of the last data event, default = %s' % d_outfile
    h_loglevel  = '(str) logging mode, one of %s, default = %s' % (STR_LEVEL_NAMES, d_loglevel)
    h_logfile   = '(str) log file name, default = %s' % d_logfile

    parser = ArgumentParser(description=DESCRIPTION, usage=USAGE)
    parser.add_argument('-k', '--runmeta',  default=d_runmeta,   type=str, help=h_runmeta, required=True)
    parser.add_argument('-n', '--events',   default=d_events,    type=int, help=h_events)
    parser.add_argument('--pedestal',       default=d_pedestal,  type=str, help=h_pedestal)
    parser.add_argument('--noise',          default=d_noise,     type=str, help=h_noise)
    parser.add_argument('--pedname',        default=d_pedname,   type=str, help=h_pedname)
    parser.add_argument('--noisename',      default=d_noisename, type=str, help=h_noisename)
    parser.add_argument('--statusname',     default=d_statname,  type=str, help=h_statname)
    parser.add_argument('-o', '--outfile',  default=d_outfile,   type=str, help=h_outfile)
    parser.add_argument('-L', '--loglevel', default=d_loglevel,  type=str, help=h_loglevel)
    parser.add_argument('--logfile',        default=d_logfile,   type=str, help=h_logfile)
    return parser


class LastEvent:
    """Callback keeping the last event with published collections."""

    def __init__(self, names):
        self.names = names
        self.evt = None

    def __call__(self, evt):
        if all(name in evt.collection_names() for name in self.names):
            self.evt = evt


def info_published(evt, names):
    from autoped.detector.NDArrUtils import info_matrix_set
    s = 'collections in event %d run %d:' % (evt.event_number, evt.run_number)
    for name in names:
        s += '\n  ' + info_matrix_set(evt.get_collection(name), name)
    return s


def save_collections(evt, names, fname):
    """Saves flat matrices in npz file with keys like <name>_<sensorID>."""
    arrs = {}
    for name in names:
        for m in evt.get_collection(name):
            arrs['%s_%02d' % (name, m.sensor_id)] = m.values
            arrs['%s_%02d_tag' % (name, m.sensor_id)] = np.array([m.sensor_id, m.min_x, m.max_x, m.min_y, m.max_y])
    np.savez(fname, **arrs)
    logger.info('saved %d arrays in file %s' % (len(arrs), fname))


def auto_pedestal_noise(**kwa):
    from autoped.detector.config import ProcessorConfig
    from autoped.detector.runheader import load_run_headers
    from autoped.detector.autopedestal import AutoPedestalNoiseProcessor
    from autoped.detector.eventloop import EventLoop

    pars = {'init_pedestal': kwa.get('pedestal', None),
            'init_noise'   : kwa.get('noise', None),
            'pedestal_name': kwa.get('pedname', None),
            'noise_name'   : kwa.get('noisename', None),
            'status_name'  : kwa.get('statusname', None)}
    cfg = ProcessorConfig(**{k:v for k,v in pars.items() if v is not None})
    names = cfg.channel_names()
    run_headers = load_run_headers(kwa.get('runmeta'))
    last = LastEvent(names)
    loop = EventLoop(AutoPedestalNoiseProcessor(cfg), run_headers, events=kwa.get('events', 10), callback=last)
    loop.event_loop()

    if last.evt is None:
        logger.warning('no data event with published collections')
        return None
    logger.info(info_published(last.evt, names))
    fname = kwa.get('outfile', None)
    if fname is not None:
        save_collections(last.evt, names, fname)
    return last.evt


def do_main(argv=None):
    from autoped.detector.config import ConfigurationError
    from autoped.detector.Utils import info_parser_arguments

    parser = argument_parser()
    args = parser.parse_args(argv)
    init_logger(loglevel=args.loglevel, logfname=args.logfile)
    logger.debug(info_parser_arguments(parser, args))
    try:
        auto_pedestal_noise(**vars(args))
    except ConfigurationError as err:
        logger.error('configuration error: %s' % err)
        sys.exit('EXIT - %s' % err)


if __name__ == "__main__":
    do_main()

# EOF
