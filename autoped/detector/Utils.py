"""
Utilities of common use for detector project
============================================

Usage::

  import autoped.detector.Utils as ut

  is_selected = ut.selected_record(nrec)
  s = ut.info_dict(d, fmt='  %12s: %s', sep='\n')
  s = ut.info_command_line(sep=' ')
  s = ut.info_parser_arguments(parser, args)
"""

import sys


def selected_record(nrec, period=10):
    return not nrec%period


def info_dict(d, fmt='  %12s: %s', sep='\n', sepnext=13*' '):
    return (sep if sep[0]!=',' else '')\
         + sep.join([fmt % (k, info_dict(v, fmt=fmt, sep=sep+sepnext)\
               if isinstance(v,dict) else str(v)) for k,v in d.items()])


def info_command_line(sep=' '):
    return sep.join(sys.argv)


def info_parser_arguments(parser, args):
    """Returns str with parsed arguments and their defaults
       from argparse import ArgumentParser
       parser = ArgumentParser(...)
    """
    kwas = vars(args)
    defs = {a.dest: a.default for a in parser._actions}
    s = 'Command: %s\n  Optional parameters:\n' % info_command_line()+\
        '    <key>      <value>              <default>\n'
    for k,v in kwas.items():
        s += '    %s %s %s\n' % (k.ljust(10), str(v).ljust(20), str(defs.get(k, None)).ljust(20))
    return s

# EOF
