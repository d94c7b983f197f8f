"""autoped - seeds per-sensor pedestal, noise and pixel status matrices
   with user provided constant values when no calibration run is available.
"""

__version__ = '0.1.0'
