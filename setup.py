import os
import sys
from setuptools import setup, find_packages

print('Begin: %s' % ' '.join(sys.argv))

# allows a version number to be passed to the setup
VERSION = '0.1.0'
version_env = os.environ.get('VERSION')
if version_env:
    VERSION = version_env

print('-- autoped.setup.py version: %s' % VERSION)

PACKAGES = find_packages(include=['autoped', 'autoped.*'])
INSTALL_REQS = [
    'numpy',
]
EXTRAS_REQS = {
    'test': ['pytest'],
}
ENTRY_POINTS = {
    'console_scripts': [
        'auto_pedestal_noise = autoped.app.auto_pedestal_noise:do_main',
    ]
}

setup(
    name = 'autoped',
    version = VERSION,
    description = 'Seeds per-sensor pedestal, noise and pixel status matrices with constant values',
    python_requires = '>=3.8',
    install_requires = INSTALL_REQS,
    extras_require = EXTRAS_REQS,
    packages = PACKAGES,
    include_package_data = True,
    entry_points = ENTRY_POINTS,
)
