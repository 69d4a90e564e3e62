"""
Build script for the strtools package.
"""

# std
import os

# third-party
from setuptools import Command, find_packages, setup


# ---------------------------------------------------------------------------- #

class CleanCommand(Command):
    """Custom clean command to tidy up the project root."""

    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        os.system('rm -vrf ./build ./dist ./src/*.egg-info ./.pytest_cache')


# Main
# ---------------------------------------------------------------------------- #

setup(
    name='strtools',
    version='0.1.0',
    description='Portable string manipulation primitives and a printf-style '
                'formatted string builder.',
    python_requires='>=3.8',
    package_dir={'': 'src'},
    packages=find_packages('src', exclude=['tests', 'tests.*']),
    package_data={'strtools': ['config.yaml']},
    include_package_data=True,
    install_requires=[
        'loguru',
        'more-itertools',
        'platformdirs',
        'pyyaml',
    ],
    extras_require={
        'test': ['pytest'],
    },
    cmdclass={'clean': CleanCommand}
)
