# Copyright European Space Agency, 2013

from setuptools import setup, find_packages
import re

# version handling from https://stackoverflow.com/a/7071358
VERSIONFILE="georef/_version.py"
verstrline = open(VERSIONFILE, "rt").read()
VSRE = r"^__version__ = ['\"]([^'\"]*)['\"]"
mo = re.search(VSRE, verstrline, re.M)
if mo:
    verstr = mo.group(1)
else:
    raise RuntimeError("Unable to find version string in %s." % (VERSIONFILE,))

setup(
    name = 'georef',
    description = 'Pixel, projected and geographic coordinates of georeferenced rasters',
    long_description = open('README.rst').read(),
    version = verstr,
    author = 'Maik Riechert',
    author_email = 'mriecher@cosmos.esa.int, awalsh@sciops.esa.int',
    license = 'ESCL - Type 1',
    classifiers=[
      'Development Status :: 4 - Beta',
      'Intended Audience :: Science/Research',
      'Natural Language :: English',
      'Programming Language :: Python :: 3',
      'Operating System :: OS Independent',
      'Topic :: Scientific/Engineering :: GIS',
      'Topic :: Software Development :: Libraries',
    ],
    packages = find_packages(),
    python_requires = '>=3.8',
    install_requires=['numpy>=1.17',
                      'astropy>=4.0',
                      'geographiclib',
                      'scikit-image', # line rasterization for the bbox diagonals
                      'pyproj>=3.1',
                      ],
    extras_require = {
        'test': ['pytest'],
    },
)
