#!/usr/bin/env python
"""Setuptools distribution file."""
import os
from setuptools import setup


def _get_here(fname):
    return os.path.join(os.path.dirname(__file__), fname)


def _get_long_description(fname, encoding='utf8'):
    return open(fname, 'r', encoding=encoding).read()


setup(name='mazemaster',
      version='0.1.0',
      license='ISC',
      description="Multi-client ASCII maze game served over a line-oriented TCP protocol",
      long_description=_get_long_description(fname=_get_here('README.rst')),
      packages=['mazemaster', 'mazemaster.tests'],
      package_data={'mazemaster': ['maze.txt'], },
      python_requires='>=3.9',
      extras_require={
          'test': ['pytest', 'pytest-asyncio'],
      },
      entry_points={
         'console_scripts': [
             'mazemaster-server = mazemaster.server:main',
         ]},
      platforms='any',
      zip_safe=False,
      keywords=', '.join(('maze', 'game', 'server', 'tcp',
                          'ascii', 'asyncio')),
      classifiers=['License :: OSI Approved :: ISC License (ISCL)',
                   'Programming Language :: Python :: 3',
                   'Intended Audience :: Developers',
                   'Development Status :: 4 - Beta',
                   'Topic :: Games/Entertainment',
                   'Topic :: System :: Networking',
                   'Topic :: Internet',
                   ],
      )
