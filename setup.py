#!/usr/bin/env python
#encoding: utf8

import io
import os
import re

from setuptools import setup
from setuptools import find_packages

with io.open(os.path.join(os.path.dirname(__file__), 'orderedmap', '__init__.py'), 'r') as v:
    VERSION = re.match(r".*__version__ = '(.*?)'", v.read(), re.S).group(1)

SHORT_DESC="An insertion-ordered map that serializes to order-preserving json" \
" and yaml."

LONG_DESC = """orderedmap keeps keys in the order they were first set in,
updates values in place, and writes itself out as json or yaml text with that
order intact.
"""

try:
    os.stat('CHANGELOG.rst')
    with io.open('CHANGELOG.rst', 'rb') as f:
        LONG_DESC += u"\n\n" + f.read().decode('utf8')
except OSError:
    pass


setup(
    name='orderedmap',
    packages=find_packages(exclude=['orderedmap.test', 'orderedmap.test.*']),

    version=VERSION,
    description=SHORT_DESC,
    long_description=LONG_DESC,
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Operating System :: OS Independent',
        'Natural Language :: English',
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries',
    ],
    keywords='ordered dict map json yaml serialization',
    license='LGPL-2.1',
    zip_safe=False,
    python_requires='>=3.6',
    install_requires=[
      'pytz',
      'PyYAML>=5.1',
      'simplejson',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
        ],
    },
)
