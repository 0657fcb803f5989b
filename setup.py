# SPDX-FileCopyrightText: 2022 WebSafe64 Developers
# SPDX-License-Identifier: Apache-2.0

"""Setup and installation script for websafe64."""


# standard libs
import re
from setuptools import setup, find_packages


# get long description from README.rst
with open('README.rst', mode='r') as readme:
    long_description = readme.read()


# get package metadata by parsing package __init__ module
with open('src/websafe64/__init__.py', mode='r') as source:
    content = source.read().strip()
    metadata = {key: re.search(key + r'\s*=\s*[\'"]([^\'"]*)[\'"]', content).group(1)
                for key in ['__version__', '__developer__', '__description__',
                            '__license__', '__keywords__']}


setup(
    name                 = 'websafe64',
    version              = metadata['__version__'],
    author               = metadata['__developer__'],
    description          = metadata['__description__'],
    license              = metadata['__license__'],
    keywords             = metadata['__keywords__'],
    packages             = find_packages('src'),
    package_dir          = {'': 'src'},
    long_description     = long_description,
    long_description_content_type = 'text/x-rst',
    classifiers          = ['Development Status :: 4 - Beta',
                            'Topic :: Internet :: WWW/HTTP',
                            'Topic :: Software Development :: Libraries',
                            'Programming Language :: Python :: 3',
                            'Programming Language :: Python :: 3.8',
                            'Programming Language :: Python :: 3.9',
                            'Programming Language :: Python :: 3.10',
                            'Operating System :: OS Independent', ],
    python_requires      = '>=3.8',
    entry_points         = {'console_scripts': ['websafe64=websafe64.apps.websafe64:main']},
    install_requires     = ['cmdkit>=2.6.1', 'toml>=0.10.2', 'rich>=9.4.0', ],
    extras_require       = {'test': ['pytest>=6.2.0', 'hypothesis>=6.0.0', ]},
)
