#!/usr/bin/env python3

# Setup script for formapi

from setuptools import setup
from formapi import __version__

LONG_DESC = """\
formapi renders declaratively described web forms as HTML.  A form is an
ordered list of fields (text inputs, checkbox and radio groups, selects,
hidden values) plus a multilingual message table; the same form can be
rendered in any of its languages, in a vertical or a horizontal table
layout, as a fragment or as a complete page.
"""

kw = {
    'name': "formapi",
    'version': __version__,
    'description': "Declarative, localized HTML forms",
    'long_description': LONG_DESC,
    'author': "The formapi developers",
    'package_dir': {'formapi': 'formapi'},
    'packages': [
        'formapi',
        'formapi.form',
        'formapi.html',
    ],
    'python_requires': '>=3.6',
    'extras_require': {'test': ['pytest']},
    'entry_points': {
        'console_scripts': ['formapi = formapi.__main__:main'],
    },
}

kw['classifiers'] = [
    'Development Status :: 3 - Alpha',
    'Environment :: Web Environment',
    'License :: DFSG approved',
    'Intended Audience :: Developers',
    'Operating System :: OS Independent',
    'Topic :: Internet :: WWW/HTTP :: Dynamic Content',
    'Programming Language :: Python :: 3 :: Only',
]
kw['platforms'] = 'Most'

setup(**kw)
