#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright (C) 2007-2009 Christopher Lenz
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

from setuptools import setup

setup(
    name='ctxcouch',
    version='1.3.0',
    description='Context-aware Python client for the CouchDB HTTP API',
    long_description="""
    This is a Python client for CouchDB. It maps typed calls onto the CouchDB
    HTTP API, with per-call cancellation contexts, structured server errors
    and idempotent design document synchronization.""",
    author = 'Christopher Lenz',
    author_email = 'cmlenz@gmx.de',
    maintainer = 'Dirkjan Ochtman',
    maintainer_email = 'dirkjan@ochtman.nl',
    license = 'BSD',
    classifiers = [
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Database :: Front-Ends',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    packages = ['ctxcouch', 'ctxcouch.tests'],
    python_requires='>=3.6',
    install_requires=[
        "furl",
        "requests",
        "requests_toolbelt",
    ],
    extras_require={
        'test': [
            'pytest',
            'urllib3<2',
        ],
    },
    zip_safe=True,
)
