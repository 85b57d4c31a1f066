#! /usr/bin/env python

from nsqlookup import __version__

from setuptools import setup


setup(name               = 'nsqlookup-py',
    version              = __version__,
    description          = 'An HTTP client for nsqlookupd, NSQ\'s discovery daemon',
    url                  = 'http://github.com/dlecocq/nsq-py',
    author               = 'Dan Lecocq',
    author_email         = 'dan@moz.com',
    license              = "MIT License",
    keywords             = 'nsq, nsqlookupd, queue, discovery',
    packages             = ['nsqlookup', 'nsqlookup.http'],
    package_dir          = {'nsqlookup': 'nsqlookup', 'nsqlookup.http': 'nsqlookup/http'},
    python_requires      = '>=3.8',
    classifiers          = [
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Intended Audience :: Developers',
        'Operating System :: OS Independent'
    ],
    install_requires=[
        'requests',
        'decorator>=5',
        'simplejson'
    ],
    extras_require={
        'test': [
            'pytest',
            'mock',
            'coverage'
        ]
    }
)
