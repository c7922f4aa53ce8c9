from setuptools import setup

import os

HERE				= os.path.dirname( os.path.abspath( __file__ ))

__version__			= None
__version_info__		= None
exec( open( os.path.join( HERE, 'pcccaddr', 'version.py' ), 'r' ).read() )

console_scripts			= [
    'pccc_decode	= pcccaddr.main:main',
]

entry_points			= {
    'console_scripts': 		console_scripts,
}


def requirements( name ):
    """Remove whitespace, elide blank lines and comments"""
    return list(
        ''.join( r.split() )
        for r in open( os.path.join( HERE, name )).readlines()
        if r.strip() and not r.strip().startswith( '#' )
    )

install_requires		= requirements( "requirements.txt" )
tests_require			= requirements( "requirements-tests.txt" )

# Since setuptools is retiring tests_require, add it as an option
extras_require			= {
    'tests':			tests_require,
}

long_description		= """\
Pcccaddr decodes the addressing portion of Allen-Bradley PCCC (DF1) "Protected
Typed Logical Write with Mask" (function 0xAB) requests, as issued to SLC-500
and MicroLogix controllers.

From the raw command payload bytes it recovers the data table file type,
file number, element and subelement, then the bit selection mask and data,
and reports the canonical address (eg. N:7.10/7) and whether the addressed bit
was SET or CLEARed.  The pccc_decode command-line tool prints the decode as a
field tree, a one-line summary, or JSON.
"""

classifiers			= [
    "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
    "License :: Other/Proprietary License",
    "Programming Language :: Python :: 3",
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Topic :: Scientific/Engineering :: Interface Engine/Protocol Translator",
    "Topic :: Text Processing :: Filters"
]

setup(
    name			= "pcccaddr",
    version			= __version__,
    install_requires		= install_requires,
    tests_require		= tests_require,
    extras_require		= extras_require,
    packages			= [ "pcccaddr" ],
    python_requires		= ">=3.8",
    zip_safe			= False,
    entry_points		= entry_points,
    author			= "Perry Kundert",
    author_email		= "perry@hardconsulting.com",
    description			= "Pcccaddr decodes Allen-Bradley PCCC masked-write addresses",
    long_description		= long_description,
    license			= "Dual License; GPLv3 and Proprietary",
    keywords			= "pccc df1 protocol parser SLC MicroLogix EtherNet/IP",
    classifiers			= classifiers,
)
