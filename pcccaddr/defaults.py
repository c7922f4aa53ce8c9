#
# Pcccaddr -- PCCC Address Decoder
#
# Copyright (c) 2026, Hard Consulting Corporation.
#
# Pcccaddr is free software: you can redistribute it and/or modify it under the
# terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or (at your option) any later
# version.  See the LICENSE file at the top of the source tree.
#
# Pcccaddr is distributed in the hope that it will be useful, but WITHOUT ANY
# WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR
# A PARTICULAR PURPOSE.  See the GNU General Public License for more details.
#

__author__                      = "Perry Kundert"
__email__                       = "perry@hardconsulting.com"
__copyright__                   = "Copyright (c) 2026 Hard Consulting Corporation"
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"


"""
pcccaddr.defaults -- System-wide default (global) values, and configuration file loading

A configuration file may extend the built-in file type mnemonics, and supply defaults for the
pccc_decode command:

    [File Types]
    0x8E		= A:	# ASCII
    0x86		= T:	# Timer

    [pccc_decode]
    fnc			= 0xAB
    output		= info

"""
__all__				= [ 'fnc', 'output', 'outputs',
                                    'config_name', 'config_paths', 'config_files', 'config_loader',
                                    'file_types', 'command_defaults' ]

import configparser
import logging
import os

from .decode import FILE_TYPES, PCCC_WRITE_MASK

log				= logging.getLogger( "pccc.dflt" )

fnc				= PCCC_WRITE_MASK	# PCCC function code assumed for command-line payloads
outputs				= ( 'tree', 'info', 'json' )
output				= 'tree'

# Define the default paths used for configuration files, etc.
config_name			= 'pcccaddr.cfg'	# Default Pcccaddr application configuration file

def config_paths( filename, extra=None ):
    """Yield the Pcccaddr configuration search paths in *reverse* order of precedence (furthest or most
    general, to nearest or most specific).

    This is the order that is required by configparser; settings configured in "later" files
    override those in "earlier" ones.

    """
    yield os.path.join( os.path.dirname( __file__ ), filename )			# pcccaddr installation dir
    yield os.path.join( os.getenv( 'APPDATA', os.sep + 'etc' ), filename )	# global app data dir, eg. /etc/
    yield os.path.join( os.path.expanduser( '~' ), '.pcccaddr', filename )	# user dir, ~username/.pcccaddr/name
    yield os.path.join( os.path.expanduser( '~' ), '.' + filename )		# user dir, ~username/.name
    for e in extra or []:							# any extra dirs...
        yield os.path.join( e, filename )
    yield filename								# current dir (most specific)

# Default Pcccaddr configuration files path, In 'configparser' expected order (most general to most specific)
config_files			= list( config_paths( config_name ))


def config_loader():
    """A fresh ConfigParser; option names in [File Types] are numeric codes, so case is moot."""
    return configparser.ConfigParser(
        comment_prefixes=('#',), inline_comment_prefixes=('#',),
        allow_no_value=True, empty_lines_in_values=False,
        interpolation=configparser.ExtendedInterpolation() )


def file_types( config=None, section='File Types' ):
    """Return a new file type code ==> mnemonic table: the built-in FILE_TYPES, updated from any
    [File Types] section of the supplied ConfigParser.  Entries w/ an invalid code, an empty
    mnemonic or a bad ${...} interpolation are logged and ignored.

    """
    table			= dict( FILE_TYPES )
    if config is None or not config.has_section( section ):
        return table
    for code in config.options( section ):
        name			= None
        try:
            name		= config.get( section, code )
            value		= int( code, 0 )
            if not 0 <= value <= 0xFF:
                raise ValueError( "out of range" )
            if not name:
                raise ValueError( "no mnemonic" )
        except ( configparser.Error, ValueError ) as exc:
            log.warning( "Ignoring [%s] %s = %r: %s", section, code,
                         config.get( section, code, raw=True ) if name is None else name, exc )
            continue
        log.detail( "File type 0x%02X: %r (was %r)", value, name, table.get( value ))
        table[value]		= name
    return table


def command_defaults( config=None, section='pccc_decode' ):
    """Return the (fnc, output) defaults for the pccc_decode command, from any [pccc_decode]
    section of the supplied ConfigParser.  A 'fnc' of 'none' supplies no function code.  Invalid
    settings are logged, and the built-in defaults retained.

    """
    result_fnc,result_out	= fnc,output
    if config is None or not config.has_section( section ):
        return result_fnc,result_out
    try:
        value			= config.get( section, 'fnc', fallback=None )
        if value is not None:
            if value.strip().lower() == 'none':
                result_fnc	= None
            else:
                result_fnc	= int( value, 0 )
                if not 0 <= result_fnc <= 0xFF:
                    raise ValueError( "out of range" )
    except ( configparser.Error, ValueError ) as exc:
        log.warning( "Ignoring [%s] fnc = %r: %s", section,
                     config.get( section, 'fnc', raw=True ), exc )
        result_fnc		= fnc
    try:
        value			= config.get( section, 'output', fallback=None )
        if value is not None and value not in outputs:
            raise ValueError( "not one of %s" % ( ", ".join( outputs )))
        if value is not None:
            result_out		= value
    except ( configparser.Error, ValueError ) as exc:
        log.warning( "Ignoring [%s] output = %r: %s", section,
                     config.get( section, 'output', raw=True ), exc )
    return result_fnc,result_out
