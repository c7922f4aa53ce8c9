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
pcccaddr.main -- Decode PCCC 0xAB command data supplied in hex on the command line (or standard input)

"""
__all__				= [ 'parse_payload', 'main' ]

import argparse
import itertools
import json
import logging
import re
import sys

from . import misc, defaults, present
from .decode import decode

log				= logging.getLogger( "pccc.main" )


def parse_payload( text ):
    """Parse a hex payload, eg. '0a0089070a80008000ff', '0a 00 89 ...', '0x0a,0x00,...' or
    '0a:00:89:...'.  Each whitespace/comma/colon separated term is either a single byte, or a run of
    hex digit pairs.  Raises ValueError on invalid hex, or if no bytes are supplied.

    """
    result			= bytearray()
    for term in re.split( r'[\s,:]+', text.strip() ):
        if term[:2] in ( '0x', '0X' ):
            term		= term[2:]
        if not term:
            continue
        if len( term ) <= 2:
            result.append( int( term, 16 ))
        else:
            result.extend( bytes.fromhex( term ))
    if not result:
        raise ValueError( "No PCCC payload bytes in %r" % ( text ))
    return bytes( result )


def main( argv=None ):
    """Decode the specified PCCC 0xAB payload(s), printing a field tree (by default), an info line
    annotation, or the fields as JSON.  Pass the desired argv (excluding the program name in
    sys.arg[0]; typically pass argv=None, which is equivalent to argv=sys.argv[1:], the default for
    argparse.  Returns a non-zero exit status if any payload could not be decoded.

    """
    ap				= argparse.ArgumentParser(
        description = "Decode PCCC Protected Typed Logical Write with Mask (0xAB) command data",
        formatter_class = argparse.RawDescriptionHelpFormatter,
        epilog = """\

Each payload is the PCCC command-specific data following the 0xAB function
code, in hex, eg:

    pccc_decode 0a0089070a80008000ff
    pccc_decode '09 00 85 03 00 00 00 10 00'

decodes to 'N:7.10/7 = 1 (SET)' and 'B:3.0/4 = 0 (CLEAR)'.  Specify '-' to read
payloads from standard input, one per line.  Additional file type mnemonics
and defaults may be supplied in a [File Types] and a [pccc_decode] section of
a configuration file (default: %s). """ % ( defaults.config_name ))

    ap.add_argument( '-v', '--verbose',
                     default=0, action="count",
                     help="Display logging information." )
    ap.add_argument( '-l', '--log',
                     help="Log file, if desired" )
    ap.add_argument( '-c', '--config', action='append',
                     help="Add another (higher priority) config file path." )
    ap.add_argument( '-f', '--fnc',
                     default=None,
                     help="PCCC function code of the payloads; 'none' if unknown (default: 0x%02X)" % (
                         defaults.fnc ))
    ap.add_argument( '-t', '--tree', dest='output', action='store_const', const='tree',
                     help="Print a tree of the decoded fields (the default)" )
    ap.add_argument( '-i', '--info', dest='output', action='store_const', const='info',
                     help="Print each payload with its info line annotation" )
    ap.add_argument( '-j', '--json', dest='output', action='store_const', const='json',
                     help="Print the decoded fields as JSON" )
    ap.add_argument( 'payloads', nargs="*",
                     help="PCCC payloads in hex (- to read from stdin), eg: 0a0089070a80008000ff" )

    args			= ap.parse_args( argv )

    # Set up logging level (-v...) and --log <file>
    levelmap 			= {
        0: logging.WARNING,
        1: logging.NORMAL,
        2: logging.DETAIL,
        3: logging.INFO,
        4: logging.DEBUG,
        }
    cfg				= dict( misc.log_cfg )
    cfg['level']		= ( levelmap[args.verbose]
                                    if args.verbose in levelmap
                                    else logging.DEBUG )
    if args.log:
        cfg['filename']		= args.log

    logging.basicConfig( **cfg )

    if not args.payloads:
        ap.error( "No PCCC payloads supplied" )

    config			= defaults.config_loader()
    loaded			= config.read( defaults.config_files + ( args.config or [] ))
    logging.normal( "Loaded config files: %r", loaded )
    file_types			= defaults.file_types( config )
    fnc,output			= defaults.command_defaults( config )

    if args.fnc is not None:
        try:
            fnc			= None if args.fnc.strip().lower() == 'none' else int( args.fnc, 0 )
            if fnc is not None and not 0 <= fnc <= 0xFF:
                raise ValueError( "out of range" )
        except ValueError as exc:
            ap.error( "Invalid --fnc %r: %s" % ( args.fnc, exc ))
    if args.output:
        output			= args.output

    if '-' in args.payloads:
        # Collect payloads from sys.stdin 'til EOF, at position of '-' in argument list
        minus			= args.payloads.index( '-' )
        payloads		= itertools.chain( args.payloads[:minus], sys.stdin, args.payloads[minus+1:] )
    else:
        payloads		= args.payloads

    failures			= 0
    for text in payloads:
        text			= text.strip()
        if not text or text.startswith( '#' ):
            continue
        try:
            payload		= parse_payload( text )
        except ValueError as exc:
            log.warning( "Invalid PCCC payload %r: %s", text, exc )
            failures	       += 1
            continue
        decoded			= decode( payload, fnc=fnc, file_types=file_types )
        if decoded is None:
            log.warning( "PCCC payload %r: %d bytes is too short for an address", text, len( payload ))
            failures	       += 1
            continue
        if output == 'info':
            print( text + present.info( decoded ))
        elif output == 'json':
            print( json.dumps( dict( present.fields( decoded ).items() ), sort_keys=True ))
        else:
            print( present.format( decoded ))

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit( main() )
