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
pcccaddr.present -- Present a DecodedOperation as named fields, an indented tree, or an info annotation

The decoder knows nothing of field names; this is where the "pccc_addr.*" field abbreviations,
labels and display bases live, for use by any packet inspection front end.

"""
__all__				= [ 'PROTOCOL', 'field', 'FIELDS', 'render', 'fields', 'tree', 'info', 'format' ]

import collections

from .dotdict import dotdict
from .decode import bit_position, SingleByteFlag, MaskAndData

PROTOCOL			= "PCCC Address Decoder"

field				= collections.namedtuple(
    'field', [
        'label',	# eg. "File Type"
        'base',		# 'hex', 'dec', 'str' or 'bool'
        'bits',		# eg. 8, 16 (for hex display); None if not numeric
    ] )

FIELDS				= collections.OrderedDict([
    ( 'pccc_addr.is_write',	field( "Is PCCC Write (0xAB)",	'bool',	None )),
    ( 'pccc_addr.file_type',	field( "File Type",		'hex',	8 )),
    ( 'pccc_addr.file_type_str',field( "File Type String",	'str',	None )),
    ( 'pccc_addr.file_num',	field( "File Number",		'dec',	8 )),
    ( 'pccc_addr.element',	field( "Element (Word)",	'dec',	8 )),
    ( 'pccc_addr.subelement',	field( "Subelement",		'hex',	8 )),
    ( 'pccc_addr.bit',		field( "Bit Number",		'dec',	8 )),
    ( 'pccc_addr.address',	field( "Decoded Address",	'str',	None )),
    ( 'pccc_addr.mask',		field( "Bit Selection Mask",	'hex',	16 )),
    ( 'pccc_addr.data',		field( "Data Value",		'hex',	16 )),
    ( 'pccc_addr.bit_value',	field( "Bit Value Written",	'dec',	8 )),
    ( 'pccc_addr.operation',	field( "Operation Summary",	'str',	None )),
])

# Fields computed by the decoder, rather than found in the payload
GENERATED			= ( 'pccc_addr.is_write', 'pccc_addr.address',
                                    'pccc_addr.bit_value', 'pccc_addr.operation' )


def render( abbrev, value ):
    """Render a field's value according to its display base."""
    fld				= FIELDS[abbrev]
    if fld.base == 'hex':
        return "0x%0*X" % ( fld.bits // 4, value )
    if fld.base == 'dec':
        return "%d" % value
    if fld.base == 'bool':
        return "True" if value else "False"
    return str( value )


def fields( decoded ):
    """Return a dotdict of the decoded fields that are present, keyed by field abbreviation; empty
    if nothing was decoded.  The is_write tag is only included if True."""
    result			= dotdict()
    if decoded is None:
        return result
    if decoded.is_write:
        result['pccc_addr.is_write'] = True
    address			= decoded.address
    result['pccc_addr.file_type']	= address.file_type
    result['pccc_addr.file_type_str']	= decoded.file_type_name
    result['pccc_addr.file_num']	= address.file_num
    result['pccc_addr.element']		= address.element
    result['pccc_addr.subelement']	= address.subelement
    if decoded.bit_position is not None:
        result['pccc_addr.bit']		= decoded.bit_position
    result['pccc_addr.address']		= decoded.canonical_address
    if decoded.mask is not None:
        result['pccc_addr.mask']	= decoded.mask
    if decoded.data is not None:
        result['pccc_addr.data']	= decoded.data
    if decoded.bit_value is not None:
        result['pccc_addr.bit_value']	= decoded.bit_value
        result['pccc_addr.operation']	= decoded.operation_summary
    return result


def tree( decoded, indent=4 ):
    """Return the lines of an indented tree of the decoded fields, in the order a packet inspector
    would add them.  Generated fields are [bracketed]; the source of each bit number and the data
    layout are annotated.

    """
    if decoded is None:
        return []
    present			= fields( decoded )
    prefix			= ' ' * indent
    lines			= [ PROTOCOL ]

    def add( abbrev, value=None, note=None ):
        text			= "%s: %s" % ( FIELDS[abbrev].label, render(
            abbrev, present[abbrev] if value is None else value ))
        if note:
            text	       += " (%s)" % note
        if abbrev in GENERATED:
            text		= "[%s]" % text
        lines.append( prefix + text )

    for abbrev in ( 'pccc_addr.is_write', 'pccc_addr.file_type', 'pccc_addr.file_type_str',
                    'pccc_addr.file_num', 'pccc_addr.element', 'pccc_addr.subelement' ):
        if abbrev in present:
            add( abbrev )

    # The subelement's bit hint, and then the address as finally decoded
    hint			= bit_position( decoded.address.subelement )
    if hint is not None:
        add( 'pccc_addr.bit', hint, "from subelement" )
    add( 'pccc_addr.address' )

    layout			= decoded.layout
    if 'pccc_addr.mask' in present:
        add( 'pccc_addr.mask' )
        mask_bit		= bit_position( layout.mask )
        if mask_bit is not None:
            add( 'pccc_addr.bit', mask_bit, "from mask" )
    if 'pccc_addr.data' in present:
        if isinstance( layout, SingleByteFlag ):
            add( 'pccc_addr.data', note="single byte format" )
        elif isinstance( layout, MaskAndData ) and layout.partial:
            add( 'pccc_addr.data', note="partial" )
        else:
            add( 'pccc_addr.data' )

    for abbrev in ( 'pccc_addr.bit_value', 'pccc_addr.operation' ):
        if abbrev in present:
            add( abbrev )
    return lines


def info( decoded ):
    """The annotation appended to a packet's info line, eg. " [N:7.10/7=1]" or " [N:7.10]"."""
    if decoded is None:
        return ""
    if decoded.bit_value is not None:
        return " [%s=%d]" % ( decoded.canonical_address, decoded.bit_value )
    return " [%s]" % decoded.canonical_address


def format( decoded, indent=4 ):
    return '\n'.join( tree( decoded, indent=indent ))
