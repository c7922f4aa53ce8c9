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
pcccaddr.decode -- Decode PCCC 0xAB "Protected Typed Logical Write with Mask" command data

The command-specific data of a 0xAB request (following the CMD/STS/TNS/FNC header) addresses a
single data-table word, and carries a mask selecting the bits to modify and the data supplying
their new values:

        new = ( old & ~mask ) | ( data & mask )

Two layouts have been observed from real PLCs:

        +---+---+---+---+---+---+---+---+---+---+
        | BYTES |TYP|FIL|ELE|SUB|  MASK | DATA  |	10 bytes: 16-bit big-endian MASK and DATA
        +---+---+---+---+---+---+---+---+---+---+

        +---+---+---+---+---+---+---+---+---+
        | BYTES |TYP|FIL|ELE|=00|  MASK |FLG|		 9 bytes, SUB == 0: FLG !0 sets, 0 clears
        +---+---+---+---+---+---+---+---+---+

A 9-byte payload with a non-zero SUB is taken to carry only the low byte of DATA.  The BYTES count
is little-endian, and is not used.  The SUB(-element) is either a single-bit selector (a power of
two), or 0x00 indicating that the bit is selected by the MASK; the MASK is authoritative when it
selects exactly one bit.

Nothing here raises for any byte content; partial decodes are expressed by absent (None) fields.

"""
__all__				= [ 'PCCC_WRITE_MASK', 'FILE_TYPES', 'file_type_name', 'octets',
                                    'bit_position', 'is_bit_set',
                                    'AddressFields', 'Absent', 'ABSENT', 'SingleByteFlag', 'MaskAndData',
                                    'DecodedOperation',
                                    'parse_address', 'select_layout', 'synthesize', 'decode' ]

import collections
import logging
import struct

from . import misc

log				= logging.getLogger( "pccc.addr" )

PCCC_WRITE_MASK			= 0xAB		# Protected Typed Logical Write with Mask

# PCCC file type codes to address mnemonics.  The logical-by-slot Output/Input types alias the
# numeric ones.
FILE_TYPES			= {
    0x82:	"O:",	# Output
    0x83:	"I:",	# Input
    0x84:	"S:",	# Status
    0x85:	"B:",	# Binary
    0x89:	"N:",	# Integer
    0x8A:	"F:",	# Float
    0x8B:	"O:",	# Output logical by slot
    0x8C:	"I:",	# Input logical by slot
}


def file_type_name( file_type, file_types=None ):
    """Return the mnemonic for the file type code, or 'Unknown(0xHH)'."""
    name			= ( FILE_TYPES if file_types is None else file_types ).get( file_type )
    if name is None:
        name			= "Unknown(0x%02X)" % file_type
    return name


def octets( payload ):
    """Copy a bytes-like payload (or an iterable of 0-255 ints) out into a bytes.  We never retain a
    reference to the caller's buffer."""
    if isinstance( payload, (bytes, bytearray) ):
        return bytes( payload )
    if isinstance( payload, memoryview ):
        return payload.tobytes()
    if isinstance( payload, (str, int, float) ) or payload is None:
        raise TypeError( "PCCC payload must be bytes-like, not %s" % type( payload ).__name__ )
    try:
        return bytes( bytearray( payload ))
    except ( TypeError, ValueError ) as exc:
        raise TypeError( "PCCC payload must be bytes-like: %s" % ( exc ))


def bit_position( mask ):
    """Return the index (0-15) of the single bit set in the 16-bit mask, or None if zero or several
    bits are set."""
    if not mask or mask & ( mask - 1 ):
        return None
    for bit in range( 16 ):
        if mask & ( 1 << bit ):
            return bit
    return None


def is_bit_set( value, bit ):
    return value & ( 1 << bit ) != 0


class AddressFields( collections.namedtuple(
        'AddressFields', [
            'byte_count',	# little-endian bytes 0-1; not used
            'file_type',	# eg. 0x89 ==> 'N:'
            'file_num',
            'element',		# zero-based word offset
            'subelement',	# single-bit selector, or 0x00 ==> bit selected by mask
        ] )):
    __slots__			= ()


class Absent( collections.namedtuple( 'Absent', [] )):
    """No mask/data trailer (fewer than 9 bytes)."""
    __slots__			= ()
    kind			= 'absent'
    mask			= None
    data			= None

ABSENT				= Absent()


class SingleByteFlag( collections.namedtuple( 'SingleByteFlag', [ 'mask', 'flag' ] )):
    """Subelement 0x00, 9 bytes: a 16-bit mask, and a flag byte (!0 sets, 0 clears)."""
    __slots__			= ()
    kind			= 'single byte flag'

    @property
    def data( self ):
        return self.flag


class MaskAndData( collections.namedtuple( 'MaskAndData', [ 'mask', 'data', 'partial' ] )):
    """A 16-bit mask and data; partial iff only the data's low byte was available."""
    __slots__			= ()
    kind			= 'mask and data'


class DecodedOperation( collections.namedtuple(
        'DecodedOperation', [
            'address',		# AddressFields
            'file_type_name',	# eg. 'N:', or 'Unknown(0x99)'
            'bit_position',	# from mask if resolved, else from subelement; or None
            'bit_value',	# 1/0 iff mask selected exactly one bit; else None
            'canonical_address',# eg. 'N:7.10/7', or word-level 'N:7.10'
            'operation_summary',# eg. 'Write N:7.10/7 = 1 (SET)' iff bit_value; else None
            'layout',		# Absent, SingleByteFlag or MaskAndData
            'is_write',		# True/False iff a PCCC function code was supplied; else None
        ] )):
    __slots__			= ()

    @property
    def mask( self ):
        return self.layout.mask

    @property
    def data( self ):
        return self.layout.data

    @property
    def operation( self ):
        if self.bit_value is None:
            return None
        return 'SET' if self.bit_value else 'CLEAR'


def parse_address( payload ):
    """Parse the address fields from the first 6 bytes, or return None if there are too few."""
    data			= octets( payload )
    if len( data ) < 6:
        return None
    return AddressFields( *struct.unpack_from( '<HBBBB', data ))


def select_layout( payload, subelement=None ):
    """Decide which mask/data trailer follows the address.  The order of these tests distinguishes
    the two PLC dialects, and must be preserved.

    """
    data			= octets( payload )
    assert len( data ) >= 6, \
        "Cannot select a PCCC mask/data layout w/o an address: %d bytes" % len( data )
    if subelement is None:
        subelement		= data[5]
    if len( data ) < 9:
        return ABSENT
    mask,			= struct.unpack_from( '>H', data, 6 )
    if subelement == 0 and len( data ) == 9:
        return SingleByteFlag( mask=mask, flag=data[8] )
    if len( data ) >= 10:
        value,			= struct.unpack_from( '>H', data, 8 )
        return MaskAndData( mask=mask, data=value, partial=False )
    return MaskAndData( mask=mask, data=data[8], partial=True )


def synthesize( address, layout, file_types=None, is_write=None ):
    """Produce the DecodedOperation for the address and trailer layout.  The bit hinted by the
    subelement is overridden by a single-bit mask; a bit value is only asserted when the mask
    selects exactly one bit.

    """
    name			= file_type_name( address.file_type, file_types )
    word			= "%s%d.%d" % ( name, address.file_num, address.element )
    bit				= bit_position( address.subelement )
    canonical			= word if bit is None else "%s/%d" % ( word, bit )

    bit_value			= None
    if not isinstance( layout, Absent ):
        mask_bit		= bit_position( layout.mask )
        if mask_bit is not None:
            bit			= mask_bit
            canonical		= "%s/%d" % ( word, bit )
            if isinstance( layout, SingleByteFlag ):
                bit_value	= 1 if layout.flag else 0
            else:
                # ( data & mask ) has only the one meaningful bit
                bit_value	= 1 if is_bit_set( layout.data & layout.mask, mask_bit ) else 0

    summary			= None
    if bit_value is not None:
        summary			= "Write %s = %d (%s)" % (
            canonical, bit_value, 'SET' if bit_value else 'CLEAR' )

    return DecodedOperation(
        address			= address,
        file_type_name		= name,
        bit_position		= bit,
        bit_value		= bit_value,
        canonical_address	= canonical,
        operation_summary	= summary,
        layout			= layout,
        is_write		= is_write,
    )


def decode( payload, fnc=None, file_types=None ):
    """Decode the command data of a PCCC 0xAB request, returning a DecodedOperation, or None if the
    payload is too short to contain an address.  If the PCCC function code is supplied, the result's
    is_write indicates whether it was a 0xAB Protected Typed Logical Write with Mask.

    """
    assert fnc is None or 0 <= fnc <= 0xFF, \
        "Invalid PCCC function code: %r" % ( fnc, )
    data			= octets( payload )
    address			= parse_address( data )
    if address is None:
        log.detail( "PCCC payload of %d bytes is too short for an address", len( data ))
        return None
    layout			= select_layout( data, subelement=address.subelement )
    log.debug( "PCCC payload of %d bytes w/ subelement 0x%02X: %r",
               len( data ), address.subelement, layout )
    result			= synthesize(
        address, layout, file_types=file_types,
        is_write=None if fnc is None else fnc == PCCC_WRITE_MASK )
    log.detail( "%s", misc.lazystr( lambda: \
        result.operation_summary or "Address %s (no bit value)" % result.canonical_address ))
    return result
