import json
import logging

from .dotdict import dotdict
from .decode import decode, PCCC_WRITE_MASK
from . import present

log				= logging.getLogger( "present_test" )


def test_render():
    assert present.render( 'pccc_addr.file_type', 0x89 ) == "0x89"
    assert present.render( 'pccc_addr.subelement', 0 ) == "0x00"
    assert present.render( 'pccc_addr.mask', 0x80 ) == "0x0080"
    assert present.render( 'pccc_addr.element', 10 ) == "10"
    assert present.render( 'pccc_addr.is_write', True ) == "True"
    assert present.render( 'pccc_addr.address', "N:7.10/7" ) == "N:7.10/7"


def test_fields():
    assert present.fields( None ) == dotdict()

    decoded			= decode( b'\x0a\x00\x89\x07\x0a\x80\x00\x80\xff', fnc=PCCC_WRITE_MASK )
    result			= present.fields( decoded )
    assert result.pccc_addr.address == "N:7.10/7"
    assert dict( result.items() ) == {
        'pccc_addr.is_write':		True,
        'pccc_addr.file_type':		0x89,
        'pccc_addr.file_type_str':	"N:",
        'pccc_addr.file_num':		7,
        'pccc_addr.element':		10,
        'pccc_addr.subelement':		0x80,
        'pccc_addr.bit':		7,
        'pccc_addr.address':		"N:7.10/7",
        'pccc_addr.mask':		0x0080,
        'pccc_addr.data':		0x00FF,
        'pccc_addr.bit_value':		1,
        'pccc_addr.operation':		"Write N:7.10/7 = 1 (SET)",
    }
    # Every field produced is described
    assert all( k in present.FIELDS for k in result.keys() )

    # Not a 0xAB write; no is_write tag.  No trailer; no mask, data or operation.
    result			= present.fields( decode( b'\x08\x00\x85\x03\x02\x04\x00\x00', fnc=0xA2 ))
    assert sorted( result.keys() ) == [
        'pccc_addr.address', 'pccc_addr.bit', 'pccc_addr.element', 'pccc_addr.file_num',
        'pccc_addr.file_type', 'pccc_addr.file_type_str', 'pccc_addr.subelement',
    ]
    assert json.loads( json.dumps( dict( result.items() )))['pccc_addr.address'] == "B:3.2/2"


def test_tree():
    assert present.tree( None ) == []

    decoded			= decode( b'\x0a\x00\x89\x07\x0a\x80\x00\x80\xff', fnc=PCCC_WRITE_MASK )
    text			= present.format( decoded )
    log.normal( "Tree:\n%s", text )
    assert text == """\
PCCC Address Decoder
    [Is PCCC Write (0xAB): True]
    File Type: 0x89
    File Type String: N:
    File Number: 7
    Element (Word): 10
    Subelement: 0x80
    Bit Number: 7 (from subelement)
    [Decoded Address: N:7.10/7]
    Bit Selection Mask: 0x0080
    Bit Number: 7 (from mask)
    Data Value: 0x00FF (partial)
    [Bit Value Written: 1]
    [Operation Summary: Write N:7.10/7 = 1 (SET)]"""

    decoded			= decode( b'\x09\x00\x85\x03\x00\x00\x00\x10\x00' )
    assert present.tree( decoded, indent=2 ) == [
        "PCCC Address Decoder",
        "  File Type: 0x85",
        "  File Type String: B:",
        "  File Number: 3",
        "  Element (Word): 0",
        "  Subelement: 0x00",
        "  [Decoded Address: B:3.0/4]",
        "  Bit Selection Mask: 0x0010",
        "  Bit Number: 4 (from mask)",
        "  Data Value: 0x0000 (single byte format)",
        "  [Bit Value Written: 0]",
        "  [Operation Summary: Write B:3.0/4 = 0 (CLEAR)]",
    ]

    # Zero mask: the subelement's bit hint stands, but no operation is decoded
    decoded			= decode( b'\x0a\x00\x89\x07\x0a\x08\x00\x00\x12\x34' )
    assert present.tree( decoded )[6:] == [
        "    Bit Number: 3 (from subelement)",
        "    [Decoded Address: N:7.10/3]",
        "    Bit Selection Mask: 0x0000",
        "    Data Value: 0x1234",
    ]


def test_info():
    assert present.info( None ) == ""
    assert present.info( decode( b'\x0a\x00\x89\x07\x0a\x80\x00\x80\xff' )) == " [N:7.10/7=1]"
    assert present.info( decode( b'\x09\x00\x85\x03\x00\x00\x00\x10\x00' )) == " [B:3.0/4=0]"
    assert present.info( decode( b'\x08\x00\x85\x03\x02\x04\x00\x00' )) == " [B:3.2/2]"
    assert present.info( decode( b'\x0a\x00\x99\x01\x02\x03\x00\xff\x00\x00' )) == " [Unknown(0x99)1.2]"
