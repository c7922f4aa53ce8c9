import logging
import os

from .decode import FILE_TYPES, PCCC_WRITE_MASK
from . import defaults

log				= logging.getLogger( "defaults_test" )


def test_config_paths():
    paths			= list( defaults.config_paths( 'pcccaddr.cfg', extra=[ '/opt/pccc' ] ))
    # Most general first, ending w/ the current directory (most specific)
    assert paths[-1] == 'pcccaddr.cfg'
    assert paths[-2] == os.path.join( '/opt/pccc', 'pcccaddr.cfg' )
    assert os.path.join( os.path.expanduser( '~' ), '.pcccaddr', 'pcccaddr.cfg' ) in paths
    # The installed package directory is the most general location
    assert paths[0] == os.path.join( os.path.dirname( defaults.__file__ ), 'pcccaddr.cfg' )
    assert defaults.config_files == list( defaults.config_paths( defaults.config_name ))


def test_file_types( tmp_path, caplog ):
    assert defaults.file_types() == FILE_TYPES
    assert defaults.file_types() is not FILE_TYPES

    cfg				= tmp_path / 'pcccaddr.cfg'
    cfg.write_text( """\
[File Types]
0x8E		= A:	# ASCII
0x86		= T:
137		= Int:	# 0x89, in decimal
0x1FF		= X:
bogus		= Y:
""" )
    config			= defaults.config_loader()
    assert config.read( [ str( cfg ) ] ) == [ str( cfg ) ]
    with caplog.at_level( logging.WARNING, logger="pccc.dflt" ):
        table			= defaults.file_types( config )
    assert table[0x8E] == "A:"
    assert table[0x86] == "T:"
    assert table[0x89] == "Int:"
    assert table[0x85] == "B:"
    assert 0x1FF not in table
    assert "bogus" in caplog.text
    assert "0x1ff" in caplog.text
    # The built-in table is unchanged
    assert FILE_TYPES[0x89] == "N:"
    assert 0x8E not in FILE_TYPES


def test_command_defaults():
    assert defaults.command_defaults() == ( PCCC_WRITE_MASK, 'tree' )

    config			= defaults.config_loader()
    config.read_string( """\
[pccc_decode]
fnc		= 0xA2
output		= json
""" )
    assert defaults.command_defaults( config ) == ( 0xA2, 'json' )

    config			= defaults.config_loader()
    config.read_string( """\
[pccc_decode]
fnc		= None
output		= fancy
""" )
    assert defaults.command_defaults( config ) == ( None, 'tree' )

    config			= defaults.config_loader()
    config.read_string( """\
[pccc_decode]
fnc		= 0x1234
""" )
    assert defaults.command_defaults( config ) == ( PCCC_WRITE_MASK, 'tree' )


def test_config_interpolation( caplog ):
    # A bad ${...} interpolation is a malformed entry like any other; the rest still load
    config			= defaults.config_loader()
    config.read_string( """\
[File Types]
0x8E		= $A:
0x86		= T:
0x87		= ${0x86}

[pccc_decode]
fnc		= ${nowhere:fnc}
output		= ${x}
""" )
    with caplog.at_level( logging.WARNING, logger="pccc.dflt" ):
        table			= defaults.file_types( config )
        assert defaults.command_defaults( config ) == ( PCCC_WRITE_MASK, 'tree' )
    assert table[0x86] == "T:"
    assert table[0x87] == "T:"
    assert 0x8E not in table
    assert "$A:" in caplog.text
    assert "${nowhere:fnc}" in caplog.text
    assert "${x}" in caplog.text
