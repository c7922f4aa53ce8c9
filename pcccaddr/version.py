__version__			= "1.0.0"
__version_info__		= tuple( map( int, __version__.split( '.' )))
