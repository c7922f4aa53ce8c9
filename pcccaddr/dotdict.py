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

import copy

__all__				= [ 'dotdict' ]


class dotdict( dict ):
    """A dict supporting keys containing dots, to access a heirarchy of dotdicts.  If the keys form
    valid attribute names, values are also accessible via dotted attribute name access:

        >>> d = dotdict()
        >>> d["pccc_addr.file_num"] = 7
        >>> d.pccc_addr.file_num
        7

    While the key iterator only returns actual value keys (in full dotted form):

        >>> [k for k in d]
        ['pccc_addr.file_num']

    the test for 'in' returns partially specified keys (so setdefault works):

        >>> 'pccc_addr' in d
        True

    No item matching one of the standard dict interface methods may be added; these keys result in
    a KeyError exception.

    """
    __slots__			= ()
    __invalid_keys__		= (
        'clear', 'copy', 'get', 'set', 'items',
        'listitems', 'listkeys', 'listvalues',
        'keys', 'values',
        'pop', 'popitem', 'setdefault', 'update',
    )

    def __init__( self, *args, **kwds ):
        """Load from args, update from kwds"""
        super( dotdict, self ).__init__()
        self.update( *args, **kwds )

    def update( self, *args, **kwds ):
        """Give each dict or k,v iterable, and all keywords a chance to be converted into a dotdict() layer."""
        assert 0 <= len( args ) <= 1, "A single dict or iterable of key/value pairs is allowed"
        if args and isinstance( args[0], dotdict ):
            args		= (args[0].listitems(),)
        for key, val in dict( *args, **kwds ).items():
            self.__setitem__( key, val )

    def __dir__( self ):
        """Present the top-level keys (and the magic methods) as our attributes."""
        return sorted(
            [
                a for a in dir( super( dotdict, self ))
                if a.startswith( '__' )
            ] + list( super( dotdict, self ).keys())
        )

    @staticmethod
    def _resolve( key ):
        """Return next segment in key as (mine, rest); leading '.' are ignored."""
        mine, rest		= key.lstrip( '.' ), None
        if '.' in mine:
            mine, rest		= mine.split( '.', 1 )
        if not mine or rest == '':
            raise KeyError( 'cannot resolve "%s"' % ( key ))
        return mine, rest

    def __setitem__( self, key, value ):
        mine,rest		= self._resolve( key )
        if rest:
            target		= super( dotdict, self ).setdefault( mine, dotdict() )
            if not isinstance( target, dotdict ):
                raise KeyError( 'cannot set "%s" in "%s" (%r)' % ( rest, mine, target ))
            target[rest]	= value
            return
        if isinstance( value, dict ) and not isinstance( value, dotdict ):
            value		= self.__class__( value )
        if mine in self.__invalid_keys__ or mine.startswith( '__' ):
            raise KeyError( "A dotdict cannot support insertion of item/attribute with name {!r}".format( mine ))
        super( dotdict, self ).__setitem__( mine, value )

    def __setattr__( self, key, value ):
        self.__setitem__( key, value )

    def __getitem__( self, key ):
        mine,rest		= self._resolve( key )
        target			= super( dotdict, self ).__getitem__( mine )
        if rest is None:
            return target
        if not isinstance( target, dotdict ):
            raise KeyError( 'cannot get "%s" in "%s" (%r)' % ( rest, mine, target ))
        return target[rest]

    def __getattr__( self, key ):
        """The hasattr builtin uses getattr to identify the existence of attributes; it must raise
        AttributeError if the attribute doesn't exist."""
        try:
            return self.__getitem__( key )
        except KeyError as exc:
            raise AttributeError( str( exc ))

    def __contains__( self, key ):
        """Return True if anything exists in the dotdict at the given key, including another layer of
        dotdict, so that setdefault does not wipe out existing layers."""
        try:
            self.__getitem__( key )
            return True
        except KeyError:
            return False

    def __delitem__( self, key ):
        """Only delete keys that are not non-empty layers of dotdict."""
        mine,rest		= self._resolve( key )
        target			= super( dotdict, self ).__getitem__( mine )
        if rest is None:
            if isinstance( target, dotdict ) and len( target ):
                raise KeyError( 'cannot del "%s" (partial key)' % ( mine ))
            return super( dotdict, self ).__delitem__( mine )
        del target[rest]

    def setdefault( self, key, default ):
        if key not in self:
            self[key]		= default
        return self[key]

    def get( self, key, default=None ):
        try:
            return self.__getitem__( key )
        except KeyError:
            return default

    set				= __setitem__

    def iteritems( self, depth=None ):
        """Issue keys for layers of dotdict() in a.b.c... form.  An optional depth limits the key
        length; to approximate the normal dict.items(), call with depth=1.

        """
        for key,val in super( dotdict, self ).items():
            if isinstance( val, dotdict ) and val and ( depth is None or depth > 1 ):
                for subkey,subval in val.iteritems( None if depth is None else depth - 1 ):
                    yield key+'.'+subkey, subval
            else:
                yield key, val

    def listitems( self, depth=None ):
        return list( self.iteritems( depth=depth ))

    def itervalues( self, depth=None ):
        for key,val in self.iteritems( depth=depth ):
            yield val

    def listvalues( self, depth=None ):
        return list( self.itervalues( depth=depth ))

    def iterkeys( self, depth=None ):
        for key,val in self.iteritems( depth=depth ):
            yield key

    def listkeys( self, depth=None ):
        return list( self.iterkeys( depth=depth ))

    __iter__			= iterkeys
    keys			= iterkeys
    values			= itervalues
    items			= iteritems

    def __deepcopy__( self, memo ):
        """Must copy each layer, to avoid copying keys that reference non-existent members."""
        return type( self )( (k,copy.deepcopy( v, memo ))
                             for k,v in super( dotdict, self ).items() )

    def __copy__( self ):
        return type( self )( (k,copy.copy( v ))
                             for k,v in super( dotdict, self ).items() )
