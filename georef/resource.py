# Copyright European Space Agency, 2013

"""
Reading and writing georeferencing information from and to raster resources.

File formats are implemented elsewhere as subclasses of
:class:`GeoReferenceResource`. Which operations a resource supports is
queried explicitly through :meth:`~GeoReferenceResource.canReadGeoReference`
and :meth:`~GeoReferenceResource.canWriteGeoReference`.
"""

import copy
from abc import ABCMeta, abstractmethod

from georef.errors import UnsupportedOperationError

class GeoReferenceResource(metaclass=ABCMeta):
    """
    Base class for raster resources which may carry georeferencing information.
    """
    
    @abstractmethod
    def canReadGeoReference(self):
        """
        Return whether georeferencing information can be read from this resource.
        """
    
    @abstractmethod
    def canWriteGeoReference(self):
        """
        Return whether georeferencing information can be written to this resource.
        """
        
    @abstractmethod
    def _readGeoReference(self):
        """
        :rtype: GeoReference or None if the resource is not georeferenced
        """
    
    @abstractmethod
    def _writeGeoReference(self, georef):
        pass
    
    def readHeaderString(self, name):
        """
        Return a named header value, or None if not present.
        
        :raise UnsupportedOperationError: if the resource has no header values
        """
        raise UnsupportedOperationError(type(self).__name__ + ' does not support reading header values.')
    
    def writeHeaderString(self, name, value):
        """
        :raise UnsupportedOperationError: if the resource is read-only
        """
        raise UnsupportedOperationError(type(self).__name__ + ' does not support writing header values.')

def readGeoReference(resource):
    """
    Return the georeference of a resource, or None if it has none or
    the resource cannot provide one.
    
    :type resource: GeoReferenceResource
    :rtype: georef.mapping.georeference.GeoReference or None
    """
    if not resource.canReadGeoReference():
        return None
    return resource._readGeoReference()

def writeGeoReference(resource, georef):
    """
    :type resource: GeoReferenceResource
    :type georef: georef.mapping.georeference.GeoReference
    :raise UnsupportedOperationError: if the resource does not support writing georeferencing information
    """
    if not resource.canWriteGeoReference():
        raise UnsupportedOperationError('This image resource does not support writing georeferencing information.')
    resource._writeGeoReference(georef)

class MemoryResource(GeoReferenceResource):
    """
    Keeps georeferencing information and header values in memory,
    e.g. next to an image array.
    
    Stored georeferences are copies, later changes of the caller's
    object do not affect the resource and vice versa.
    """
    def __init__(self, georef=None, header=None, readOnly=False):
        self._georef = copy.copy(georef) if georef is not None else None
        self._header = dict(header or {})
        self._readOnly = readOnly
        
    @property
    def readOnly(self):
        return self._readOnly
    
    def canReadGeoReference(self):
        return True
    
    def canWriteGeoReference(self):
        return not self._readOnly
    
    def _readGeoReference(self):
        if self._georef is None:
            return None
        return copy.copy(self._georef)
    
    def _writeGeoReference(self, georef):
        self._georef = copy.copy(georef)
        
    def readHeaderString(self, name):
        return self._header.get(name)
    
    def writeHeaderString(self, name, value):
        if self._readOnly:
            raise UnsupportedOperationError('This image resource is read-only.')
        self._header[name] = str(value)
