# Copyright European Space Agency, 2013

"""
Conversion between projected points and geographic longitude/latitude
in degrees, driven by a PROJ token string and a datum.
"""

import logging
import math
import sys

from georef.errors import ConfigurationError, ProjectionMathError
from georef.coordinates.datum import Datum
from georef.coordinates.longitude import normalizeLongitude
from georef.projection import proj4
from georef.projection.provider import PyprojProvider

# PROJ refuses latitudes beyond pi/2, which edge pixels sometimes reach
LAT_BOUND = math.pi/2 - 1e-10 - sys.float_info.epsilon

def clampLatitude(lat):
    """
    :param lat: latitude in radians
    """
    return max(-LAT_BOUND, min(LAT_BOUND, lat))

def overallProj4Str(proj4Str, datum):
    """
    Return the full token string of a projection and datum.
    """
    return proj4.joinProj4(proj4Str, datum.proj4Str, '+no_defs')

class ProjectionEngine(object):
    """
    Owns the provider for the current projection and datum.
    
    Unless the projection is geographic (``+proj=longlat``), points are converted
    by the provider. Geographic projections pass coordinates through unchanged.
    
    Copies of an engine get a new provider initialized from the same configuration.
    """
    def __init__(self, proj4Str=None, datum=None, providerFactory=PyprojProvider):
        """
        :param str proj4Str: projection tokens without datum, '+proj=longlat' if None
        :param Datum datum: WGS84 if None
        :param providerFactory: callable returning an uninitialized
                                :class:`~georef.projection.provider.ProjectionProvider`
        :raise ConfigurationError: if the provider cannot be initialized
        """
        self._providerFactory = providerFactory
        self._provider = None
        self._proj4Str = None
        self._datum = None
        self._isProjected = False
        if proj4Str is None:
            proj4Str = proj4.geographic()
        if datum is None:
            datum = Datum.wellKnown('WGS84')
        self.reconfigure(proj4Str, datum)
        
    @property
    def proj4Str(self):
        """
        The projection tokens, without datum tokens.
        """
        return self._proj4Str
    
    @property
    def overallProj4Str(self):
        """
        The projection tokens followed by the datum tokens and '+no_defs'.
        """
        return overallProj4Str(self._proj4Str, self._datum)
    
    @property
    def datum(self):
        return self._datum
    
    @property
    def isProjected(self):
        return self._isProjected
    
    @property
    def provider(self):
        return self._provider
    
    def reconfigure(self, proj4Str, datum):
        """
        Rebuild the provider for a new projection and datum.
        
        '+over' is appended to the projection so that the provider does not
        wrap longitudes into [-180,180]. UTM does not need it.
        
        :raise ConfigurationError: if the string is empty or the provider cannot be
                                   initialized, the engine is unchanged then
        """
        proj4Str = proj4Str.strip()
        if not proj4Str:
            raise ConfigurationError('Empty projection string')
        if proj4.projName(proj4Str) is None:
            raise ConfigurationError('Projection string has no +proj token: ' + proj4Str)
        if not proj4.hasToken(proj4Str, '+over') and not proj4.isUTM(proj4Str):
            proj4Str = proj4.appendToken(proj4Str, '+over')
        self._install(proj4Str, datum)
        
    def _install(self, proj4Str, datum):
        provider = self._providerFactory()
        provider.reconfigure(overallProj4Str(proj4Str, datum))
        
        self._provider = provider
        self._proj4Str = proj4Str
        self._datum = datum
        self._isProjected = not proj4.isGeographic(proj4Str)
        
    def clearOver(self):
        """
        Strip '+over' from the projection and rebuild the provider if needed.
        Used once longitudes are known to stay within [-180,180].
        
        :rtype: bool
        :return: whether the projection changed
        """
        stripped = proj4.removeToken(self._proj4Str, '+over')
        if stripped == self._proj4Str:
            return False
        self._install(stripped, self._datum)
        logging.debug('Removed +over from projection: ' + stripped)
        return True
    
    def tryForward(self, lonlat):
        """
        As :meth:`forward` but returns None instead of raising ProjectionMathError.
        """
        lon, lat = lonlat
        if not self._isProjected:
            return (lon, lat)
        res = self._provider.forward(math.radians(lon), clampLatitude(math.radians(lat)))
        return res.value
        
    def forward(self, lonlat):
        """
        Project a longitude/latitude pair.
        
        The latitude is clamped to just within [-90,90] degrees.
        Longitudes are passed on unchanged.
        
        :param lonlat: (lon,lat) in degrees
        :rtype: tuple (x,y)
        :raise ProjectionMathError: if the provider cannot evaluate the coordinate
        """
        lon, lat = lonlat
        if not self._isProjected:
            return (lon, lat)
        res = self._provider.forward(math.radians(lon), clampLatitude(math.radians(lat)))
        if res.error is not None:
            raise ProjectionMathError(res.error + ' (lon=' + str(lon) + ', lat=' + str(lat) + ')')
        return res.value
    
    def tryInverse(self, point):
        """
        As :meth:`inverse` but returns None instead of raising ProjectionMathError.
        """
        if not self._isProjected:
            return tuple(point)
        res = self._provider.inverse(point[0], point[1])
        if res.error is not None:
            return None
        return (math.degrees(res.value[0]), math.degrees(res.value[1]))
    
    def inverse(self, point):
        """
        Unproject a point. The longitude is returned as computed by the provider,
        without wrapping it into a particular window.
        
        :param point: (x,y) projected coordinate
        :rtype: tuple (lon,lat) in degrees
        :raise ProjectionMathError: if the provider cannot evaluate the coordinate
        """
        if not self._isProjected:
            return tuple(point)
        res = self._provider.inverse(point[0], point[1])
        if res.error is not None:
            raise ProjectionMathError(res.error + ' (x=' + str(point[0]) + ', y=' + str(point[1]) + ')')
        return (math.degrees(res.value[0]), math.degrees(res.value[1]))
    
    def inverseNormalized(self, point, centerLonZero):
        """
        As :meth:`inverse` with the longitude wrapped into [-180,180) if
        `centerLonZero` is True, otherwise into [0,360).
        """
        lon, lat = self.inverse(point)
        return (normalizeLongitude(lon, centerLonZero), lat)
    
    def __copy__(self):
        other = self.__class__.__new__(self.__class__)
        other._providerFactory = self._providerFactory
        other._install(self._proj4Str, self._datum)
        return other
    
    def __deepcopy__(self, memo):
        return self.__copy__()
    
    def __repr__(self):
        return 'ProjectionEngine({0!r})'.format(self.overallProj4Str)
