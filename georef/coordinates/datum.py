# Copyright European Space Agency, 2013

"""
Reference ellipsoids (datums) of the modelled body.
"""

import math

from geographiclib.constants import Constants

from georef.errors import ConfigurationError

class Datum(object):
    """
    A reference ellipsoid together with its name, prime meridian and
    its PROJ token string.
    """
    def __init__(self, name, spheroidName, meridianName, semiMajorAxis, semiMinorAxis,
                 meridianOffset=0.0, proj4Str=None):
        """
        :param number semiMajorAxis: in meters
        :param number semiMinorAxis: in meters
        :param number meridianOffset: prime meridian offset in degrees
        :param str proj4Str: e.g. '+ellps=WGS84 +datum=WGS84', derived from the axes if None
        """
        if not (semiMajorAxis > 0 and semiMinorAxis > 0):
            raise ConfigurationError('Datum axes must be positive, got a=' + str(semiMajorAxis) +
                                     ' b=' + str(semiMinorAxis))
        self._name = name
        self._spheroidName = spheroidName
        self._meridianName = meridianName
        self._a = float(semiMajorAxis)
        self._b = float(semiMinorAxis)
        self._meridianOffset = float(meridianOffset)
        if proj4Str is None:
            proj4Str = '+a={0!r} +b={1!r}'.format(self._a, self._b)
        self._proj4Str = proj4Str.strip()
        
    @property
    def name(self):
        return self._name
    
    @property
    def spheroidName(self):
        return self._spheroidName
    
    @property
    def meridianName(self):
        return self._meridianName
    
    @property
    def semiMajorAxis(self):
        return self._a
    
    @property
    def semiMinorAxis(self):
        return self._b
    
    @property
    def meridianOffset(self):
        return self._meridianOffset
    
    @property
    def proj4Str(self):
        return self._proj4Str
    
    @property
    def inverseFlattening(self):
        """
        a/(a-b), infinite for a sphere.
        """
        if self._a == self._b:
            return math.inf
        return self._a / (self._a - self._b)
    
    @property
    def isSphere(self):
        return self._a == self._b
    
    def replace(self, **kw):
        """
        Return a copy with the given constructor arguments replaced.
        """
        args = dict(name=self._name, spheroidName=self._spheroidName,
                    meridianName=self._meridianName, semiMajorAxis=self._a,
                    semiMinorAxis=self._b, meridianOffset=self._meridianOffset,
                    proj4Str=self._proj4Str)
        args.update(kw)
        return Datum(**args)
    
    @staticmethod
    def wellKnown(name):
        """
        Return one of the well-known datums.
        
        :param str name: WGS84 (or WGS_1984), WGS72, NAD83, NAD27, D_MOON or D_MARS
        :raise ConfigurationError: for unknown names
        """
        key = name.strip().upper()
        key = _aliases.get(key, key)
        if key not in _wellKnown:
            raise ConfigurationError('Unknown datum: ' + name + '. Supported are: ' +
                                     ', '.join(sorted(_wellKnown)))
        return Datum(*_wellKnown[key])
    
    def __eq__(self, obj):
        return isinstance(obj, Datum) and \
           self.name == obj.name and self.spheroidName == obj.spheroidName and \
           self.meridianName == obj.meridianName and \
           self.semiMajorAxis == obj.semiMajorAxis and self.semiMinorAxis == obj.semiMinorAxis and \
           self.meridianOffset == obj.meridianOffset and self.proj4Str == obj.proj4Str
           
    def __ne__(self, obj):
        return not self == obj
    
    def __repr__(self):
        return 'Datum(name={0!r}, spheroidName={1!r}, meridianName={2!r}, semiMajorAxis={3}, ' \
               'semiMinorAxis={4}, meridianOffset={5}, proj4Str={6!r})'.format(
                       self.name, self.spheroidName, self.meridianName, self.semiMajorAxis,
                       self.semiMinorAxis, self.meridianOffset, self.proj4Str)
        
    def __str__(self):
        return 'Datum: {0} (spheroid: {1}, a={2} b={3}, meridian: {4} at {5}deg) proj4: {6}'.format(
                       self.name, self.spheroidName, self.semiMajorAxis, self.semiMinorAxis,
                       self.meridianName, self.meridianOffset, self.proj4Str)

_wgs84B = Constants.WGS84_a * (1 - Constants.WGS84_f)

# name, spheroid name, meridian name, a, b, meridian offset, proj4 string
_wellKnown = {
    'WGS_1984': ('WGS_1984', 'WGS 84', 'Greenwich', Constants.WGS84_a, _wgs84B, 0.0,
                 '+ellps=WGS84 +datum=WGS84'),
    'WGS_1972': ('WGS_1972', 'WGS 72', 'Greenwich', 6378135.0, 6378135.0 * (1 - 1/298.26), 0.0,
                 '+ellps=WGS72'),
    'NAD83': ('North_American_Datum_1983', 'GRS 1980', 'Greenwich', 6378137.0, 6356752.31414036, 0.0,
              '+ellps=GRS80 +datum=NAD83'),
    'NAD27': ('North_American_Datum_1927', 'Clarke 1866', 'Greenwich', 6378206.4, 6356583.8, 0.0,
              '+ellps=clrk66 +datum=NAD27'),
    'D_MOON': ('D_MOON', 'MOON', 'Reference Meridian', 1737400.0, 1737400.0, 0.0,
               '+a=1737400 +b=1737400'),
    'D_MARS': ('D_MARS', 'MARS', 'Reference Meridian', 3396190.0, 3396190.0, 0.0,
               '+a=3396190 +b=3396190'),
    }

_aliases = {'WGS84': 'WGS_1984', 'WGS 84': 'WGS_1984',
            'WGS72': 'WGS_1972', 'WGS 72': 'WGS_1972',
            'NAD_1983': 'NAD83', 'NAD_1927': 'NAD27'}

WGS84_SPHEROID_NAMES = ('WGS_1984', 'WGS84', 'WGS 84')
