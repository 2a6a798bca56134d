# Copyright European Space Agency, 2013

"""
Projection providers evaluate forward and inverse projections for a
PROJ token string. Angles are in radians on both sides of the interface.

Each evaluation returns a :class:`ProviderResult` which carries either the
converted coordinate or an error message, so that no exception or
global error state is needed to detect failed evaluations.
"""

import logging
import math
from abc import ABCMeta, abstractmethod
from collections import namedtuple

from pyproj import Transformer
from pyproj.enums import TransformDirection
from pyproj.exceptions import CRSError, ProjError

from georef.errors import ConfigurationError

ProviderResult = namedtuple('ProviderResult', ['value', 'error'])
ProviderResult.__doc__ = """
value is an (x,y) or (lon,lat) tuple, or None if the evaluation failed.
error is None on success, otherwise a message describing the failure.
"""

class ProjectionProvider(metaclass=ABCMeta):
    """
    Interface of the external projection capability.
    
    A provider is exclusively owned by one
    :class:`~georef.projection.engine.ProjectionEngine`.
    """
    
    @abstractmethod
    def reconfigure(self, proj4Str):
        """
        (Re-)Initialize from a full PROJ token string.
        
        :raise ConfigurationError: if the string cannot be initialized from,
                                   the previous configuration stays active then
        """
    
    @property
    @abstractmethod
    def proj4Str(self):
        """The token string the provider was initialized with, or None."""
    
    @property
    @abstractmethod
    def lastError(self):
        """Error message of the most recent evaluation, None if it succeeded."""
    
    @abstractmethod
    def forward(self, lon, lat):
        """
        :param lon, lat: in radians
        :rtype: ProviderResult with (x,y) in projected units
        """
    
    @abstractmethod
    def inverse(self, x, y):
        """
        :param x, y: in projected units
        :rtype: ProviderResult with (lon,lat) in radians
        """

class PyprojProvider(ProjectionProvider):
    """
    Provider using a PROJ operation created by pyproj.
    
    The token string is used as a single coordinate operation (not as a CRS),
    so that operation-level flags like '+over' take effect.
    pyproj converts between degrees and the radians used by PROJ operations,
    so angles are passed to it in degrees.
    """
    def __init__(self, proj4Str=None):
        self._transformer = None
        self._proj4Str = None
        self._lastError = None
        if proj4Str is not None:
            self.reconfigure(proj4Str)
        
    def reconfigure(self, proj4Str):
        proj4Str = proj4Str.strip()
        if not proj4Str:
            raise ConfigurationError('Empty projection string')
        try:
            transformer = Transformer.from_pipeline(proj4Str)
        except (CRSError, ProjError) as e:
            raise ConfigurationError('PROJ failed to initialize on string: ' + proj4Str +
                                     '\n\tError was: ' + str(e)) from e
        logging.debug('PROJ initialized: ' + proj4Str)
        self._transformer = transformer
        self._proj4Str = proj4Str
        self._lastError = None
        
    @property
    def proj4Str(self):
        return self._proj4Str
    
    @property
    def lastError(self):
        return self._lastError
    
    def _evaluate(self, a, b, direction):
        if self._transformer is None:
            raise ConfigurationError('Projection provider is not initialized')
        try:
            u, v = self._transformer.transform(a, b, errcheck=True, direction=direction)
        except ProjError as e:
            self._lastError = 'PROJ error: ' + str(e)
            return ProviderResult(None, self._lastError)
        if not (math.isfinite(u) and math.isfinite(v)):
            self._lastError = 'PROJ error: non-finite result for ' + str((a, b))
            return ProviderResult(None, self._lastError)
        self._lastError = None
        return ProviderResult((u, v), None)
    
    def forward(self, lon, lat):
        return self._evaluate(math.degrees(lon), math.degrees(lat), TransformDirection.FORWARD)
    
    def inverse(self, x, y):
        res = self._evaluate(x, y, TransformDirection.INVERSE)
        if res.value is None:
            return res
        lon, lat = res.value
        return ProviderResult((math.radians(lon), math.radians(lat)), None)
    
    def __repr__(self):
        return 'PyprojProvider({0!r})'.format(self._proj4Str)
