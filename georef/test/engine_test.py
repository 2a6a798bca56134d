# Copyright European Space Agency, 2013

import copy
import math
import unittest

import numpy as np
from numpy.testing import assert_almost_equal, assert_array_almost_equal

from georef.errors import ConfigurationError, ProjectionMathError
from georef.coordinates.datum import Datum
from georef.projection.engine import ProjectionEngine, LAT_BOUND, clampLatitude
from georef.projection.provider import ProjectionProvider, ProviderResult

class RecordingProvider(ProjectionProvider):
    """
    Records the coordinates it is called with and returns them unchanged.
    """
    def __init__(self):
        self._proj4Str = None
        self.calls = []
        
    def reconfigure(self, proj4Str):
        if 'fail' in proj4Str:
            raise ConfigurationError('rejected: ' + proj4Str)
        self._proj4Str = proj4Str
        
    @property
    def proj4Str(self):
        return self._proj4Str
    
    @property
    def lastError(self):
        return None
    
    def forward(self, lon, lat):
        self.calls.append((lon, lat))
        return ProviderResult((lon, lat), None)
    
    def inverse(self, x, y):
        self.calls.append((x, y))
        return ProviderResult((x, y), None)

class Test(unittest.TestCase):
    
    def testOverAppended(self):
        engine = ProjectionEngine('+proj=merc +units=m')
        self.assertEqual(engine.proj4Str, '+proj=merc +units=m +over')
        self.assertTrue(engine.isProjected)
        self.assertEqual(engine.overallProj4Str,
                         '+proj=merc +units=m +over +ellps=WGS84 +datum=WGS84 +no_defs')
        
        # not appended twice
        engine = ProjectionEngine('+proj=merc +over +units=m')
        self.assertEqual(engine.proj4Str, '+proj=merc +over +units=m')
        
    def testUTMWithoutOver(self):
        engine = ProjectionEngine('+proj=utm +zone=11 +units=m')
        self.assertEqual(engine.proj4Str, '+proj=utm +zone=11 +units=m')
        
    def testClearOver(self):
        engine = ProjectionEngine('+proj=merc +units=m')
        provider = engine.provider
        self.assertTrue(engine.clearOver())
        self.assertEqual(engine.proj4Str, '+proj=merc +units=m')
        self.assertIsNot(engine.provider, provider)
        self.assertFalse(engine.clearOver())
        
    def testInvalid(self):
        with self.assertRaises(ConfigurationError):
            ProjectionEngine('')
        with self.assertRaises(ConfigurationError):
            ProjectionEngine('+units=m')
        with self.assertRaises(ConfigurationError):
            ProjectionEngine('+proj=doesnotexist +units=m')
            
    def testReconfigureKeepsStateOnFailure(self):
        engine = ProjectionEngine('+proj=merc +units=m')
        provider = engine.provider
        with self.assertRaises(ConfigurationError):
            engine.reconfigure('+proj=doesnotexist', Datum.wellKnown('WGS84'))
        self.assertEqual(engine.proj4Str, '+proj=merc +units=m +over')
        self.assertIs(engine.provider, provider)
        
    def testGeographicPassthrough(self):
        engine = ProjectionEngine()
        self.assertFalse(engine.isProjected)
        self.assertEqual(engine.forward((190, 45)), (190, 45))
        self.assertEqual(engine.inverse((-200, 10)), (-200, 10))
        assert_almost_equal(engine.inverseNormalized((-200, 10), True), (160, 10))
        
    def testRoundTrip(self):
        engine = ProjectionEngine('+proj=merc +lon_0=0 +units=m')
        for lonlat in [(0, 0), (10, 45), (-120, -30), (179, 70)]:
            point = engine.forward(lonlat)
            assert_array_almost_equal(engine.inverse(point), lonlat, 8)
            
    def testOverKeepsLongitude(self):
        engine = ProjectionEngine('+proj=eqc +lon_0=0 +units=m')
        lon, _ = engine.inverse(engine.forward((200, 10)))
        assert_almost_equal(lon, 200, 8)
        assert_almost_equal(engine.inverseNormalized(engine.forward((200, 10)), True)[0], -160, 8)
        
    def testPoleClamp(self):
        self.assertEqual(clampLatitude(math.pi), LAT_BOUND)
        self.assertEqual(clampLatitude(-math.pi), -LAT_BOUND)
        self.assertEqual(clampLatitude(0.5), 0.5)
        
        for proj in ['+proj=stere +lat_0=90 +lon_0=0 +units=m', '+proj=eqc +units=m']:
            engine = ProjectionEngine(proj)
            point = engine.forward((0, 90.00001))
            self.assertTrue(np.all(np.isfinite(point)))
            point = engine.forward((0, -90.00001))
            self.assertTrue(np.all(np.isfinite(point)))
            
    def testClampedValuePassedToProvider(self):
        engine = ProjectionEngine('+proj=fake', providerFactory=RecordingProvider)
        engine.forward((90, 95))
        lon, lat = engine.provider.calls[-1]
        assert_almost_equal(lon, math.pi/2)
        self.assertEqual(lat, LAT_BOUND)
        
    def testMathError(self):
        engine = ProjectionEngine('+proj=ortho +lon_0=0 +lat_0=0 +units=m')
        with self.assertRaises(ProjectionMathError):
            engine.inverse((1e8, 1e8))
        self.assertIsNone(engine.tryInverse((1e8, 1e8)))
        self.assertIsNotNone(engine.provider.lastError)
        
        # the hidden hemisphere
        with self.assertRaises(ProjectionMathError):
            engine.forward((180, 0))
        self.assertIsNone(engine.tryForward((180, 0)))
        
        # the provider recovers
        self.assertIsNotNone(engine.tryForward((10, 10)))
        self.assertIsNone(engine.provider.lastError)
        
    def testCopy(self):
        engine = ProjectionEngine('+proj=merc +units=m')
        engine.clearOver()
        other = copy.copy(engine)
        self.assertIsNot(other.provider, engine.provider)
        self.assertEqual(other.proj4Str, '+proj=merc +units=m')
        self.assertEqual(other.datum, engine.datum)
        
        other.reconfigure('+proj=eqc +units=m', Datum.wellKnown('D_MOON'))
        self.assertEqual(engine.proj4Str, '+proj=merc +units=m')
        self.assertEqual(engine.datum, Datum.wellKnown('WGS84'))
        
    def testProviderFailureKeepsState(self):
        engine = ProjectionEngine('+proj=fake', providerFactory=RecordingProvider)
        with self.assertRaises(ConfigurationError):
            engine.reconfigure('+proj=fail', engine.datum)
        self.assertEqual(engine.proj4Str, '+proj=fake +over')
